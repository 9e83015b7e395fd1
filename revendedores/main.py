import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager

from revendedores.config.settings import settings
from revendedores.config.database import Base, engine
from revendedores.core.middleware import setup_middleware
from revendedores.api.v1.router import api_router
from revendedores.shared.database import models  # noqa: F401  registra las tablas

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.app_name} iniciando - versión {settings.version}")
    logger.info(f"Entorno: {'Desarrollo' if settings.debug else 'Producción'}")
    
    yield
    
    # Shutdown
    logger.info(f"{settings.app_name} detenido")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Inventario y punto de venta para revendedores",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Revendedores Pro API",
        "version": settings.version,
        "status": "running",
        "api": "/api/v1"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "revendedores.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

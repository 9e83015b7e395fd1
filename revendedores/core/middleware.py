import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from revendedores.config.settings import settings

logger = logging.getLogger(__name__)

# Rutas que se consultan seguido y no vale la pena registrar
QUIET_PATHS = ("/", "/api/v1/health")

def setup_middleware(app: FastAPI):
    """CORS para la app móvil y registro de cada petición"""

    # Expo web y el cliente móvil en desarrollo
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=3600
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        if request.url.path not in QUIET_PATHS:
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.4f}s)"
            )
        return response

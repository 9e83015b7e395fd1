from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .settings import settings

def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite ignora las llaves foráneas si no se activan por conexión;
    sin esto un cliente borrado no deja sus pedidos con client_id NULL.
    """
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def _build_engine(database_url: str) -> Engine:
    is_sqlite = database_url.startswith("sqlite")
    engine = create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=settings.debug,
        # El archivo local se usa desde el event loop y el threadpool
        connect_args={"check_same_thread": False} if is_sqlite else {}
    )
    if is_sqlite:
        enable_sqlite_foreign_keys(engine)
    return engine

engine = _build_engine(settings.database_url)

# Una sesión por petición, commit explícito en los servicios
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Tablas de usuarios, catálogo, clientes y pedidos
Base = declarative_base()

def get_db():
    """Sesión de base de datos para los endpoints; se cierra al terminar la petición"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from revendedores.config.database import get_db
from revendedores.shared.database.models import User
from .security import decode_access_token

security_scheme = HTTPBearer(auto_error=False)


def get_user_from_token(db: Session, token: str) -> Optional[User]:
    """
    Resolver el usuario dueño de un token; None si el token no sirve
    """
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    return db.query(User).filter(User.id == user_id).first()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Sin sesión no hay catálogo ni pedidos: todo endpoint de datos depende de esto
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Debes iniciar sesión",
            headers={"WWW-Authenticate": "Bearer"}
        )
    
    user = get_user_from_token(db, credentials.credentials)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sesión inválida o expirada",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return user

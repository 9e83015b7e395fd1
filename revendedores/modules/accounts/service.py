# revendedores/modules/accounts/service.py
import logging
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from revendedores.core.auth.security import create_access_token, hash_password, verify_password
from revendedores.shared.database.models import User
from .repository import AccountsRepository
from .schemas import RegisterRequest, LoginRequest, ProfileUpdate, UserResponse, TokenResponse

logger = logging.getLogger(__name__)

class AccountsService:
    """
    Registro, inicio de sesión y perfil del negocio
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = AccountsRepository(db)

    def _token_response(self, user: User) -> TokenResponse:
        return TokenResponse(
            access_token=create_access_token(user.id),
            user=UserResponse.model_validate(user)
        )

    async def register(self, register_data: RegisterRequest) -> TokenResponse:
        if self.repository.get_user_by_email(register_data.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Ese correo ya está registrado"
            )

        try:
            user = self.repository.create_user({
                "email": register_data.email,
                "password_hash": hash_password(register_data.password),
                # El nombre se usa como negocio por defecto
                "business_name": register_data.business_name,
                "phone": "",
                "photo_url": ""
            })
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=409, detail="Ese correo ya está registrado")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error registrando usuario {register_data.email}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo registrar")

        logger.info(f"Usuario {user.id} registrado")
        return self._token_response(user)

    async def login(self, login_data: LoginRequest) -> TokenResponse:
        user = self.repository.get_user_by_email(login_data.email)
        if not user or not verify_password(login_data.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Correo o contraseña incorrectos"
            )
        return self._token_response(user)

    async def update_profile(self, user: User, profile_data: ProfileUpdate) -> UserResponse:
        try:
            user = self.repository.update_user(user, profile_data.model_dump())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error actualizando perfil {user.id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo actualizar el perfil")
        return UserResponse.model_validate(user)

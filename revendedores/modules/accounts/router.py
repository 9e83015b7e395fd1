# revendedores/modules/accounts/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from revendedores.config.database import get_db
from revendedores.core.auth.dependencies import get_current_user
from revendedores.shared.database.models import User
from .service import AccountsService
from .schemas import RegisterRequest, LoginRequest, ProfileUpdate, UserResponse, TokenResponse

router = APIRouter(prefix="/auth", tags=["Autenticación"])

@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(register_data: RegisterRequest, db: Session = Depends(get_db)):
    """
    Crear cuenta de negocio y devolver token de sesión
    """
    service = AccountsService(db)
    return await service.register(register_data)

@router.post("/login", response_model=TokenResponse)
async def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    service = AccountsService(db)
    return await service.login(login_data)

@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)

@router.put("/me", response_model=UserResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Actualizar nombre del negocio, teléfono y logo
    """
    service = AccountsService(db)
    return await service.update_profile(current_user, profile_data)

# revendedores/modules/clients/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from revendedores.config.database import get_db
from revendedores.core.auth.dependencies import get_current_user
from revendedores.shared.database.models import User
from .service import ClientsService
from .schemas import ClientCreate, ClientResponse

router = APIRouter(prefix="/clients", tags=["Clientes"])

@router.get("", response_model=List[ClientResponse])
async def list_clients(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Directorio de clientes ordenado por nombre, con enlace de WhatsApp
    """
    service = ClientsService(db)
    return await service.list_clients(current_user)

@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    client_data: ClientCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = ClientsService(db)
    return await service.create_client(current_user, client_data)

@router.delete("/{client_id}")
async def delete_client(
    client_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = ClientsService(db)
    return await service.delete_client(current_user, client_id)

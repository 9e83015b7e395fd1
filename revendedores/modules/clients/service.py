# revendedores/modules/clients/service.py
import logging
from typing import List, Dict, Any
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from revendedores.core.realtime import hub
from revendedores.shared.database.models import Client, User
from revendedores.shared.messaging import whatsapp_url
from .repository import ClientsRepository
from .schemas import ClientCreate, ClientResponse

logger = logging.getLogger(__name__)

class ClientsService:
    """
    Servicio del directorio de clientes (CRM)
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ClientsRepository(db)

    @staticmethod
    def client_response(client: Client) -> ClientResponse:
        return ClientResponse(
            id=client.id,
            name=client.name,
            phone=client.phone,
            address=client.address,
            created_at=client.created_at,
            whatsapp_url=whatsapp_url(client.phone)
        )

    async def list_clients(self, owner: User) -> List[ClientResponse]:
        return [self.client_response(c) for c in self.repository.get_clients_by_owner(owner.id)]

    async def create_client(self, owner: User, client_data: ClientCreate) -> ClientResponse:
        try:
            client = self.repository.create_client(
                owner.id, client_data.name, client_data.phone, client_data.address
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error guardando cliente de usuario {owner.id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo guardar el cliente")

        response = self.client_response(client)
        hub.publish(owner.id, "clients", "created", response.model_dump(mode="json"))
        return response

    async def delete_client(self, owner: User, client_id: int) -> Dict[str, Any]:
        """
        Borrar cliente; los pedidos conservan su nombre copiado
        """
        client = self.repository.get_client(owner.id, client_id)
        if not client:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cliente no encontrado"
            )

        snapshot = self.client_response(client).model_dump(mode="json")
        try:
            self.repository.delete_client(client)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error borrando cliente {client_id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo borrar el cliente")

        hub.publish(owner.id, "clients", "deleted", snapshot)
        return {"success": True, "client_id": client_id}

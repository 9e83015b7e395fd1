# revendedores/modules/clients/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func

from revendedores.shared.database.models import Client

class ClientsRepository:
    """
    Repositorio del directorio de clientes
    """

    def __init__(self, db: Session):
        self.db = db

    def get_clients_by_owner(self, owner_id: int) -> List[Client]:
        """Clientes ordenados por nombre"""
        return self.db.query(Client).filter(
            Client.owner_id == owner_id
        ).order_by(func.lower(Client.name), Client.id).all()

    def get_client(self, owner_id: int, client_id: int) -> Optional[Client]:
        return self.db.query(Client).filter(
            Client.id == client_id,
            Client.owner_id == owner_id
        ).first()

    def create_client(self, owner_id: int, name: str, phone: str, address: str) -> Client:
        client = Client(owner_id=owner_id, name=name, phone=phone, address=address)
        self.db.add(client)
        self.db.commit()
        self.db.refresh(client)
        return client

    def delete_client(self, client: Client) -> None:
        self.db.delete(client)
        self.db.commit()

# revendedores/modules/accounts/repository.py
from typing import Optional, Dict, Any
from sqlalchemy.orm import Session

from revendedores.shared.database.models import User

class AccountsRepository:
    """
    Repositorio de usuarios (dueños de negocio)
    """

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, user_data: Dict[str, Any]) -> User:
        user = User(**user_data)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_user(self, user: User, update_data: Dict[str, Any]) -> User:
        for key, value in update_data.items():
            if hasattr(user, key) and value is not None:
                setattr(user, key, value)
        self.db.commit()
        self.db.refresh(user)
        return user

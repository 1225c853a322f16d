"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.domain.entities import Role, User
from app.infrastructure.models import UserModel


class UserRepository:
    """Provide lookups for the accounts that call the API."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_email(self, email: str) -> User | None:
        model = (
            self._query()
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            role_id=user.role.id,
            name=user.name,
            email=user.email.strip().lower(),
            is_active=user.is_active,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        if model.role is None:
            self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def _query(self):
        return self.session.query(UserModel).options(joinedload(UserModel.role))

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=Role(id=model.role.id, name=model.role.name, alias=model.role.alias),
            name=model.name,
            email=model.email,
            is_active=bool(model.is_active),
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]

"""SQLAlchemy model for account roles."""

from sqlalchemy import Column, Integer, String

from app.infrastructure.database import Base


class RoleModel(Base):
    """Roles known to the platform (student, teacher, agent, admin, super_admin)."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    alias = Column(String(30), nullable=False, unique=True)


__all__ = ["RoleModel"]

"""
User database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from controle_gastos.database import Base


class Usuario(Base):
    """Authentication principal. `senha` holds a bcrypt hash."""

    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    senha = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    transacoes = relationship("Transacao", back_populates="usuario", cascade="all, delete-orphan")

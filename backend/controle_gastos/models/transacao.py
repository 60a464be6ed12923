"""
Transaction database model.
"""

import enum
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from controle_gastos.database import Base


class TipoTransacao(str, enum.Enum):
    """Transaction type enumeration."""
    receita = "receita"
    despesa = "despesa"


class Transacao(Base):
    """Income or expense entry owned by a single user."""

    __tablename__ = "transacoes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    descricao = Column(String(255), nullable=False)
    tipo = Column(Enum(TipoTransacao), nullable=False)
    valor = Column(Numeric(12, 2), nullable=False)
    data = Column(Date, nullable=False, index=True)
    categoria = Column(String(100), nullable=False)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    usuario = relationship("Usuario", back_populates="transacoes")

    # Every query is scoped by owner
    __table_args__ = (
        Index("idx_transacao_usuario_data", "usuario_id", "data"),
    )

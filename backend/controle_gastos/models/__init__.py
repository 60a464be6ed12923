"""
Database models package.
"""

from controle_gastos.models.usuario import Usuario
from controle_gastos.models.transacao import Transacao, TipoTransacao

__all__ = [
    "Usuario",
    "Transacao",
    "TipoTransacao",
]

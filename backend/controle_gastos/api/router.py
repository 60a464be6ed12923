"""
Main API router.
"""

from fastapi import APIRouter
from controle_gastos.api import auth, transacoes

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(transacoes.router)

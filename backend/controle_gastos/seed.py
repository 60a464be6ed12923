"""
Seed script for a demo user and sample transactions.
"""

import os
from datetime import date
from decimal import Decimal

from controle_gastos.database import SessionLocal, init_db
from controle_gastos.models import Transacao, TipoTransacao, Usuario
from controle_gastos.services.auth_service import create_usuario

DEMO_TRANSACOES = [
    ("Salário", TipoTransacao.receita, Decimal("3000"), date(2025, 4, 1), "Outros"),
    ("Almoço", TipoTransacao.despesa, Decimal("35"), date(2025, 4, 2), "Alimentação"),
    ("Uber", TipoTransacao.despesa, Decimal("22"), date(2025, 4, 3), "Transporte"),
    ("Farmácia", TipoTransacao.despesa, Decimal("55"), date(2025, 4, 4), "Saúde"),
    ("Cinema", TipoTransacao.despesa, Decimal("40"), date(2025, 4, 5), "Lazer"),
    ("Supermercado", TipoTransacao.despesa, Decimal("120"), date(2025, 4, 6), "Alimentação"),
]


def seed_demo(email: str = "demo@example.com", senha: str = "demo123"):
    """Create the tables, the demo user and its transactions."""

    init_db()
    db = SessionLocal()

    try:
        usuario = db.query(Usuario).filter(Usuario.email == email).first()
        if usuario is None:
            usuario = create_usuario(db, email, senha)
            print(f"Created user {email}")

        # Check if transactions already exist
        existing_count = db.query(Transacao).filter(Transacao.usuario_id == usuario.id).count()
        if existing_count > 0:
            print(f"Transactions already seeded ({existing_count} transactions exist)")
            return

        for descricao, tipo, valor, data, categoria in DEMO_TRANSACOES:
            db.add(Transacao(
                descricao=descricao,
                tipo=tipo,
                valor=valor,
                data=data,
                categoria=categoria,
                usuario_id=usuario.id,
            ))

        db.commit()
        print(f"Successfully seeded {len(DEMO_TRANSACOES)} transactions for {email}")

    except Exception as e:
        print(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_demo(
        os.environ.get("SEED_EMAIL", "demo@example.com"),
        os.environ.get("SEED_SENHA", "demo123"),
    )

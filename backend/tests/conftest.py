"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal

from controle_gastos.database import Base, get_db
from controle_gastos.main import app
from controle_gastos.models.transacao import Transacao, TipoTransacao
from controle_gastos.services.auth_service import create_usuario, create_access_token


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def usuario(db_session):
    """User that owns the sample transactions."""
    return create_usuario(db_session, "ana@example.com", "senha123")


@pytest.fixture
def outro_usuario(db_session):
    """A second user whose data must stay invisible to the first."""
    return create_usuario(db_session, "bruno@example.com", "outrasenha")


@pytest.fixture
def auth_headers(usuario):
    return {"Authorization": f"Bearer {create_access_token(usuario)}"}


@pytest.fixture
def outro_auth_headers(outro_usuario):
    return {"Authorization": f"Bearer {create_access_token(outro_usuario)}"}


def make_transacao(db_session, usuario_id, descricao, tipo, valor, data, categoria):
    txn = Transacao(
        descricao=descricao,
        tipo=tipo,
        valor=Decimal(valor),
        data=data,
        categoria=categoria,
        usuario_id=usuario_id,
    )
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


@pytest.fixture
def sample_transacoes(db_session, usuario):
    """Salary and lunch, as in the demo data."""
    return [
        make_transacao(db_session, usuario.id, "Salário", TipoTransacao.receita, "3000", date(2025, 4, 1), "Outros"),
        make_transacao(db_session, usuario.id, "Almoço", TipoTransacao.despesa, "35", date(2025, 4, 2), "Alimentação"),
    ]


@pytest.fixture
def outra_transacao(db_session, outro_usuario):
    """Transaction owned by the second user."""
    return make_transacao(
        db_session, outro_usuario.id, "Aluguel", TipoTransacao.despesa, "1200", date(2025, 4, 5), "Moradia"
    )

"""Tests for owner-scoped store access."""

import pytest
from datetime import date
from decimal import Decimal

from controle_gastos.models.transacao import Transacao, TipoTransacao
from controle_gastos.schemas.transacao import TransacaoCreate
from controle_gastos.services.transacao_service import (
    TransacaoNotFoundError,
    create_transacao,
    delete_transacao,
    delete_transacoes,
    get_transacao,
    list_transacoes,
    sanitize_ids,
    update_transacao,
)


def dados(**overrides):
    fields = {
        "descricao": "Cinema",
        "tipo": "despesa",
        "valor": "40",
        "data": "2025-04-05",
        "categoria": "Lazer",
    }
    fields.update(overrides)
    return TransacaoCreate(**fields)


class TestSanitizeIds:

    def test_keeps_ints_and_digit_strings(self):
        assert sanitize_ids([1, "2", " 3 "]) == [1, 2, 3]

    def test_drops_invalid(self):
        assert sanitize_ids(["abc", None, 1.5, "1.5", True, {"id": 1}, "-2"]) == []

    def test_mixed(self):
        assert sanitize_ids(["1", "abc", "3"]) == [1, 3]

    def test_deduplicates(self):
        assert sanitize_ids([3, "3", 1, 3]) == [3, 1]

    def test_drops_ids_outside_integer_range(self):
        assert sanitize_ids(["1" + "0" * 30, 10**30, 0, -5, 2**63 - 1, "7"]) == [2**63 - 1, 7]


class TestCrud:

    def test_create_and_list(self, db_session, usuario):
        new_id = create_transacao(db_session, usuario.id, dados())
        result = list_transacoes(db_session, usuario.id)
        assert [t.id for t in result] == [new_id]
        assert result[0].tipo == TipoTransacao.despesa
        assert result[0].valor == Decimal("40")

    def test_list_is_scoped(self, db_session, usuario, outra_transacao):
        assert list_transacoes(db_session, usuario.id) == []

    def test_get_foreign_raises(self, db_session, usuario, outra_transacao):
        with pytest.raises(TransacaoNotFoundError):
            get_transacao(db_session, usuario.id, outra_transacao.id)

    def test_update_preserves_id_and_owner(self, db_session, usuario, sample_transacoes):
        original = sample_transacoes[1]
        updated = update_transacao(db_session, usuario.id, original.id, dados(data="2025-05-01T08:00"))
        assert updated.id == original.id
        assert updated.usuario_id == usuario.id
        assert updated.descricao == "Cinema"
        assert updated.data == date(2025, 5, 1)

    def test_update_foreign_raises(self, db_session, usuario, outra_transacao):
        with pytest.raises(TransacaoNotFoundError):
            update_transacao(db_session, usuario.id, outra_transacao.id, dados())

    def test_delete_foreign_raises(self, db_session, usuario, outra_transacao):
        with pytest.raises(TransacaoNotFoundError):
            delete_transacao(db_session, usuario.id, outra_transacao.id)
        assert db_session.query(Transacao).count() == 1


class TestDeleteTransacoes:

    def test_deletes_owned(self, db_session, usuario, sample_transacoes):
        ids = [t.id for t in sample_transacoes]
        assert delete_transacoes(db_session, usuario.id, ids) == 2
        assert list_transacoes(db_session, usuario.id) == []

    def test_never_touches_other_owner(self, db_session, usuario, outro_usuario, sample_transacoes, outra_transacao):
        before = len(list_transacoes(db_session, outro_usuario.id))
        ids = [t.id for t in sample_transacoes] + [outra_transacao.id, 9999]

        assert delete_transacoes(db_session, usuario.id, ids) == 2
        assert len(list_transacoes(db_session, outro_usuario.id)) == before

    def test_empty_list(self, db_session, usuario, sample_transacoes):
        assert delete_transacoes(db_session, usuario.id, []) == 0

"""
CSV/JSON export and best-effort JSON import.
"""

import json
import logging
from typing import Any, Callable, Iterable, List

from pydantic import ValidationError

from controle_gastos.schemas.import_file import ImportErro, ImportReport
from controle_gastos.schemas.transacao import TransacaoCreate, TransacaoResponse

logger = logging.getLogger(__name__)

CSV_HEADER = ["Data", "Descrição", "Tipo", "Categoria", "Valor"]


def _tipo_value(tipo: Any) -> str:
    return tipo.value if hasattr(tipo, "value") else str(tipo)


def to_csv(transacoes: Iterable[Any]) -> str:
    """
    Header plus one comma-joined line per transaction.

    Fields are neither quoted nor escaped: a comma inside a description or
    category shifts the columns of that line.
    """
    rows = [CSV_HEADER]
    for t in transacoes:
        rows.append([
            t.data.isoformat(),
            t.descricao,
            _tipo_value(t.tipo),
            t.categoria,
            str(t.valor),
        ])
    return "\n".join(",".join(row) for row in rows)


def to_json(transacoes: Iterable[Any]) -> str:
    """Pretty-printed JSON array of the given transactions."""
    items = [
        TransacaoResponse.model_validate(t).model_dump(mode="json")
        for t in transacoes
    ]
    return json.dumps(items, indent=2, ensure_ascii=False)


def parse_import_payload(text: str) -> List[Any]:
    """Decode an import file. Anything but a JSON array is rejected."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e.msg}") from e

    if not isinstance(payload, list):
        raise ValueError("Import file must contain a JSON array")
    return payload


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "record"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def import_records(
    records: List[Any],
    create: Callable[[TransacaoCreate], int]
) -> ImportReport:
    """
    Validate and create each record independently.

    A record that fails validation, or whose `create` call raises, is
    reported with its index; the remaining records are still processed and
    nothing already created is rolled back.
    """
    report = ImportReport()

    for indice, record in enumerate(records):
        if not isinstance(record, dict):
            report.erros.append(ImportErro(indice=indice, erro="Record must be a JSON object"))
            continue

        try:
            dados = TransacaoCreate.model_validate(record)
        except ValidationError as e:
            report.erros.append(ImportErro(indice=indice, erro=_validation_message(e)))
            continue

        try:
            new_id = create(dados)
        except Exception as e:
            logger.error(f"Import of record {indice} failed: {e}")
            report.erros.append(ImportErro(indice=indice, erro=str(e) or type(e).__name__))
            continue

        report.ids.append(new_id)
        report.importadas += 1

    return report

"""
Lector bulk: registros CSV `id,a1,...,a57`, uno por línea.
- Ignora líneas vacías y las que empiezan con '#'.
- Cada registro trae su propio AnswerStore o el error que lo bloqueó.
- Menos de 57 respuestas no falla aquí: aparece como NotFulfilledError al puntuar.
"""
import csv
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from .answer_store import AnswerStore
from .errors import IllegalAnswerError, StressCheckError


@dataclass
class BulkRecord:
    line_no: int
    identifier: str
    store: Optional[AnswerStore] = None
    error: Optional[StressCheckError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_bulk(lines: Iterable[str]) -> Iterator[BulkRecord]:
    for line_no, row in enumerate(csv.reader(lines), start=1):
        if not row or not "".join(row).strip() or row[0].lstrip().startswith("#"):
            continue
        identifier, *answers = (cell.strip() for cell in row)
        try:
            store = _to_store(answers)
        except StressCheckError as e:
            yield BulkRecord(line_no, identifier, error=e)
            continue
        yield BulkRecord(line_no, identifier, store=store)


def _to_store(answers: list[str]) -> AnswerStore:
    store = AnswerStore()
    for position, raw in enumerate(answers, start=1):
        try:
            value = int(raw)
        except ValueError:
            raise IllegalAnswerError(f"Respuesta no numérica en la columna {position}: {raw!r}") from None
        store.push(value)
    return store

"""
Almacén de respuestas de una sesión: exactamente 57 casillas, 0 = sin responder.
Una instancia por sesión/registro; no se comparte entre hilos ni se reinicia.
"""
from ..models.assessment import ConversionScore, SumupScore
from .errors import IllegalAnswerError, IllegalQuestionError, NotFulfilledError
from .scoring_conversion import compute_conversion
from .scoring_sumup import compute_sumup
from .typing import MAX_ANSWER, MIN_ANSWER, QUESTION_COUNT


class AnswerStore:
    def __init__(self) -> None:
        self._values = [0] * QUESTION_COUNT
        # cursor de push; insert no lo mueve
        self._offset = 0

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(self._values)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def answered(self) -> int:
        """Casillas con respuesta, sin importar si llegaron por push o insert."""
        return sum(1 for v in self._values if v)

    def is_fulfilled(self) -> bool:
        return all(self._values)

    def push(self, answer: int) -> None:
        """Guarda la siguiente respuesta en orden. Solo se aceptan 1..4."""
        _check_answer(answer)
        if self._offset >= QUESTION_COUNT:
            raise IllegalQuestionError(f"Ya hay {QUESTION_COUNT} respuestas")
        self._values[self._offset] = answer
        self._offset += 1

    def insert(self, question_no: int, answer: int) -> None:
        """Guarda la respuesta de la pregunta `question_no` (1-based); sobrescribe."""
        if question_no < 1:
            raise IllegalQuestionError(f"Pregunta inválida: {question_no}")
        _check_answer(answer)
        if question_no > QUESTION_COUNT:
            raise IllegalQuestionError(f"Pregunta inválida: {question_no}")
        self._values[question_no - 1] = answer

    def to_sumup_score(self) -> SumupScore:
        self._ensure_fulfilled()
        return compute_sumup(self._values)

    def to_conversion_score(self) -> ConversionScore:
        self._ensure_fulfilled()
        return compute_conversion(self._values)

    def _ensure_fulfilled(self) -> None:
        if not self.is_fulfilled():
            missing = [no for no, v in enumerate(self._values, start=1) if not v]
            raise NotFulfilledError(f"Faltan respuestas: {missing}")

    def __repr__(self) -> str:
        return f"AnswerStore(answered={self.answered}, offset={self._offset})"


def _check_answer(answer: int) -> None:
    # bool es int; no se acepta True/False como respuesta
    if isinstance(answer, bool) or not isinstance(answer, int) or not MIN_ANSWER <= answer <= MAX_ANSWER:
        raise IllegalAnswerError(f"Respuesta fuera de {MIN_ANSWER}..{MAX_ANSWER}: {answer!r}")

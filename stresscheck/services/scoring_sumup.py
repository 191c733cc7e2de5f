"""
Cálculo por 合計点数方式 (suma de puntos).
Algunas preguntas puntúan al revés (menor respuesta = más estrés); se invierten 1⇔4, 2⇔3
antes de sumar: A1–7, A11–13, A15 y B1–3 (nº 1–7, 11–13, 15, 18–20 de las 57).
"""
from collections.abc import Sequence

from ..models.assessment import SumupScore

# Conjunto cerrado de la guía; no derivarlo
REVERSED_QUESTIONS = frozenset({1, 2, 3, 4, 5, 6, 7, 11, 12, 13, 15, 18, 19, 20})

# Ventanas por dominio (nº de pregunta, 1-based, inclusivo)
DOMAIN_A = range(1, 18)   # 17 ítems
DOMAIN_B = range(18, 47)  # 29 ítems
DOMAIN_C = range(47, 56)  # 9 ítems; 56–57 (satisfacción) no suman


def reverse_adjust(question_no: int, answer: int) -> int:
    if question_no in REVERSED_QUESTIONS:
        return 5 - answer
    return answer


def compute_sumup(values: Sequence[int]) -> SumupScore:
    """
    `values` son las 57 respuestas crudas en orden, todas en 1..4.
    La validación de completitud la hace AnswerStore.
    """
    adjusted = [reverse_adjust(no, v) for no, v in enumerate(values, start=1)]
    return SumupScore(
        sum_a=_window(adjusted, DOMAIN_A),
        sum_b=_window(adjusted, DOMAIN_B),
        sum_c=_window(adjusted, DOMAIN_C),
    )


def _window(adjusted: Sequence[int], questions: range) -> int:
    return sum(adjusted[no - 1] for no in questions)

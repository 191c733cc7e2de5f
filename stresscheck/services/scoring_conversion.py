"""
Cálculo por 素点換算表方式 (tabla de conversión de puntaje bruto).

1. Cada sub-escala suma ciertas respuestas crudas (sin invertir). Las escalas
   "inversas" restan de una constante: la inversión ya va en la fórmula.
2. La suma bruta pasa por la tabla de su escala y da un punto de evaluación 1..5
   (más bajo = más estrés). El sentido de cada tabla es propio de la escala.

Fórmulas y tablas son datos fijos de la guía MHLW; no se configuran.
"""
from collections.abc import Sequence
from typing import NamedTuple

from ..models.assessment import ConversionScore
from .errors import IllegalAnswerError


class SubScale(NamedTuple):
    """raw = base - sum(q[minus]) + sum(q[plus])"""
    name: str
    label: str
    base: int
    minus: tuple[int, ...] = ()
    plus: tuple[int, ...] = ()


# (mínimo, máximo, punto) inclusivo
Band = tuple[int, int, int]

SUBSCALES: tuple[SubScale, ...] = (
    # A: estresores laborales
    SubScale("mental_work_stress_volume", "心理的な仕事の負担（量）", 15, minus=(1, 2, 3)),
    SubScale("mental_work_stress_quality", "心理的な仕事の負担（質）", 15, minus=(4, 5, 6)),
    SubScale("aware_physical_stress", "自覚的な身体的負担度", 5, minus=(7,)),
    SubScale("work_people_stress", "職場の対人関係でのストレス", 10, minus=(12, 13), plus=(14,)),
    SubScale("work_env_stress", "職場環境によるストレス", 5, minus=(15,)),
    SubScale("work_control", "仕事のコントロール度", 15, minus=(8, 9, 10)),
    SubScale("skill_apply", "技能の活用度", 0, plus=(11,)),
    SubScale("work_apply", "仕事の適性度", 5, minus=(16,)),
    SubScale("decent_work", "働きがい", 5, minus=(17,)),
    # B: reacciones de estrés
    SubScale("vitality", "活気", 0, plus=(18, 19, 20)),
    SubScale("iraira", "イライラ感", 0, plus=(21, 22, 23)),
    SubScale("tired", "疲労感", 0, plus=(24, 25, 26)),
    SubScale("anxious", "不安感", 0, plus=(27, 28, 29)),
    SubScale("depressed", "抑うつ感", 0, plus=tuple(range(30, 36))),
    SubScale("physical_complaint", "身体愁訴", 0, plus=tuple(range(36, 47))),
    # C: apoyo social
    SubScale("boss_support", "上司からのサポート", 15, minus=(47, 50, 53)),
    SubScale("colleague_support", "同僚からのサポート", 15, minus=(48, 51, 54)),
    SubScale("family_support", "家族・友人からのサポート", 15, minus=(49, 52, 55)),
)

_WORKLOAD: tuple[Band, ...] = ((3, 5, 5), (6, 7, 4), (8, 9, 3), (10, 11, 2), (12, 12, 1))
_SINGLE_ITEM_STRESSOR: tuple[Band, ...] = ((1, 1, 4), (2, 2, 3), (3, 3, 2), (4, 4, 1))
_SINGLE_ITEM_RESOURCE: tuple[Band, ...] = ((1, 1, 1), (2, 2, 2), (3, 3, 3), (4, 4, 5))

CONVERSION_TABLES: dict[str, tuple[Band, ...]] = {
    "mental_work_stress_volume": _WORKLOAD,
    "mental_work_stress_quality": _WORKLOAD,
    "aware_physical_stress": _SINGLE_ITEM_STRESSOR,
    "work_people_stress": ((3, 3, 5), (4, 5, 4), (6, 7, 3), (8, 9, 2), (10, 12, 1)),
    "work_env_stress": _SINGLE_ITEM_STRESSOR,
    "work_control": ((3, 4, 1), (5, 6, 2), (7, 8, 3), (9, 10, 4), (11, 12, 5)),
    "skill_apply": ((1, 1, 1), (2, 2, 2), (3, 3, 3), (4, 4, 4)),
    "work_apply": _SINGLE_ITEM_RESOURCE,
    "decent_work": _SINGLE_ITEM_RESOURCE,
    "vitality": ((3, 3, 1), (4, 5, 2), (6, 7, 3), (8, 9, 4), (10, 12, 5)),
    "iraira": ((3, 3, 5), (4, 5, 4), (6, 7, 3), (8, 9, 2), (10, 12, 1)),
    "tired": ((3, 3, 5), (4, 4, 4), (5, 7, 3), (8, 10, 2), (11, 12, 1)),
    "anxious": ((3, 3, 5), (4, 4, 4), (5, 7, 3), (8, 9, 2), (10, 12, 1)),
    "depressed": ((6, 6, 5), (7, 8, 4), (9, 12, 3), (13, 16, 2), (17, 24, 1)),
    "physical_complaint": ((11, 11, 5), (12, 15, 4), (16, 21, 3), (22, 26, 2), (27, 44, 1)),
    "boss_support": ((3, 4, 1), (5, 6, 2), (7, 8, 3), (9, 10, 4), (11, 12, 5)),
    "colleague_support": ((3, 5, 1), (6, 7, 2), (8, 9, 3), (10, 11, 4), (12, 12, 5)),
    "family_support": ((3, 6, 1), (7, 8, 2), (9, 9, 3), (10, 11, 4), (12, 12, 5)),
}


def compute_conversion(values: Sequence[int]) -> ConversionScore:
    """
    `values` son las 57 respuestas crudas en orden (AnswerStore ya verificó que estén todas).
    Lanza IllegalAnswerError si una suma bruta no cae en su tabla.
    """
    raw = _raw_subscale_sums(values)
    return ConversionScore(**{name: evaluation_point(name, total) for name, total in raw.items()})


def evaluation_point(scale: str, raw_sum: int) -> int:
    for low, high, point in CONVERSION_TABLES[scale]:
        if low <= raw_sum <= high:
            return point
    raise IllegalAnswerError(f"Suma bruta {raw_sum} fuera de la tabla de '{scale}'")


def _raw_subscale_sums(values: Sequence[int]) -> dict[str, int]:
    return {
        s.name: s.base
        - sum(_answer_at(values, no) for no in s.minus)
        + sum(_answer_at(values, no) for no in s.plus)
        for s in SUBSCALES
    }


def _answer_at(values: Sequence[int], question_no: int) -> int:
    if not 1 <= question_no <= len(values):
        raise IllegalAnswerError(f"No hay respuesta para la pregunta {question_no}")
    return values[question_no - 1]

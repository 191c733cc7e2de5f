"""
Fachada de puntuación: arma el AnswerStore, elige el método y clasifica.
La usan la API, el prompt interactivo y el lector bulk.
"""
from collections.abc import Iterable, Mapping

from ..models.assessment import StressResult
from .answer_store import AnswerStore
from .stress_classifier import has_stress
from .typing import Method


def build_store(answers: Iterable[int]) -> AnswerStore:
    store = AnswerStore()
    for answer in answers:
        store.push(answer)
    return store


def build_store_by_question(answers: Mapping[int, int]) -> AnswerStore:
    store = AnswerStore()
    for question_no, answer in sorted(answers.items()):
        store.insert(question_no, answer)
    return store


def evaluate(store: AnswerStore, method: Method = "sumup") -> StressResult:
    """
    Puntúa un almacén completo.
    Propaga NotFulfilledError / IllegalAnswerError sin resultado parcial.
    """
    if method == "conversion":
        score = store.to_conversion_score()
        points = score.model_dump()
    elif method == "sumup":
        score = store.to_sumup_score()
        points = None
    else:
        raise ValueError(f"Método desconocido: {method}")
    sum_a, sum_b, sum_c = score.scores()
    return StressResult(
        method=method,
        sum_a=sum_a,
        sum_b=sum_b,
        sum_c=sum_c,
        high_stress=has_stress(score),
        evaluation_points=points,
    )

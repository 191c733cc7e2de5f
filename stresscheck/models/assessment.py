# stresscheck/models/assessment.py
"""
Schemas de la check de estrés (57 ítems).
El scoring vive en services/ (mejor testeable); aquí solo datos inmutables y payloads.
"""
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from ..services.typing import DomainSums, Method

Point = Annotated[int, Field(ge=1, le=5)]

# Partición fija de las sub-escalas por dominio
DOMAIN_A_SCALES = (
    "mental_work_stress_volume",
    "mental_work_stress_quality",
    "aware_physical_stress",
    "work_people_stress",
    "work_env_stress",
    "work_control",
    "skill_apply",
    "work_apply",
    "decent_work",
)
DOMAIN_B_SCALES = (
    "vitality",
    "iraira",
    "tired",
    "anxious",
    "depressed",
    "physical_complaint",
)
DOMAIN_C_SCALES = (
    "boss_support",
    "colleague_support",
    "family_support",
)


# ---------- Puntajes ----------
class SumupScore(BaseModel):
    """Sumas por dominio del método 合計点数方式 (respuestas ya invertidas)."""
    model_config = ConfigDict(frozen=True)

    sum_a: int = Field(ge=17, le=68)
    sum_b: int = Field(ge=29, le=116)
    sum_c: int = Field(ge=9, le=36)

    def scores(self) -> DomainSums:
        return (self.sum_a, self.sum_b, self.sum_c)


class ConversionScore(BaseModel):
    """
    Puntos de evaluación (1..5) del método 素点換算表方式.
    Cuanto más bajo el punto, mayor el estrés.
    """
    model_config = ConfigDict(frozen=True)

    # A: 心理的な仕事の負担（量）, （質）, 自覚的な身体的負担度, 職場の対人関係でのストレス,
    # 職場環境によるストレス, 仕事のコントロール度, 技能の活用度, 仕事の適性度, 働きがい
    mental_work_stress_volume: Point
    mental_work_stress_quality: Point
    aware_physical_stress: Point
    work_people_stress: Point
    work_env_stress: Point
    work_control: Point
    skill_apply: Point
    work_apply: Point
    decent_work: Point

    # B: 活気, イライラ感, 疲労感, 不安感, 抑うつ感, 身体愁訴
    vitality: Point
    iraira: Point
    tired: Point
    anxious: Point
    depressed: Point
    physical_complaint: Point

    # C: 上司・同僚・家族友人からのサポート
    boss_support: Point
    colleague_support: Point
    family_support: Point

    def scores(self) -> DomainSums:
        return (
            sum(getattr(self, name) for name in DOMAIN_A_SCALES),
            sum(getattr(self, name) for name in DOMAIN_B_SCALES),
            sum(getattr(self, name) for name in DOMAIN_C_SCALES),
        )


class StressResult(BaseModel):
    method: Method
    sum_a: int
    sum_b: int
    sum_c: int
    high_stress: bool
    # solo en 素点換算表方式
    evaluation_points: Optional[dict[str, int]] = None


# ---------- Payloads HTTP ----------
class StressCheckSubmit(BaseModel):
    # 57 respuestas en orden (escala 1..4) o un mapa {nº de pregunta: respuesta}.
    # StrictInt: true, "2" o 2.0 no son respuestas.
    answers: Optional[list[StrictInt]] = None
    answers_by_question: Optional[dict[int, StrictInt]] = None
    method: Optional[Method] = None

    @model_validator(mode="after")
    def _one_source(self) -> "StressCheckSubmit":
        if (self.answers is None) == (self.answers_by_question is None):
            raise ValueError("Envía 'answers' o 'answers_by_question' (solo uno)")
        return self


class BatchRecordIn(BaseModel):
    id: str
    answers: list[StrictInt]


class StressCheckBatchSubmit(BaseModel):
    method: Optional[Method] = None
    records: list[BatchRecordIn]


class BatchRecordOut(BaseModel):
    id: str
    result: Optional[StressResult] = None
    error: Optional[str] = None
    message: Optional[str] = None

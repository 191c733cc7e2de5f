"""
Tipos compartidos entre servicios de puntuación.
"""
from typing import Literal

# Método de agregación: 合計点数方式 (sumup) o 素点換算表方式 (conversion)
Method = Literal["sumup", "conversion"]

# (A, B, C): estresores laborales, reacciones de estrés, apoyo social
DomainSums = tuple[int, int, int]

QUESTION_COUNT = 57
MIN_ANSWER = 1
MAX_ANSWER = 4

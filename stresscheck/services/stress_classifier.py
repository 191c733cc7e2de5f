"""
Selección de 高ストレス者 según los criterios de ejemplo del manual MHLW.
- Suma de puntos (その１): B ≥ 77, o A+C ≥ 76 y B ≥ 63
- Tabla de conversión (その２): B ≤ 12, o A+C ≤ 26 y B ≤ 17
"""
from ..models.assessment import ConversionScore, SumupScore


def sumup_has_stress(sum_a: int, sum_b: int, sum_c: int) -> bool:
    return sum_b >= 77 or (sum_a + sum_c >= 76 and sum_b >= 63)


def conversion_has_stress(sum_a: int, sum_b: int, sum_c: int) -> bool:
    return sum_b <= 12 or (sum_a + sum_c <= 26 and sum_b <= 17)


def has_stress(score: SumupScore | ConversionScore) -> bool:
    """Aplica la regla del método que produjo el puntaje."""
    if isinstance(score, ConversionScore):
        return conversion_has_stress(*score.scores())
    return sumup_has_stress(*score.scores())

import pytest

from stresscheck.models.assessment import SumupScore
from stresscheck.services.stress_classifier import (
    conversion_has_stress,
    has_stress,
    sumup_has_stress,
)

@pytest.mark.parametrize("a, b, c, expected", [
    (17, 76, 9, False),
    (17, 77, 9, True),
    (46, 62, 30, False),
    (46, 63, 30, True),
    (45, 63, 30, False),
])
def test_sumup_thresholds(a, b, c, expected):
    assert sumup_has_stress(a, b, c) is expected
    assert has_stress(SumupScore(sum_a=a, sum_b=b, sum_c=c)) is expected

@pytest.mark.parametrize("a, b, c, expected", [
    (22, 26, 15, False),
    (30, 12, 10, True),
    (30, 13, 10, False),
    (20, 17, 6, True),
    (20, 18, 6, False),
    (20, 17, 7, False),
])
def test_conversion_thresholds(a, b, c, expected):
    assert conversion_has_stress(a, b, c) is expected

def test_method_specific_rule(low_store, high_store):
    assert has_stress(low_store.to_sumup_score()) is False
    assert has_stress(high_store.to_sumup_score()) is True
    assert has_stress(low_store.to_conversion_score()) is False
    assert has_stress(high_store.to_conversion_score()) is True

import pytest
from pydantic import ValidationError

from stresscheck.models.assessment import SumupScore
from stresscheck.services.scoring_sumup import REVERSED_QUESTIONS, compute_sumup, reverse_adjust

REVERSED = {1, 2, 3, 4, 5, 6, 7, 11, 12, 13, 15, 18, 19, 20}

@pytest.mark.parametrize("question_no", range(1, 58))
@pytest.mark.parametrize("answer", [1, 2, 3, 4])
def test_reverse_adjust_table(question_no, answer):
    expected = 5 - answer if question_no in REVERSED else answer
    assert reverse_adjust(question_no, answer) == expected

def test_reversed_set_is_closed():
    assert REVERSED_QUESTIONS == frozenset(REVERSED)

def test_all_ones(low_store):
    score = low_store.to_sumup_score()
    assert score.scores() == (50, 38, 9)

def test_all_fours(high_store):
    score = high_store.to_sumup_score()
    assert (score.sum_a, score.sum_b, score.sum_c) == (35, 107, 36)

def test_satisfaction_items_do_not_count():
    base = [2] * 57
    changed = base[:55] + [4, 4]
    assert compute_sumup(base) == compute_sumup(changed)

def test_window_boundaries():
    # pregunta 17 (no invertida) sube A; 46 sube B; 47 sube C
    base = compute_sumup([2] * 57)
    for no, field in ((17, "sum_a"), (46, "sum_b"), (47, "sum_c"), (55, "sum_c")):
        values = [2] * 57
        values[no - 1] = 3
        assert getattr(compute_sumup(values), field) == getattr(base, field) + 1

def test_score_is_immutable(low_store):
    score = low_store.to_sumup_score()
    with pytest.raises(ValidationError):
        score.sum_a = 1

def test_repeated_scoring_is_deterministic(low_store):
    low_store.insert(30, 3)
    assert low_store.to_sumup_score() == low_store.to_sumup_score()
    assert isinstance(low_store.to_sumup_score(), SumupScore)

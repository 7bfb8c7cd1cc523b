import numpy as np
import pytest

from analytics.statistics import compute_stats, stats_by_gender
from models.customer import Customer, DataStats
from models.enums import Gender
from utils.data_generation import generate_customers


def build(ages, incomes, scores, churn, genders=None):
    genders = genders or [Gender.FEMALE] * len(ages)
    return [
        Customer(id=i + 1, gender=g, age=a, annual_income=inc, spending_score=s, churn=ch)
        for i, (a, inc, s, ch, g) in enumerate(zip(ages, incomes, scores, churn, genders))
    ]


def test_compute_stats_three_records():
    customers = build([20, 30, 40], [10, 20, 30], [50, 60, 70], [True, False, True])

    stats = compute_stats(customers)

    assert stats.total_customers == 3
    assert stats.avg_age == 30
    assert stats.avg_income == 20
    assert stats.avg_spending_score == 60
    assert stats.churn_rate == pytest.approx(2 / 3)


def test_compute_stats_empty_is_all_zero():
    stats = compute_stats([])
    assert stats == DataStats.empty()
    assert not any(np.isnan(v) for v in stats.model_dump().values())


@pytest.mark.parametrize("count", [1, 7, 200])
def test_total_matches_generated_size(count):
    customers = generate_customers(count, rng=np.random.default_rng(count))
    stats = compute_stats(customers)
    assert stats.total_customers == count
    assert 0.0 <= stats.churn_rate <= 1.0


def test_compute_stats_does_not_mutate_input():
    customers = build([20, 30], [10, 20], [50, 60], [True, False])
    snapshot = list(customers)
    compute_stats(customers)
    assert customers == snapshot


def test_compute_stats_accepts_tuple():
    customers = tuple(build([25], [40], [80], [False]))
    assert compute_stats(customers).avg_spending_score == 80


def test_stats_by_gender():
    customers = build(
        [20, 40, 60],
        [30, 50, 70],
        [10, 20, 30],
        [True, False, False],
        genders=[Gender.MALE, Gender.FEMALE, Gender.FEMALE],
    )

    breakdown = stats_by_gender(customers)

    assert set(breakdown) == {Gender.MALE, Gender.FEMALE}
    assert breakdown[Gender.MALE].total_customers == 1
    assert breakdown[Gender.MALE].churn_rate == 1.0
    assert breakdown[Gender.FEMALE].avg_age == 50
    assert breakdown[Gender.FEMALE].churn_rate == 0.0


def test_stats_by_gender_empty():
    assert stats_by_gender([]) == {}

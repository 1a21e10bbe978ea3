"""
Tests for the recommendation engine (ranking over a history snapshot).

This test suite covers:
- Empty catalog and empty history handling
- Random fallback sampling with an injected random source
- Exclusion window for recently eaten menus
- Ranking by composite score and truncation to the requested count
- Input contract violations (non-positive count)
"""

import random

import pytest

from app.config import RecommendationConfig
from app.exceptions import ServiceValidationError
from services.recommendation_engine import FALLBACK_REASON, RecommendationEngine

from test_fixtures import NOW, FixedRandom, make_menu, make_record


def zero_jitter_engine(config=None):
    return RecommendationEngine(config=config or RecommendationConfig(), rng=FixedRandom(0.0))


# =============================================================================
# DEGENERATE INPUTS
# =============================================================================


def test_empty_catalog_returns_nothing():
    kimchi = make_menu(1, "김치찌개")
    history = [make_record(kimchi, days_ago=10)]

    assert zero_jitter_engine().recommend(history, [], 3, now=NOW) == []
    assert zero_jitter_engine().recommend([], [], 3, now=NOW) == []


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_is_contract_violation(count):
    catalog = [make_menu(1, "김치찌개")]

    with pytest.raises(ServiceValidationError) as exc_info:
        zero_jitter_engine().recommend([], catalog, count, now=NOW)

    assert exc_info.value.code == "INVALID_COUNT"


# =============================================================================
# RANDOM FALLBACK (NO HISTORY)
# =============================================================================


@pytest.mark.parametrize("count,expected", [(1, 1), (3, 3), (5, 3)])
def test_fallback_returns_min_of_count_and_catalog(count, expected):
    catalog = [make_menu(1, "김치찌개"), make_menu(2, "파스타"), make_menu(3, "초밥")]

    result = zero_jitter_engine().recommend([], catalog, count, now=NOW)

    assert len(result) == expected
    for candidate in result:
        assert candidate.score == 50.0
        assert candidate.reason == FALLBACK_REASON


def test_fallback_samples_with_replacement():
    catalog = [make_menu(1, "김치찌개"), make_menu(2, "파스타"), make_menu(3, "초밥")]
    engine = RecommendationEngine(rng=FixedRandom(start=1, step=0))

    result = engine.recommend([], catalog, 3, now=NOW)

    assert [c.menu_name for c in result] == ["파스타", "파스타", "파스타"]


def test_fallback_uses_injected_source_order():
    catalog = [make_menu(1, "김치찌개"), make_menu(2, "파스타"), make_menu(3, "초밥")]
    engine = RecommendationEngine(rng=FixedRandom(start=2, step=1))

    result = engine.recommend([], catalog, 2, now=NOW)

    assert [c.menu_name for c in result] == ["초밥", "김치찌개"]


def test_fallback_carries_menu_details():
    catalog = [make_menu(1, "짬뽕", "중식", calories=750, spicy_level=4)]

    result = zero_jitter_engine().recommend([], catalog, 1, now=NOW)

    assert result[0].category == "중식"
    assert result[0].calories == 750
    assert result[0].spicy_level == 4


# =============================================================================
# EXCLUSION WINDOW
# =============================================================================


def test_menu_eaten_two_days_ago_is_excluded():
    kimchi = make_menu(1, "김치찌개")
    pasta = make_menu(2, "파스타", "양식")
    history = [make_record(kimchi, days_ago=2)]

    result = zero_jitter_engine().recommend(history, [kimchi, pasta], 5, now=NOW)

    assert [c.menu_name for c in result] == ["파스타"]


def test_exclusion_window_boundary():
    """
    Verifies:
    - A menu eaten 4 days ago is excluded
    - A menu eaten just over 5 days ago is eligible again
    """
    kimchi = make_menu(1, "김치찌개")
    pasta = make_menu(2, "파스타")
    history = [make_record(kimchi, days_ago=4), make_record(pasta, days_ago=5.1)]

    result = zero_jitter_engine().recommend(history, [kimchi, pasta], 5, now=NOW)

    assert [c.menu_name for c in result] == ["파스타"]


def test_exclusion_window_is_configurable():
    ramen = make_menu(1, "라멘", "일식")
    sushi = make_menu(2, "초밥", "일식")
    history = [make_record(ramen, days_ago=4)]

    default_names = [
        c.menu_name for c in zero_jitter_engine().recommend(history, [ramen, sushi], 5, now=NOW)
    ]
    legacy_names = [
        c.menu_name
        for c in zero_jitter_engine(RecommendationConfig.legacy()).recommend(
            history, [ramen, sushi], 5, now=NOW
        )
    ]

    assert "라멘" not in default_names
    assert "라멘" in legacy_names


def test_everything_recent_returns_empty_list():
    kimchi = make_menu(1, "김치찌개")
    history = [make_record(kimchi, days_ago=1)]

    assert zero_jitter_engine().recommend(history, [kimchi], 3, now=NOW) == []


# =============================================================================
# RANKING
# =============================================================================


def test_rated_aligned_unseen_menu_outranks_recent_unrated_off_category():
    """
    Verifies:
    - A highly rated, category-aligned, long-unseen menu ranks first
    - A menu eaten 6 days ago (just outside the window), unrated and in a
      minority category ranks last
    """
    bulgogi = make_menu(1, "불고기", "한식")
    bibim = make_menu(2, "비빔밥", "한식")
    pizza = make_menu(3, "피자", "양식")
    history = [
        make_record(bulgogi, days_ago=20, rating=5),
        make_record(bulgogi, days_ago=25, rating=5),
        make_record(bibim, days_ago=12),
        make_record(pizza, days_ago=6),
    ]

    result = zero_jitter_engine().recommend(history, [pizza, bibim, bulgogi], 3, now=NOW)

    assert [c.menu_name for c in result] == ["불고기", "비빔밥", "피자"]
    # 22.5 category + 25 rating + 15 long unseen
    assert result[0].score == pytest.approx(62.5)
    # 22.5 category + 15 long unseen
    assert result[1].score == pytest.approx(37.5)
    # 7.5 category only
    assert result[2].score == pytest.approx(7.5)


def test_result_is_truncated_to_count():
    menus = [make_menu(i, f"메뉴{i}", "한식") for i in range(1, 8)]
    history = [make_record(menus[0], days_ago=30)]

    result = zero_jitter_engine().recommend(history, menus, 3, now=NOW)

    assert len(result) == 3
    scores = [c.score for c in result]
    assert scores == sorted(scores, reverse=True)


def test_equal_scores_keep_catalog_order():
    menus = [make_menu(i, f"메뉴{i}", "양식") for i in range(1, 5)]
    eaten = make_menu(10, "김치찌개", "한식")
    history = [make_record(eaten, days_ago=1)]

    result = zero_jitter_engine().recommend(history, [eaten] + menus, 4, now=NOW)

    assert [c.menu_name for c in result] == ["메뉴1", "메뉴2", "메뉴3", "메뉴4"]


def test_seeded_random_source_is_reproducible():
    menus = [make_menu(i, f"메뉴{i}", "한식" if i % 2 else "양식") for i in range(1, 10)]
    history = [make_record(menus[0], days_ago=30, rating=4)]

    first = RecommendationEngine(rng=random.Random(42)).recommend(history, menus, 5, now=NOW)
    second = RecommendationEngine(rng=random.Random(42)).recommend(history, menus, 5, now=NOW)

    assert [(c.menu_name, c.score) for c in first] == [(c.menu_name, c.score) for c in second]


def test_inputs_are_not_modified():
    kimchi = make_menu(1, "김치찌개")
    pasta = make_menu(2, "파스타")
    catalog = [kimchi, pasta]
    history = [make_record(kimchi, days_ago=30)]

    zero_jitter_engine().recommend(history, catalog, 1, now=NOW)

    assert catalog == [kimchi, pasta]
    assert len(history) == 1


# =============================================================================
# END-TO-END SCENARIO
# =============================================================================


def test_ramen_history_scenario():
    """
    Verifies:
    - 라멘 (eaten 3 days ago, rated 5) is excluded by the 5-day window
    - 초밥 shares the only history category and outranks 피자
    """
    ramen = make_menu(1, "라멘", "일식")
    sushi = make_menu(2, "초밥", "일식")
    pizza = make_menu(3, "피자", "양식")
    history = [make_record(ramen, days_ago=3, rating=5)]

    result = zero_jitter_engine().recommend(history, [ramen, sushi, pizza], 2, now=NOW)

    assert [c.menu_name for c in result] == ["초밥", "피자"]
    assert result[0].score == pytest.approx(60.0)
    assert result[0].reason == "일식 자주 드셨네요 새로운 메뉴 도전!"
    assert result[1].score == pytest.approx(30.0)


def test_ramen_history_scenario_holds_with_real_jitter():
    ramen = make_menu(1, "라멘", "일식")
    sushi = make_menu(2, "초밥", "일식")
    pizza = make_menu(3, "피자", "양식")
    history = [make_record(ramen, days_ago=3, rating=5)]

    for seed in range(20):
        engine = RecommendationEngine(rng=random.Random(seed))
        result = engine.recommend(history, [ramen, sushi, pizza], 2, now=NOW)
        assert [c.menu_name for c in result] == ["초밥", "피자"]

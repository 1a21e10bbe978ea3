"""
Tests for menu resolution against the catalog.

Resolution order under test:
- Exact name equality
- Containment in either direction (catalog order)
- Fuzzy match by edit distance (at most 2, earliest catalog item on ties)
"""

from app.config import MatchingConfig
from services.menu_matcher import MenuIndex, resolve_menu

from test_fixtures import make_menu


# =============================================================================
# EXACT AND CONTAINMENT MATCHES
# =============================================================================


def test_exact_name_wins_over_containment_and_fuzzy():
    """
    Verifies:
    - "김치" resolves to the menu named exactly "김치"
    - even though "김치찌개" comes first and contains the text
    """
    catalog = [make_menu(1, "김치찌개"), make_menu(2, "김치")]

    assert resolve_menu("김치", catalog).id == 2


def test_containment_returns_first_catalog_match():
    catalog = [make_menu(1, "김치찌개"), make_menu(2, "김치볶음밥")]

    assert resolve_menu("김치", catalog).name == "김치찌개"


def test_candidate_containing_menu_name_resolves():
    catalog = [make_menu(1, "된장찌개"), make_menu(2, "김치찌개")]

    assert resolve_menu("매운김치찌개", catalog).name == "김치찌개"


# =============================================================================
# FUZZY MATCHES
# =============================================================================


def test_typo_resolves_by_edit_distance():
    catalog = [make_menu(1, "김치찌개"), make_menu(2, "파스타")]

    assert resolve_menu("김치찌게", catalog).name == "김치찌개"


def test_distance_two_is_accepted():
    catalog = [make_menu(1, "가나다라")]

    assert resolve_menu("가나마바", catalog).name == "가나다라"


def test_distance_three_or_more_never_resolves():
    catalog = [make_menu(1, "가나다"), make_menu(2, "김치찌개")]

    assert resolve_menu("라마바", catalog) is None
    assert resolve_menu("마라탕", catalog) is None


def test_fuzzy_tie_goes_to_first_catalog_item():
    catalog = [make_menu(1, "가나다"), make_menu(2, "가나라")]

    assert resolve_menu("가나마", catalog).id == 1


def test_smaller_distance_beats_earlier_item():
    catalog = [make_menu(1, "가마바사"), make_menu(2, "가나다마")]

    assert resolve_menu("가나다사", catalog).id == 2


def test_max_edit_distance_is_configurable():
    catalog = [make_menu(1, "김치찌개")]
    strict = MatchingConfig(max_edit_distance=0)

    assert resolve_menu("김치찌게", catalog, config=strict) is None


# =============================================================================
# EDGE CASES
# =============================================================================


def test_empty_catalog_resolves_nothing():
    assert resolve_menu("김치찌개", []) is None


def test_empty_candidate_resolves_nothing():
    assert resolve_menu("", [make_menu(1, "김치찌개")]) is None


def test_prebuilt_index_is_accepted():
    index = MenuIndex([make_menu(1, "김치찌개"), make_menu(2, "파스타")])

    assert resolve_menu("파스타", index).id == 2
    assert MenuIndex.of(index) is index
    assert len(index) == 2
    assert index.by_id[1].name == "김치찌개"

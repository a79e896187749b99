import pytest

from timeline_trivia.domain.deck_rules import build_deck
from tests.factories import make_item


def ids(deck):
    return [item.id for item in deck]


def test_build_deck_inserts_family_card_after_each_gap():
    general = [make_item(f"g{i}", 1900 + i) for i in range(1, 9)]
    family = [make_item(f"f{i}", 1950 + i, category="family") for i in range(1, 3)]

    deck = build_deck(general, family, gap=4)

    assert ids(deck) == ["g1", "g2", "g3", "g4", "f1", "g5", "g6", "g7", "g8", "f2"]


def test_build_deck_default_gap_is_four():
    general = [make_item(f"g{i}", 1900 + i) for i in range(1, 6)]
    family = [make_item("f1", 1950, category="family")]

    assert ids(build_deck(general, family)) == ["g1", "g2", "g3", "g4", "f1", "g5"]


def test_build_deck_without_family_returns_general():
    general = [make_item(f"g{i}", 1900 + i) for i in range(1, 6)]

    assert build_deck(general, []) == general


def test_build_deck_without_general_returns_family():
    family = [make_item(f"f{i}", 1900 + i, category="family") for i in range(1, 4)]

    assert build_deck([], family) == family


def test_build_deck_appends_remaining_general_when_family_runs_out():
    general = [make_item(f"g{i}", 1900 + i) for i in range(1, 8)]
    family = [make_item("f1", 1950, category="family")]

    deck = build_deck(general, family, gap=2)

    assert ids(deck) == ["g1", "g2", "f1", "g3", "g4", "g5", "g6", "g7"]


def test_build_deck_appends_remaining_family_when_general_runs_out():
    general = [make_item("g1", 1901), make_item("g2", 1902)]
    family = [make_item(f"f{i}", 1950 + i, category="family") for i in range(1, 5)]

    deck = build_deck(general, family, gap=4)

    assert ids(deck) == ["g1", "g2", "f1", "f2", "f3", "f4"]


@pytest.mark.parametrize("gap", [1, 2, 3, 4, 7, 20])
@pytest.mark.parametrize("general_count,family_count", [(1, 1), (9, 2), (3, 8), (25, 6)])
def test_build_deck_keeps_every_card_once(gap, general_count, family_count):
    general = [make_item(f"g{i}", i) for i in range(general_count)]
    family = [make_item(f"f{i}", i, category="family") for i in range(family_count)]

    deck = build_deck(general, family, gap=gap)

    assert len(deck) == general_count + family_count
    assert sorted(ids(deck)) == sorted(ids(general) + ids(family))
    # order inside each pool is preserved
    assert [i for i in ids(deck) if i.startswith("g")] == ids(general)
    assert [i for i in ids(deck) if i.startswith("f")] == ids(family)


@pytest.mark.parametrize("gap", [0, -1])
def test_build_deck_rejects_gap_below_one(gap):
    with pytest.raises(ValueError):
        build_deck([make_item("g1", 1900)], [], gap=gap)

import pytest

from timeline_trivia.domain.placement_rules import (
    check_placement,
    correct_index,
    insert_sorted,
)
from timeline_trivia.models.schema_models import PlacementResult
from tests.factories import make_item


@pytest.fixture
def played():
    return [make_item("a", 1990), make_item("b", 2000)]


@pytest.mark.parametrize(
    "guessed_index,correct,delta",
    [(1, True, 0), (0, False, 1), (2, False, -1)],
)
def test_check_placement_between_two_cards(played, guessed_index, correct, delta):
    drawn = make_item("c", 1995)

    result = check_placement(played, drawn, guessed_index)

    assert result == PlacementResult(correct=correct, delta=delta)


def test_check_placement_reports_size_of_miss():
    played = [make_item(i, year) for i, year in enumerate([-500, 100, 800, 1500, 1900])]
    drawn = make_item("new", 2001)

    assert check_placement(played, drawn, 5).correct
    assert check_placement(played, drawn, 1) == PlacementResult(correct=False, delta=4)


def test_check_placement_on_empty_timeline():
    assert check_placement([], make_item("a", 1), 0) == PlacementResult(correct=True, delta=0)


def test_equal_year_sorts_after_played_card():
    played = [make_item("a", 2000)]
    drawn = make_item("b", 2000)

    assert check_placement(played, drawn, 1) == PlacementResult(correct=True, delta=0)
    assert check_placement(played, drawn, 0) == PlacementResult(correct=False, delta=1)


def test_equal_year_with_same_id_still_uses_drawn_position():
    played = [make_item("dup", 2000)]

    assert correct_index(played, make_item("dup", 2000)) == 1


def test_check_placement_is_repeatable(played):
    drawn = make_item("c", 1980)

    assert check_placement(played, drawn, 2) == check_placement(played, drawn, 2)
    assert [p.id for p in played] == ["a", "b"]


@pytest.mark.parametrize("guessed_index", [-1, 3])
def test_check_placement_rejects_index_outside_timeline(played, guessed_index):
    with pytest.raises(ValueError):
        check_placement(played, make_item("c", 1995), guessed_index)


def test_insert_sorted_places_card_chronologically():
    played = [make_item("a", 1000), make_item("b", 1500), make_item("c", 1500)]

    timeline = insert_sorted(played, make_item("d", 1500))

    assert [p.id for p in timeline] == ["a", "b", "c", "d"]
    assert [p.id for p in insert_sorted(played, make_item("e", -20))] == ["e", "a", "b", "c"]
    assert len(played) == 3

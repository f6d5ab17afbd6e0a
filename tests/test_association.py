import random

import pytest

from parcel_graph.association import (
    associate,
    resolve_layout_parents,
    synthesize_building_numbers,
)


def test_no_buildings_links_everything_to_property():
    assert associate([], [None, None, None]) == [None, None, None]


def test_single_building_takes_all_records():
    assert associate([1], [None, 4, "2"]) == [0, 0, 0]


def test_single_building_single_record_ignores_number():
    assert associate([1], [5]) == [0]


def test_matches_by_stated_building_number():
    assert associate([1, 2, 3], [2, 1, 3]) == [1, 0, 2]
    assert associate([1, 2, 3], ["3", " 1 ", 2]) == [2, 0, 1]


def test_surplus_records_fall_back_to_property():
    assert associate([1, 2], [None] * 5) == [0, 1, None, None, None]


def test_unmatched_number_is_paired_by_position():
    # Building 1 is claimed by the second record, the first gets what is left.
    assert associate([1, 2], [7, 1]) == [1, 0]


def test_more_buildings_than_records():
    assert associate([1, 2, 3], [None]) == [0]
    assert associate([1, 2, 3], [3]) == [2]


def test_duplicate_numbers_claim_distinct_buildings():
    assert associate([1, 2], [1, 1]) == [0, 1]


def test_every_record_gets_exactly_one_target():
    rng = random.Random(7)
    for _ in range(200):
        n = rng.randint(0, 6)
        m = rng.randint(0, 8)
        buildings = list(range(1, n + 1))
        records = [rng.choice([None, rng.randint(0, 8)]) for _ in range(m)]
        targets = associate(buildings, records)
        assert len(targets) == m
        placed = [t for t in targets if t is not None]
        assert all(0 <= t < n for t in placed)
        if n > 1 or m <= 1:
            # No building is shared unless a single building takes everything.
            assert len(placed) == len(set(placed))
        if n == 1 and m > 1:
            assert targets == [0] * m


def test_synthesize_building_numbers_fills_by_position():
    assert synthesize_building_numbers([None, 5, "x", "2"]) == [1, 5, 3, 2]
    assert synthesize_building_numbers([]) == []


@pytest.mark.parametrize(
    "layouts, expected",
    [
        ([], []),
        (
            [{"space_type": "Bedroom"}, {"space_type": "Kitchen"}],
            [None, None],
        ),
        (
            [{"space_type": "Building"}, {"space_type": "Bedroom"}],
            [None, 0],
        ),
        (
            [
                {"space_type": "Building", "building_number": 1},
                {"space_type": "Building", "building_number": 2},
                {"space_type": "Bedroom", "building_number": 2},
                {"space_type": "Kitchen"},
            ],
            [None, None, 1, None],
        ),
        (
            [
                {"space_type": "Building"},
                {"space_type": "Building"},
                {"space_type": "Bedroom", "parent_index": 1},
                {"space_type": "Full Bathroom", "parent_index": 2},
            ],
            [None, None, 1, 2],
        ),
    ],
)
def test_resolve_layout_parents(layouts, expected):
    assert resolve_layout_parents(layouts) == expected


def test_layout_parent_index_pointing_at_itself_is_ignored():
    layouts = [{"space_type": "Building"}, {"space_type": "Bedroom", "parent_index": 1}]
    assert resolve_layout_parents(layouts) == [None, 0]

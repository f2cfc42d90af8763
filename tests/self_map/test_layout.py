"""Unit tests for the polar sector layout."""

import math
import random

import pytest

from self_map.layout import (
    DEFAULT_SECTOR,
    R_MAX,
    compute_polar,
    compute_position_by_power,
    compute_position_by_valence,
    compute_positions,
    sector_for,
)
from self_map.models import Entry


def _angle(position):
    return math.degrees(math.atan2(position.y, position.x)) % 360


@pytest.mark.unit
def test_single_entry_at_full_valence_sits_on_origin():
    entries = [Entry("A", "People", 1.0, 1.0)]
    positions = compute_positions(entries, "valence")
    assert positions["A"].x == pytest.approx(0.0, abs=1e-9)
    assert positions["A"].y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.unit
def test_negative_valence_sits_on_outer_ring():
    entries = [Entry("A", "People", 0.2, -1.0)]
    position = compute_positions(entries, "valence")["A"]
    assert math.hypot(position.x, position.y) == pytest.approx(R_MAX)


@pytest.mark.unit
def test_power_mode_radius():
    entries = [Entry("Core", "People", 1.0, -1.0), Entry("Edge", "Other", 0.25, 1.0)]
    positions = compute_position_by_power(entries)
    assert math.hypot(positions["Core"].x, positions["Core"].y) == pytest.approx(0.0, abs=1e-9)
    assert math.hypot(positions["Edge"].x, positions["Edge"].y) == pytest.approx(0.75 * R_MAX)


@pytest.mark.unit
def test_sorted_labels_get_sector_midpoints(two_people):
    polar = compute_polar(two_people, "valence")
    assert polar["A"][1] == pytest.approx(22.5)
    assert polar["B"][1] == pytest.approx(67.5)


@pytest.mark.unit
def test_input_order_does_not_change_positions(sample_data):
    entries = list(sample_data.entries)
    expected = compute_positions(entries, "valence")
    shuffled = entries[:]
    random.Random(7).shuffle(shuffled)
    assert compute_positions(shuffled, "valence") == expected


@pytest.mark.unit
def test_layout_is_deterministic(sample_data):
    first = compute_positions(sample_data.entries, "power")
    second = compute_positions(sample_data.entries, "power")
    assert first == second


@pytest.mark.unit
def test_angles_evenly_spaced_within_sector():
    entries = [Entry(f"Item {i}", "Accomplishments", 0.5, 0.0) for i in range(5)]
    polar = compute_polar(entries, "valence")
    angles = [polar[label][1] for label in sorted(polar)]
    gaps = [b - a for a, b in zip(angles, angles[1:])]
    assert all(gap == pytest.approx(90.0 / 5) for gap in gaps)
    assert 90.0 < angles[0] and angles[-1] < 180.0


@pytest.mark.unit
def test_labels_sort_by_codepoint():
    """Uppercase letters sort before lowercase ones."""
    entries = [Entry("apple", "People", 0.5, 0.0), Entry("Zebra", "People", 0.5, 0.0)]
    polar = compute_polar(entries, "valence")
    assert polar["Zebra"][1] < polar["apple"][1]


@pytest.mark.unit
def test_unknown_category_shares_ideas_sector():
    assert sector_for("Hobbies") == DEFAULT_SECTOR == (270.0, 360.0)
    entries = [Entry("X", "Hobbies", 0.5, -1.0)]
    assert _angle(compute_positions(entries)["X"]) == pytest.approx(315.0)


@pytest.mark.unit
def test_valence_and_generic_entry_point_agree(sample_data):
    assert compute_position_by_valence(sample_data.entries) == compute_positions(sample_data.entries, "valence")


@pytest.mark.unit
def test_unknown_mode_falls_back_to_valence(sample_data):
    assert compute_positions(sample_data.entries, "spiral") == compute_positions(sample_data.entries, "valence")


@pytest.mark.unit
def test_every_entry_is_positioned(sample_data):
    positions = compute_positions(sample_data.entries)
    assert set(positions) == set(sample_data.labels())


@pytest.mark.unit
def test_empty_input():
    assert compute_positions([]) == {}

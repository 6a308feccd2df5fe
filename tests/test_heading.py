from __future__ import annotations

import pytest

from mars_rover.heading import Heading


@pytest.mark.parametrize("heading", list(Heading))
def test_rotations_are_inverse(heading: Heading) -> None:
    assert heading.rotate_right().rotate_left() is heading
    assert heading.rotate_left().rotate_right() is heading


@pytest.mark.parametrize("heading", list(Heading))
def test_four_rotations_return_to_start(heading: Heading) -> None:
    h = heading
    for _ in range(4):
        h = h.rotate_left()
    assert h is heading

    h = heading
    for _ in range(4):
        h = h.rotate_right()
    assert h is heading


def test_left_cycle_order() -> None:
    seen = [Heading.NORTH]
    for _ in range(3):
        seen.append(seen[-1].rotate_left())
    assert seen == [Heading.NORTH, Heading.WEST, Heading.SOUTH, Heading.EAST]


def test_forward_offsets() -> None:
    assert Heading.NORTH.forward_offset() == (0, 1)
    assert Heading.SOUTH.forward_offset() == (0, -1)
    assert Heading.EAST.forward_offset() == (1, 0)
    assert Heading.WEST.forward_offset() == (-1, 0)


def test_labels_and_codes() -> None:
    assert [h.label for h in Heading] == ["North", "South", "East", "West"]
    for h in Heading:
        assert h.code == h.label[0]
        assert Heading(h.code) is h

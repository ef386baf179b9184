"""Unit tests for the :mod:`halving.geometry` module."""

from __future__ import annotations

import dataclasses

import pytest

from halving import Point, Size


def test_point_division_uses_true_division() -> None:
    halved = Point(101, 7) / 2

    assert halved == Point(50.5, 3.5)
    assert isinstance(halved.x, float)


def test_size_division_halves_each_component() -> None:
    assert Size(30, 50) / 2 == Size(15.0, 25.0)


def test_as_pair_returns_components_in_document_order() -> None:
    assert Point(1, 2).as_pair() == (1, 2)
    assert Size(width=3, height=4).as_pair() == (3, 4)


def test_geometry_values_are_immutable() -> None:
    point = Point(1, 2)

    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5  # type: ignore[misc]

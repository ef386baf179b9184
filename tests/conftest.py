"""Test configuration for the halving project."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from halving import Character, Inventory, Item, Point, Room, Size


BAR_DOCUMENT = """
{
  "spriteName" : "bar.png",
  "characters" : [
    {
      "name" : "Barman",
      "position" : [
        100,
        100
      ],
      "spriteName" : "barman.png"
    }
  ],
  "name" : "Bar"
}
"""


@pytest.fixture()
def bar_document() -> str:
    """Return the bar room as authored for the larger display."""

    return BAR_DOCUMENT


@pytest.fixture()
def bar_room() -> Room:
    """Return the bar once Chef and the Striking Woman have arrived."""

    room = Room(
        name="Bar",
        characters=[
            Character(name="Barman", position=Point(100, 100), sprite_name="barman.png"),
        ],
        sprite_name="bar.png",
    )
    room.add_character(
        Character(name="Chef", position=Point(500, 300), sprite_name="chef.png")
    )
    room.add_character(
        Character(
            name="Striking Woman",
            position=Point(0, 50),
            sprite_name="striking-woman.png",
        )
    )
    return room


@pytest.fixture()
def pocket_inventory() -> Inventory:
    """Return the inventory holding a pint and the money."""

    inventory = Inventory(
        items=[Item(name="Pint", size=Size(30, 50), sprite_name="pint.png")]
    )
    inventory.add_item(Item(name="Money", size=Size(20, 40), sprite_name="money.png"))
    return inventory


__all__ = ["BAR_DOCUMENT", "bar_document", "bar_room", "pocket_inventory"]

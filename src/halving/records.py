"""Game-world records that can be halved for smaller displays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .geometry import Point, Size
from .scaling import Halving, halvable, halve, halve_each


@halvable
@dataclass(frozen=True)
class Character(Halving):
    """A character placed somewhere in a room."""

    name: str
    position: Point
    sprite_name: str

    @classmethod
    def by_halving(cls, item: "Character") -> "Character":
        return cls(
            name=item.name,
            position=halve(item.position),
            sprite_name=item.sprite_name,
        )


@halvable
@dataclass(frozen=True)
class Room(Halving):
    """A room and the characters currently in it.

    ``characters`` is copied into a new list on construction so each room owns
    its characters. The list itself may be appended to; the room's other
    fields are fixed.
    """

    name: str
    characters: List[Character]
    sprite_name: str

    # Equality compares the character list, so rooms are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "characters", list(self.characters))

    def add_character(self, character: Character) -> Character:
        """Append ``character`` to the room and return it."""

        self.characters.append(character)
        return character

    @classmethod
    def by_halving(cls, item: "Room") -> "Room":
        return cls(
            name=item.name,
            characters=halve_each(Character, item.characters),
            sprite_name=item.sprite_name,
        )


@halvable
@dataclass(frozen=True)
class Item(Halving):
    """Something the player can carry."""

    name: str
    size: Size
    sprite_name: str

    @classmethod
    def by_halving(cls, item: "Item") -> "Item":
        return cls(
            name=item.name,
            size=halve(item.size),
            sprite_name=item.sprite_name,
        )


@halvable
@dataclass(frozen=True)
class Inventory(Halving):
    """The items carried by the player, in pick-up order."""

    items: List[Item]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", list(self.items))

    def add_item(self, item: Item) -> Item:
        """Append ``item`` to the inventory and return it."""

        self.items.append(item)
        return item

    @classmethod
    def by_halving(cls, item: "Inventory") -> "Inventory":
        return cls(items=halve_each(Item, item.items))


__all__ = ["Character", "Inventory", "Item", "Room"]

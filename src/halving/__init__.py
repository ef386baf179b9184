"""Half-scale copies of game-world records for smaller displays."""

from .codec import (
    decode,
    decode_inventory,
    decode_room,
    encode,
    from_payload,
    halve_document,
    to_payload,
)
from .errors import DecodeError, HalvingError, IncompleteHalvingError
from .geometry import Point, Size
from .records import Character, Inventory, Item, Room
from .scaling import (
    HALVING_DIVISOR,
    Halving,
    check_halving_complete,
    halvable,
    halve,
    halve_each,
    halving_fields,
    missing_fields,
    referenced_fields,
)
from .settings import DEFAULT_SETTINGS, CodecSettings

__all__ = [
    "Point",
    "Size",
    "Halving",
    "HALVING_DIVISOR",
    "halvable",
    "halve",
    "halve_each",
    "halving_fields",
    "referenced_fields",
    "missing_fields",
    "check_halving_complete",
    "Character",
    "Room",
    "Item",
    "Inventory",
    "encode",
    "decode",
    "decode_room",
    "decode_inventory",
    "to_payload",
    "from_payload",
    "halve_document",
    "CodecSettings",
    "DEFAULT_SETTINGS",
    "HalvingError",
    "DecodeError",
    "IncompleteHalvingError",
]

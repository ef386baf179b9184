"""JSON encoding and decoding for room and inventory documents.

Documents use the camelCase keys of the asset files (``spriteName``) and store
points and sizes as two-element arrays::

    {"name": "Bar", "spriteName": "bar.png",
     "characters": [{"name": "Barman", "position": [100, 100],
                     "spriteName": "barman.png"}]}
"""

from __future__ import annotations

import json
import logging
from abc import abstractmethod
from typing import Any, Dict, List, Mapping, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, ValidationError

from .errors import DecodeError
from .geometry import Point, Size
from .records import Character, Inventory, Item, Room
from .scaling import Halving
from .settings import DEFAULT_SETTINGS, CodecSettings

logger = logging.getLogger(__name__)

_R = TypeVar("_R", bound=Halving)

Payload = Dict[str, Any]


class _Document(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    @abstractmethod
    def to_record(self) -> Any:
        """Return the record described by this document."""


class _CharacterDocument(_Document):
    name: StrictStr
    sprite_name: StrictStr = Field(alias="spriteName")
    position: Tuple[StrictFloat, StrictFloat]

    def to_record(self) -> Character:
        return Character(
            name=self.name,
            position=Point(*self.position),
            sprite_name=self.sprite_name,
        )


class _RoomDocument(_Document):
    name: StrictStr
    sprite_name: StrictStr = Field(alias="spriteName")
    characters: List[_CharacterDocument]

    def to_record(self) -> Room:
        return Room(
            name=self.name,
            characters=[character.to_record() for character in self.characters],
            sprite_name=self.sprite_name,
        )


class _ItemDocument(_Document):
    name: StrictStr
    sprite_name: StrictStr = Field(alias="spriteName")
    size: Tuple[StrictFloat, StrictFloat]

    def to_record(self) -> Item:
        return Item(
            name=self.name,
            size=Size(*self.size),
            sprite_name=self.sprite_name,
        )


class _InventoryDocument(_Document):
    items: List[_ItemDocument]

    def to_record(self) -> Inventory:
        return Inventory(items=[item.to_record() for item in self.items])


_DOCUMENT_MODELS: Mapping[type, Type[_Document]] = {
    Character: _CharacterDocument,
    Room: _RoomDocument,
    Item: _ItemDocument,
    Inventory: _InventoryDocument,
}


def to_payload(record: Halving) -> Payload:
    """Return the JSON-serialisable representation of ``record``."""

    if isinstance(record, Character):
        return {
            "name": record.name,
            "position": list(record.position.as_pair()),
            "spriteName": record.sprite_name,
        }
    if isinstance(record, Room):
        return {
            "name": record.name,
            "characters": [to_payload(character) for character in record.characters],
            "spriteName": record.sprite_name,
        }
    if isinstance(record, Item):
        return {
            "name": record.name,
            "size": list(record.size.as_pair()),
            "spriteName": record.sprite_name,
        }
    if isinstance(record, Inventory):
        return {"items": [to_payload(item) for item in record.items]}
    raise TypeError(f"Cannot encode {type(record)!r}")


def from_payload(record_type: Type[_R], payload: Any) -> _R:
    """Build a ``record_type`` record from an already parsed JSON value.

    Raises:
        DecodeError: If a required field is missing or has the wrong type.
    """

    model = _document_model(record_type)
    try:
        document = model.model_validate(payload)
    except ValidationError as exc:
        raise _decode_error(record_type, exc) from exc
    return document.to_record()


def encode(record: Halving, *, settings: CodecSettings | None = None) -> str:
    """Serialise ``record`` to JSON text terminated by a newline.

    Raises:
        ValueError: If a coordinate is NaN or infinite, which JSON cannot hold.
    """

    options = settings or DEFAULT_SETTINGS
    return (
        json.dumps(
            to_payload(record),
            indent=options.indent,
            sort_keys=options.sort_keys,
            ensure_ascii=options.ensure_ascii,
            allow_nan=False,
        )
        + "\n"
    )


def decode(record_type: Type[_R], text: Union[str, bytes]) -> _R:
    """Parse JSON ``text`` into a ``record_type`` record.

    Raises:
        DecodeError: If ``text`` is not valid JSON or does not describe a
            ``record_type``.
    """

    model = _document_model(record_type)
    try:
        document = model.model_validate_json(text)
    except ValidationError as exc:
        raise _decode_error(record_type, exc) from exc
    return document.to_record()


def decode_room(text: Union[str, bytes]) -> Room:
    """Parse a room document."""

    return decode(Room, text)


def decode_inventory(text: Union[str, bytes]) -> Inventory:
    """Parse an inventory document."""

    return decode(Inventory, text)


def halve_document(
    record_type: Type[_R],
    text: Union[str, bytes],
    *,
    settings: CodecSettings | None = None,
) -> str:
    """Decode ``text``, halve the resulting record and encode it again.

    Nothing is halved when decoding fails; the :class:`DecodeError` propagates.
    """

    record = decode(record_type, text)
    halved = record_type.by_halving(record)
    logger.debug("Halved %s document", record_type.__name__)
    return encode(halved, settings=settings)


def _document_model(record_type: type) -> Type[_Document]:
    try:
        return _DOCUMENT_MODELS[record_type]
    except KeyError as exc:
        raise TypeError(f"Cannot decode {record_type!r}") from exc


def _decode_error(record_type: type, exc: ValidationError) -> DecodeError:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<document>"
        messages.append(f"{location}: {error['msg']}")
    logger.debug(
        "Rejected %s document with %d error(s)", record_type.__name__, len(messages)
    )
    return DecodeError(record_type.__name__, messages)


__all__ = [
    "decode",
    "decode_inventory",
    "decode_room",
    "encode",
    "from_payload",
    "halve_document",
    "to_payload",
]

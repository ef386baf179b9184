"""The halving contract shared by every scalable record.

A record opts in by subclassing :class:`Halving`, implementing
:meth:`Halving.by_halving` and decorating the dataclass with :func:`halvable`.
``by_halving`` must build the new record by passing every field to ``cls``
explicitly; geometry-bearing fields go through :func:`halve` and owned
collections through :func:`halve_each`.

Python cannot refuse to compile an implementation that forgets a field, so
:func:`halvable` inspects ``by_halving`` when the class is defined and raises
:class:`~halving.errors.IncompleteHalvingError` if any field is left out.
"""

from __future__ import annotations

import ast
import dataclasses
import inspect
import logging
import textwrap
from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, List, Tuple, Type, TypeVar

from .errors import IncompleteHalvingError

logger = logging.getLogger(__name__)

HALVING_DIVISOR = 2

_H = TypeVar("_H", bound="Halving")
_V = TypeVar("_V")


class Halving(ABC):
    """Interface for records that can be rebuilt at half scale."""

    @classmethod
    @abstractmethod
    def by_halving(cls: Type[_H], item: _H) -> _H:
        """Return a new record built from ``item`` with its geometry halved.

        Non-geometric fields are copied unchanged and ``item`` is never
        mutated.
        """


def halve(value: _V) -> _V:
    """Divide a number, :class:`Point` or :class:`Size` by two."""

    return value / HALVING_DIVISOR  # type: ignore[operator]


def halve_each(record_type: Type[_H], items: Iterable[_H]) -> List[_H]:
    """Halve each record in ``items``, keeping order and duplicates."""

    return [record_type.by_halving(item) for item in items]


def halving_fields(cls: type) -> Tuple[str, ...]:
    """Return the names of the fields ``by_halving`` has to assign."""

    return tuple(field.name for field in dataclasses.fields(cls) if field.init)


def _constructor_calls(cls: type) -> List[FrozenSet[str]]:
    """Return the field names passed by each ``cls(...)`` call in ``by_halving``.

    Raises:
        OSError: If the source of ``by_halving`` is unavailable.
        IncompleteHalvingError: If the constructor is called with ``*args`` or
            ``**kwargs``, which makes the assigned fields unknowable.
    """

    source = textwrap.dedent(inspect.getsource(cls.by_halving))
    tree = ast.parse(source)
    constructor_names = {"cls", cls.__name__}
    field_names = halving_fields(cls)

    calls: List[FrozenSet[str]] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if not (isinstance(node.func, ast.Name) and node.func.id in constructor_names):
            continue

        assigned: set[str] = set()
        for position, argument in enumerate(node.args):
            if isinstance(argument, ast.Starred):
                raise IncompleteHalvingError(
                    cls.__name__,
                    reason="by_halving must not build the record from *args",
                )
            if position < len(field_names):
                assigned.add(field_names[position])

        for keyword in node.keywords:
            if keyword.arg is None:
                raise IncompleteHalvingError(
                    cls.__name__,
                    reason="by_halving must not build the record from **kwargs",
                )
            assigned.add(keyword.arg)
        calls.append(frozenset(assigned))

    return calls


def referenced_fields(cls: type) -> FrozenSet[str]:
    """Return the field names every constructor call in ``cls.by_halving`` assigns.

    Each ``cls(...)`` (or ``ClassName(...)``) call is checked on its own, so a
    field only counts when no branch of ``by_halving`` leaves it out.
    Positional arguments map onto fields in declaration order.

    Raises:
        OSError: If the source of ``by_halving`` is unavailable.
        IncompleteHalvingError: If the constructor is called with ``*args`` or
            ``**kwargs``.
    """

    calls = _constructor_calls(cls)
    if not calls:
        return frozenset()
    return frozenset.intersection(*calls)


def missing_fields(cls: type) -> Tuple[str, ...]:
    """Return the fields of ``cls`` that some ``by_halving`` constructor call omits."""

    referenced = referenced_fields(cls)
    return tuple(sorted(name for name in halving_fields(cls) if name not in referenced))


def check_halving_complete(cls: Type[_H]) -> Type[_H]:
    """Validate that ``cls`` implements the halving contract for every field.

    Raises:
        IncompleteHalvingError: If ``cls`` is not a dataclass, has no concrete
            ``by_halving``, declares fields with defaults or leaves fields out
            of ``by_halving``.
    """

    name = cls.__name__
    if not dataclasses.is_dataclass(cls):
        raise IncompleteHalvingError(name, reason="halvable records must be dataclasses")

    method = getattr(cls, "by_halving", None)
    if method is None or getattr(method, "__isabstractmethod__", False):
        raise IncompleteHalvingError(name, reason="by_halving is not implemented")

    # A default would let by_halving skip a field without failing at runtime.
    defaulted = [
        field.name
        for field in dataclasses.fields(cls)
        if field.init
        and (
            field.default is not dataclasses.MISSING
            or field.default_factory is not dataclasses.MISSING
        )
    ]
    if defaulted:
        raise IncompleteHalvingError(
            name,
            defaulted,
            reason="fields with defaults are not allowed: " + ", ".join(sorted(defaulted)),
        )

    try:
        missing = missing_fields(cls)
    except IncompleteHalvingError:
        raise
    except (OSError, TypeError) as exc:
        logger.warning(
            "Cannot read by_halving source for %s (%s); relying on required fields only",
            name,
            exc,
        )
        return cls

    if missing:
        raise IncompleteHalvingError(name, missing)
    return cls


def halvable(cls: Type[_H]) -> Type[_H]:
    """Class decorator running :func:`check_halving_complete` at definition time."""

    return check_halving_complete(cls)


__all__ = [
    "HALVING_DIVISOR",
    "Halving",
    "check_halving_complete",
    "halvable",
    "halve",
    "halve_each",
    "halving_fields",
    "missing_fields",
    "referenced_fields",
]

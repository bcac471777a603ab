"""Declarative schema for remote methods."""

from __future__ import annotations

from dataclasses import dataclass


class _Unset:
    """Marker for "argument not provided", distinct from an explicit None."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass(frozen=True, slots=True)
class Param:
    """One field of a method: its wire key and its Python keyword."""

    wire: str
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.wire)

    def matches(self, key: str) -> bool:
        return key == self.wire or key == self.name


def p(wire: str, name: str = "") -> Param:
    return Param(wire, name)


@dataclass(frozen=True, slots=True)
class MethodSpec:
    """Method name plus its required and optional fields, in schema order."""

    method: str
    required: tuple[Param, ...] = ()
    optional: tuple[Param, ...] = ()
    doc: str = ""

    @property
    def params(self) -> tuple[Param, ...]:
        return self.required + self.optional

    @property
    def namespace(self) -> str:
        return self.method.split(".", 1)[0]

    def lookup(self, key: str) -> Param | None:
        for param in self.params:
            if param.matches(key):
                return param
        return None


# Fields shared by most list/detail queries.
PROPERTIES = p("properties")
LIMITS = p("limits")
SORT = p("sort")
FILTER = p("filter")
LISTING = (PROPERTIES, LIMITS, SORT)
FILTERED_LISTING = (PROPERTIES, LIMITS, SORT, FILTER)

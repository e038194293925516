"""Stylesheet model: selectors, specificity, declarations and rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union


class Specificity(NamedTuple):
    """Selector weight, compared lexicographically: ids > classes > tags."""

    ids: int
    classes: int
    tags: int


@dataclass(frozen=True)
class SimpleSelector:
    """Tag name, id and classes with no combinators.

    The universal selector ``*`` adds no constraint, so ``*`` alone parses
    to an all-default SimpleSelector.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    def specificity(self) -> Specificity:
        return Specificity(
            ids=0 if self.id is None else 1,
            classes=len(self.classes),
            tags=0 if self.tag_name is None else 1,
        )

    def __str__(self) -> str:
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{c}" for c in self.classes)
        return text or "*"


class Selector:
    """Base for selector cases. Combinator cases subclass this too."""

    def specificity(self) -> Specificity:
        raise NotImplementedError


@dataclass(frozen=True)
class Simple(Selector):
    """Selector case wrapping a single SimpleSelector."""

    selector: SimpleSelector

    def specificity(self) -> Specificity:
        return self.selector.specificity()

    def __str__(self) -> str:
        return str(self.selector)


# ---------------------------------------------------------------------------
# Declaration values
# ---------------------------------------------------------------------------


class Unit(Enum):
    PX = "px"


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class Keyword:
    value: str


@dataclass(frozen=True)
class Length:
    value: float
    unit: Unit = Unit.PX


@dataclass(frozen=True)
class ColorValue:
    color: Color


Value = Union[Keyword, Length, ColorValue]


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair from a rule block."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """Selectors (most specific first) plus their declarations."""

    selectors: list[Selector]
    declarations: list[Declaration] = field(default_factory=list)


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order."""

    rules: list[Rule]

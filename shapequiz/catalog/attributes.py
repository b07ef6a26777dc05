from __future__ import annotations

"""Shape, color and size registries.

Includes display names for every attribute id, the hex presentation value
of each color and the scale multiplier of each size. Colors listed in
RESERVED_COLORS exist only for rendering and are never drawn at random.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Tuple


class AttributeKind(str, Enum):
    SHAPE = "shape"
    COLOR = "color"
    SIZE = "size"


class CatalogError(KeyError):
    """Unknown attribute id, empty selection pool, or undersized catalog."""


@dataclass(frozen=True)
class ColorInfo:
    display_name: str
    hex: str


@dataclass(frozen=True)
class SizeInfo:
    display_name: str
    multiplier: float


SHAPES: Dict[str, str] = {
    "circle": "Circle",
    "square": "Square",
    "triangle": "Triangle",
    "rectangle": "Rectangle",
    "oval": "Oval",
    "star": "Star",
    "hexagon": "Hexagon",
}

COLORS: Dict[str, ColorInfo] = {
    "red": ColorInfo("Red", "#E74C3C"),
    "blue": ColorInfo("Blue", "#3498DB"),
    "yellow": ColorInfo("Yellow", "#F1C40F"),
    "green": ColorInfo("Green", "#2ECC71"),
    "pink": ColorInfo("Pink", "#E91E63"),
    "orange": ColorInfo("Orange", "#FF9800"),
    "purple": ColorInfo("Purple", "#9B59B6"),
    "white": ColorInfo("White", "#FFFFFF"),
    "black": ColorInfo("Black", "#2C3E50"),
}

RESERVED_COLORS = frozenset({"white", "black"})

SIZES: Dict[str, SizeInfo] = {
    "small": SizeInfo("Small", 0.6),
    "little": SizeInfo("Little", 0.5),
    "medium": SizeInfo("Medium", 0.85),
    "large": SizeInfo("Large", 1.1),
    "big": SizeInfo("Big", 1.2),
}

# Base figure size in pixels before the size multiplier is applied
BASE_SIZE_PX = 70


class AttributeCatalog:
    """Read-only lookup over the three attribute registries.

    Id listings are tuples in registry order so that a seeded RNG always
    produces the same questions.

    Args:
        shapes: Shape id -> display name.
        colors: Color id -> ColorInfo.
        sizes: Size id -> SizeInfo.
        reserved_colors: Color ids excluded from random selection.
        min_options: Smallest pool each kind must offer for a full set of
            answer options.
    """

    def __init__(
        self,
        shapes: Mapping[str, str] = SHAPES,
        colors: Mapping[str, ColorInfo] = COLORS,
        sizes: Mapping[str, SizeInfo] = SIZES,
        reserved_colors: Iterable[str] = RESERVED_COLORS,
        min_options: int = 4,
    ) -> None:
        self._shapes = dict(shapes)
        self._colors = dict(colors)
        self._sizes = dict(sizes)
        self._reserved = frozenset(reserved_colors)
        self._check_minimums(min_options)

    def _check_minimums(self, min_options: int) -> None:
        pools = {
            AttributeKind.SHAPE: len(self._shapes),
            AttributeKind.SIZE: len(self._sizes),
            AttributeKind.COLOR: len([c for c in self._colors if c not in self._reserved]),
        }
        for kind, n in pools.items():
            if n < min_options:
                raise CatalogError(
                    f"{kind.value} catalog has {n} selectable ids; at least {min_options} are required"
                )

    def _registry(self, kind: AttributeKind) -> Mapping[str, object]:
        if kind == AttributeKind.SHAPE:
            return self._shapes
        if kind == AttributeKind.COLOR:
            return self._colors
        if kind == AttributeKind.SIZE:
            return self._sizes
        raise CatalogError(f"Unknown attribute kind: {kind}")

    def all_ids(self, kind: AttributeKind) -> Tuple[str, ...]:
        return tuple(self._registry(kind).keys())

    def selectable_ids(self, kind: AttributeKind) -> Tuple[str, ...]:
        """Ids eligible for random selection (reserved colors removed)."""
        ids = self.all_ids(kind)
        if kind == AttributeKind.COLOR:
            return tuple(i for i in ids if i not in self._reserved)
        return ids

    def display_name(self, kind: AttributeKind, attr_id: str) -> str:
        entry = self._registry(kind).get(attr_id)
        if entry is None:
            raise CatalogError(f"Unknown {AttributeKind(kind).value} id: {attr_id}")
        if isinstance(entry, str):
            return entry
        return entry.display_name  # type: ignore[attr-defined]

    def random_id(self, kind: AttributeKind, rng: random.Random, excluding: Iterable[str] = ()) -> str:
        """Pick an id uniformly at random.

        Args:
            kind: Attribute kind to draw from.
            rng: Random source.
            excluding: Ids that must not be returned. Reserved colors are
                always excluded for the color kind.

        Returns:
            The chosen attribute id.
        """
        skip = set(excluding)
        pool = [i for i in self.selectable_ids(kind) if i not in skip]
        if not pool:
            raise CatalogError(f"No {AttributeKind(kind).value} ids left after excluding {sorted(skip)}")
        return rng.choice(pool)

    def color_hex(self, color_id: str) -> str:
        if color_id not in self._colors:
            raise CatalogError(f"Unknown color id: {color_id}")
        return self._colors[color_id].hex

    def size_multiplier(self, size_id: str) -> float:
        if size_id not in self._sizes:
            raise CatalogError(f"Unknown size id: {size_id}")
        return self._sizes[size_id].multiplier

    def pixel_size(self, size_id: str) -> int:
        return round(BASE_SIZE_PX * self.size_multiplier(size_id))

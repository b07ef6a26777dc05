from .attributes import (
    AttributeCatalog,
    AttributeKind,
    CatalogError,
    COLORS,
    RESERVED_COLORS,
    SHAPES,
    SIZES,
)

__all__ = [
    "AttributeCatalog",
    "AttributeKind",
    "CatalogError",
    "COLORS",
    "RESERVED_COLORS",
    "SHAPES",
    "SIZES",
]

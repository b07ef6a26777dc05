import random
import unittest

from shapequiz.catalog.attributes import (
    AttributeCatalog,
    AttributeKind,
    CatalogError,
    RESERVED_COLORS,
    SizeInfo,
)


class AttributeCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = AttributeCatalog()
        self.rng = random.Random(7)

    def test_display_names(self) -> None:
        self.assertEqual(self.catalog.display_name(AttributeKind.SHAPE, "hexagon"), "Hexagon")
        self.assertEqual(self.catalog.display_name(AttributeKind.COLOR, "purple"), "Purple")
        self.assertEqual(self.catalog.display_name(AttributeKind.SIZE, "little"), "Little")

    def test_unknown_id_raises(self) -> None:
        with self.assertRaises(CatalogError):
            self.catalog.display_name(AttributeKind.SHAPE, "pentagon")
        with self.assertRaises(KeyError):
            self.catalog.color_hex("gold")

    def test_all_ids_keep_registry_order(self) -> None:
        self.assertEqual(
            self.catalog.all_ids(AttributeKind.SIZE),
            ("small", "little", "medium", "large", "big"),
        )
        self.assertIn("white", self.catalog.all_ids(AttributeKind.COLOR))
        self.assertNotIn("white", self.catalog.selectable_ids(AttributeKind.COLOR))

    def test_random_color_never_reserved(self) -> None:
        drawn = {self.catalog.random_id(AttributeKind.COLOR, self.rng) for _ in range(500)}
        self.assertFalse(drawn & RESERVED_COLORS)
        self.assertEqual(len(drawn), 7)

    def test_random_id_respects_exclusions(self) -> None:
        for _ in range(200):
            picked = self.catalog.random_id(AttributeKind.SHAPE, self.rng, excluding={"circle", "star"})
            self.assertNotIn(picked, {"circle", "star"})

    def test_empty_pool_raises(self) -> None:
        with self.assertRaises(CatalogError):
            self.catalog.random_id(AttributeKind.SIZE, self.rng, excluding=self.catalog.all_ids(AttributeKind.SIZE))

    def test_undersized_catalog_rejected(self) -> None:
        with self.assertRaises(CatalogError):
            AttributeCatalog(shapes={"circle": "Circle", "square": "Square"})
        with self.assertRaises(CatalogError):
            AttributeCatalog(sizes={"small": SizeInfo("Small", 0.6)})

    def test_presentation_values(self) -> None:
        self.assertEqual(self.catalog.color_hex("red"), "#E74C3C")
        self.assertEqual(self.catalog.size_multiplier("big"), 1.2)
        self.assertEqual(self.catalog.pixel_size("little"), 35)
        self.assertEqual(self.catalog.pixel_size("big"), 84)


if __name__ == "__main__":
    unittest.main()

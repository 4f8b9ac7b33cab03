"""
Tests for resource deduplication.
"""

import unittest

from push_manifest.core.aggregate import aggregate
from push_manifest.models import ResourceDescriptor as D
from push_manifest.models import ResourceType as T


class TestAggregate(unittest.TestCase):
    def test_unique_urls_kept_in_order(self):
        result = aggregate([D("/b.js", T.SCRIPT, 1), D("/a.css", T.STYLE, 1)])
        self.assertEqual(list(result), ["/b.js", "/a.css"])

    def test_lower_weight_wins(self):
        result = aggregate([D("/x.js", T.SCRIPT, 3), D("/x.js", T.SCRIPT, 1)])
        self.assertEqual(result["/x.js"].weight, 1)

    def test_weight_never_increases(self):
        result = aggregate([D("/x.js", T.SCRIPT, 1), D("/x.js", T.SCRIPT, 2)])
        self.assertEqual(result["/x.js"].weight, 1)

    def test_tie_keeps_first_discovery(self):
        first = D("/x", T.OTHER, 2)
        result = aggregate([first, D("/x", T.IMAGE, 2)])
        self.assertIs(result["/x"], first)

    def test_replacement_keeps_first_position(self):
        result = aggregate([
            D("/deep.js", T.SCRIPT, 2),
            D("/other.js", T.SCRIPT, 1),
            D("/deep.js", T.SCRIPT, 1),
        ])
        self.assertEqual(list(result), ["/deep.js", "/other.js"])
        self.assertEqual(result["/deep.js"].weight, 1)

    def test_exclude(self):
        result = aggregate(
            [D("/index.html", T.HTML_IMPORT, 2), D("/a.js", T.SCRIPT, 1)],
            exclude=["/index.html"],
        )
        self.assertEqual(list(result), ["/a.js"])

    def test_deterministic(self):
        items = [D("/a", T.OTHER, 2), D("/b", T.OTHER, 1), D("/a", T.OTHER, 1)]
        self.assertEqual(aggregate(items), aggregate(list(items)))

    def test_empty(self):
        self.assertEqual(aggregate([]), {})


if __name__ == "__main__":
    unittest.main()

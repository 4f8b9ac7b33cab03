"""
Tests for manifest assembly and writing.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path

from push_manifest.config import DEFAULT_MANIFEST_NAME
from push_manifest.core.manifest import PushManifest, build_manifest
from push_manifest.errors import InputResolutionError, ManifestWriteError
from push_manifest.utils.files import dump_manifest

INDEX_HTML = """<!doctype html>
<html>
<head>
  <link rel="stylesheet" href="/css/app.css">
  <script src="/js/app.js"></script>
</head>
<body></body>
</html>
"""

PAGE_HTML = """<!doctype html>
<html><body><img src="/img/page.png"></body></html>
"""


class _SiteTestCase(unittest.TestCase):
    """Runs each test inside a temporary site directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        old_cwd = os.getcwd()
        os.chdir(self.root)
        self.addCleanup(os.chdir, old_cwd)
        (self.root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
        (self.root / "page.html").write_text(PAGE_HTML, encoding="utf-8")


class TestSingleDocument(_SiteTestCase):
    def test_flat_manifest(self):
        entries = build_manifest(["index.html"])
        expected = {
            "/css/app.css": {"type": "style", "weight": 1},
            "/js/app.js": {"type": "script", "weight": 1},
        }
        self.assertEqual(entries, expected)
        written = json.loads((self.root / DEFAULT_MANIFEST_NAME).read_text())
        self.assertEqual(written, expected)
        self.assertEqual(list(written), ["/css/app.css", "/js/app.js"])

    def test_custom_name(self):
        build_manifest(["index.html"], name="out/push.json")
        self.assertTrue((self.root / "out" / "push.json").is_file())
        self.assertFalse((self.root / DEFAULT_MANIFEST_NAME).exists())

    def test_pretty_printed(self):
        build_manifest(["index.html"])
        text = (self.root / DEFAULT_MANIFEST_NAME).read_text()
        self.assertEqual(text, dump_manifest(json.loads(text)))
        self.assertIn('\n  "/css/app.css": {\n    "type": "style",', text)
        self.assertTrue(text.endswith("}\n"))

    def test_idempotent(self):
        build_manifest(["index.html", "page.html"])
        first = (self.root / DEFAULT_MANIFEST_NAME).read_bytes()
        build_manifest(["index.html", "page.html"])
        self.assertEqual(first, (self.root / DEFAULT_MANIFEST_NAME).read_bytes())

    def test_overwrites_existing_manifest(self):
        (self.root / DEFAULT_MANIFEST_NAME).write_text('{"/stale.js": {}}')
        build_manifest(["index.html"])
        written = json.loads((self.root / DEFAULT_MANIFEST_NAME).read_text())
        self.assertNotIn("/stale.js", written)

    def test_generate_without_write(self):
        build_manifest(["index.html"], write=False)
        self.assertFalse((self.root / DEFAULT_MANIFEST_NAME).exists())

    def test_missing_single_document_is_fatal(self):
        with self.assertRaises(InputResolutionError):
            build_manifest(["nope.html"])
        self.assertFalse((self.root / DEFAULT_MANIFEST_NAME).exists())

    def test_no_inputs(self):
        with self.assertRaises(InputResolutionError):
            PushManifest([])

    def test_base_dir_override(self):
        sub = self.root / "app"
        sub.mkdir()
        (sub / "index.html").write_text('<script src="js/a.js"></script>', encoding="utf-8")
        entries = build_manifest(["app/index.html"], base_dir=".", write=False)
        self.assertEqual(entries, {"/app/js/a.js": {"type": "script", "weight": 1}})

    def test_write_error(self):
        blocker = self.root / "blocker"
        blocker.write_text("not a directory")
        with self.assertRaises(ManifestWriteError):
            build_manifest(["index.html"], name=blocker / "push.json")


class TestMultiDocument(_SiteTestCase):
    def test_keyed_by_input_name_in_order(self):
        entries = build_manifest(["page.html", "index.html"])
        self.assertEqual(list(entries), ["page.html", "index.html"])
        self.assertEqual(
            entries["page.html"], {"/img/page.png": {"type": "image", "weight": 1}}
        )
        self.assertEqual(entries["index.html"]["/js/app.js"]["type"], "script")
        written = json.loads((self.root / DEFAULT_MANIFEST_NAME).read_text())
        self.assertEqual(list(written), ["page.html", "index.html"])

    def test_input_name_kept_as_supplied(self):
        entries = build_manifest(["./index.html", "page.html"], write=False)
        self.assertEqual(list(entries), ["./index.html", "page.html"])

    def test_failing_document_is_skipped(self):
        with self.assertLogs("push-manifest", level="WARNING"):
            entries = build_manifest(["index.html", "missing.html", "page.html"])
        self.assertEqual(list(entries), ["index.html", "page.html"])

    def test_all_documents_failing_is_fatal(self):
        with self.assertRaises(InputResolutionError):
            build_manifest(["a.html", "b.html"])


if __name__ == "__main__":
    unittest.main()

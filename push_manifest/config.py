"""Configuration constants for the push-manifest generator."""

import os

# Output filename can also be supplied via the PUSH_MANIFEST_NAME env var
DEFAULT_MANIFEST_NAME = os.environ.get("PUSH_MANIFEST_NAME", "push-manifest.json")

BASE_WEIGHT = 1    # weight of resources referenced directly by the root document
WEIGHT_STEP = 1    # added once per level of HTML-import nesting

JSON_INDENT = 2

# URL prefixes that can never be pushed
SKIPPED_SCHEMES = ("data:", "javascript:", "mailto:", "tel:", "blob:", "about:", "#")

FONT_EXTENSIONS = frozenset([".woff", ".woff2", ".ttf", ".otf", ".eot"])
IMAGE_EXTENSIONS = frozenset([
    ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".avif", ".ico", ".bmp",
])
STYLE_EXTENSIONS = frozenset([".css"])
SCRIPT_EXTENSIONS = frozenset([".js", ".mjs"])

# <link rel="..."> token → resource type value
LINK_REL_TYPES = {
    "stylesheet":       "style",
    "import":           "html-import",
    "icon":             "image",
    "apple-touch-icon": "image",
    "mask-icon":        "image",
    "manifest":         "other",
}

# rel tokens whose type is decided by the "as" attribute
PRELOAD_RELS = frozenset(["preload", "prefetch", "modulepreload"])

# <link rel="preload" as="..."> → resource type value
PRELOAD_AS_TYPES = {
    "style":    "style",
    "script":   "script",
    "worker":   "script",
    "image":    "image",
    "font":     "font",
    "document": "html-import",
}

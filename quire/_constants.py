"""Common literal values used across quire.

These constants keep filenames and directive prefixes centralized so the
content loader, the render engine, and tests can import the same values
without drifting. Intended for internal use within the quire package.

Examples
--------
>>> from quire import _constants
>>> _constants.INSERT_BG_PREFIX.startswith(_constants.INSERT_PREFIX)
True
"""

FEED_FILENAME = "feed.yaml"
META_FILENAME = "meta.yaml"
CONTENT_FILENAME = "content.md"
FRAGMENTS_DIR = "fragments"
POSTS_DIR = "entries"
PAGES_DIR = "pages"
BLOG_OUTPUT_DIR = "blog"
FEED_OUTPUT = "blog/atom.xml"
STYLESHEET_OUTPUT = "highlight.css"

STATIC_PAGES_PLACEHOLDER = "___STATIC_PAGES___"

FENCE_MARKER = "```"
INSERT_PREFIX = "!insert "
INSERT_BG_PREFIX = "!insert bg "
CAPTION_PREFIX = "!image_subtitle "
HTML_PREFIX = "!html "

DEFAULT_HIGHLIGHT_LANGUAGES = ("gdscript",)

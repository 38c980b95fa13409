"""Link, scope, and anchor type constants shared by the parser and its consumers."""

LINK_TYPE_MARKDOWN = "markdown"
LINK_TYPE_WIKI = "wiki"

SCOPE_INTERNAL = "internal"
SCOPE_CROSS_DOCUMENT = "cross-document"

ANCHOR_HEADER = "header"
ANCHOR_BLOCK = "block"

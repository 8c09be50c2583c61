from .errors import (
    HTMLParseError,
    HTMLSerializeError,
    InvalidOptionsError,
    InvalidURLError,
    MarkdownParseError,
    MarkdownSerializeError,
    RelinkError,
)
from .md_helper import MarkdownLinkResolver, resolve_markdown_relative_links
from .options import ResolveOptions

__all__ = [
    "HTMLParseError",
    "HTMLSerializeError",
    "InvalidOptionsError",
    "InvalidURLError",
    "MarkdownLinkResolver",
    "MarkdownParseError",
    "MarkdownSerializeError",
    "RelinkError",
    "ResolveOptions",
    "resolve_markdown_relative_links",
]

"""Error hierarchy for mdrelink, one class per failing stage."""


class RelinkError(Exception):
    """Base exception for all mdrelink errors."""

    stage = None


class InvalidOptionsError(RelinkError):
    """Resolution options are missing or of the wrong type."""

    stage = "options"


class InvalidURLError(RelinkError):
    """A link target could not be classified."""

    stage = "url"


class MarkdownParseError(RelinkError):
    stage = "markdown-parse"


class HTMLParseError(RelinkError):
    stage = "html-parse"


class HTMLSerializeError(RelinkError):
    stage = "html-serialize"


class MarkdownSerializeError(RelinkError):
    stage = "markdown-serialize"

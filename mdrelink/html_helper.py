## html helper
import logging
import re

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from .errors import HTMLParseError, HTMLSerializeError
from .url_utils import already_url, resolve_absolute_url

_TAG_OPEN_RE = re.compile(r"<([a-zA-Z][^\s/>]*)")
# same value rules as the stdlib html.parser bs4 is driven by
_ATTR_RE = re.compile(
    r"""[\s/]*(?P<name>[^\s/>"'=][^\s/>=]*)(?:\s*=\s*(?P<value>"[^"]*"|'[^']*'|[^\s>]*))?"""
)


class FragmentFormatter(HTMLFormatter):
    """Writes a parsed fragment back the way it was authored: `<img ...>`
    instead of `<img .../>`, attributes in source order and named entities
    for characters that have one."""

    def __init__(self):
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_html,
            void_element_close_prefix="",
        )

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FRAGMENT_FORMATTER = FragmentFormatter()


def parse_fragment(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise HTMLParseError(f"could not parse html fragment: {e}") from e


def serialize_fragment(soup: BeautifulSoup) -> str:
    try:
        return soup.decode(formatter=FRAGMENT_FORMATTER)
    except Exception as e:
        raise HTMLSerializeError(f"could not serialize html fragment: {e}") from e


def line_offsets(html: str) -> list[int]:
    offsets = [0]
    offsets.extend(i + 1 for i, c in enumerate(html) if c == "\n")
    return offsets


def locate_src_value(html: str, offsets: list[int], img) -> tuple[int, int] | None:
    """Span of the `src` value (without quotes) of `img` in `html`, from the
    position html.parser recorded for the tag."""
    if img.sourceline is None or img.sourcepos is None or img.sourceline > len(offsets):
        return None
    pos = offsets[img.sourceline - 1] + img.sourcepos
    m = _TAG_OPEN_RE.match(html, pos)
    if not m or m.group(1).lower() != "img":
        return None

    span = None
    pos = m.end()
    while True:
        attr = _ATTR_RE.match(html, pos)
        if not attr or attr.end() == pos:
            break
        # html.parser keeps the last duplicate, so does bs4
        if attr.group("name").lower() == "src" and attr.group("value") is not None:
            start, end = attr.span("value")
            if html[start] in "\"'":
                start, end = start + 1, end - 1
            span = (start, end)
        pos = attr.end()
    return span


def rewrite_image_sources(html: str, base_url: str, strict: bool = False) -> str:
    """
    Prefix relative `<img src>` values in an html fragment with `base_url`.

    Only `img` elements are considered, `<script src>` and friends are left
    alone. Values are edited in place, everything else in the fragment is
    kept as written.
    """
    soup = parse_fragment(html)
    offsets = line_offsets(html)
    edits = []
    for img in soup.find_all("img"):
        src = img.get("src")
        if not isinstance(src, str) or already_url(src, strict):
            continue
        img["src"] = resolve_absolute_url(src, base_url)
        logging.debug("rewrote img src `%s` to `%s`", src, img["src"])
        edits.append(locate_src_value(html, offsets, img))

    if not edits:
        return html
    if None in edits:
        # tag could not be matched back to the source, write the whole tree
        return serialize_fragment(soup)

    out = html
    for start, end in sorted(edits, reverse=True):
        out = out[:start] + resolve_absolute_url(out[start:end], base_url) + out[end:]
    return out

## markdown helper
import logging
import typing

import mistune
from mistune.helpers import parse_link as parse_link_destination
from mistune.helpers import parse_link_href
from mistune.inline_parser import InlineParser
from mistune.plugins import import_plugin
from mistune.plugins.url import URL_LINK_PATTERN
from mistune.renderers.markdown import MarkdownRenderer

from .errors import MarkdownParseError, MarkdownSerializeError, RelinkError
from .html_helper import rewrite_image_sources
from .options import ResolveOptions
from .url_utils import already_url, resolve_absolute_url


class SourceLinkInlineParser(InlineParser):
    """
    Inline parser that keeps link destinations as written in the source.

    mistune percent-encodes every destination (`ü` -> `%C3%BC`, a space ->
    `%20`), which would change links that are not ours to touch.
    """

    def parse_link(self, m, state):
        count = len(state.tokens)
        pos = super().parse_link(m, state)
        if pos and len(state.tokens) > count:
            token = state.tokens[-1]
            if token["type"] in ("link", "image") and not token.get("label"):
                keep_destination(token, state.src, m.start(), pos)
        return pos

    def parse_auto_link(self, m, state):
        count = len(state.tokens)
        pos = super().parse_auto_link(m, state)
        if len(state.tokens) > count and state.tokens[-1]["type"] == "link":
            state.tokens[-1]["attrs"]["url"] = m.group(0)[1:-1]
        return pos


def keep_destination(token: dict, src: str, start: int, end: int):
    """Swap the encoded url of an inline link for the destination text in `src[start:end]`."""
    i = src.find("](", start, end)
    while i != -1:
        attrs, next_pos = parse_link_destination(src, i + 2)
        if next_pos == end and attrs == token["attrs"]:
            href, href_pos = parse_link_href(src, i + 2)
            written = src[i + 2 : href_pos].lstrip(" \t\r\n")
            token["attrs"]["url"] = href
            token["angle"] = written.startswith("<")
            return
        i = src.find("](", i + 1, end)


def parse_bare_url(inline: InlineParser, m, state) -> int:
    text = m.group(0)
    pos = m.end()
    if state.in_link:
        inline.process_text(text, state)
        return pos
    state.append_token(
        {
            "type": "link",
            "children": [{"type": "text", "raw": text}],
            "attrs": {"url": text},
            "bare": True,
        }
    )
    return pos


def bare_urls(md: mistune.Markdown):
    """GFM autolinks for bare `http(s)://` urls, written back without `<>`."""
    md.inline.register("url_link", URL_LINK_PATTERN, parse_bare_url)


def create_parser() -> mistune.Markdown:
    # tables, strikethrough, task lists and bare-url autolinks
    plugins = [import_plugin(name) for name in ("table", "strikethrough", "task_lists")]
    return mistune.Markdown(inline=SourceLinkInlineParser(), plugins=plugins + [bare_urls])


class MarkdownLinkResolver(MarkdownRenderer):
    """
    Re-renders markdown while absolutizing relative targets:
    - markdown links are prefixed with `github_base_url`
    - `<img src>` inside raw html is prefixed with `cdn_base_url`
    """

    def __init__(self, options: ResolveOptions):
        self.options = options
        super().__init__()

    def link(self, token: dict[str, dict], state: mistune.BlockState) -> str:
        url = token["attrs"]["url"]
        # reference links are written as `[text][label]`, their url lives in the definition
        if token.get("label"):
            return super().link(token, state)
        if not already_url(url, self.options.strict_urls):
            token["attrs"]["url"] = resolve_absolute_url(url, self.options.github_base_url)
            logging.debug("rewrote link `%s` to `%s`", url, token["attrs"]["url"])
        return self.render_link(token, state)

    def image(self, token: dict[str, dict], state: mistune.BlockState) -> str:
        # markdown images are not links, keep their target as written
        return "!" + self.render_link(token, state)

    def render_link(self, token: dict[str, dict], state: mistune.BlockState) -> str:
        url = token["attrs"]["url"]
        if token.get("bare"):
            return url
        if "angle" not in token:
            return super().link(token, state)

        out = "[" + self.render_children(token, state) + "]("
        out += "<" + url + ">" if token["angle"] else url
        title = token["attrs"].get("title")
        if title:
            out += ' "' + title.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return out + ")"

    def inline_html(self, token: dict[str, dict], state: mistune.BlockState) -> str:
        token["raw"] = self.rewrite_html(token["raw"])
        return super().inline_html(token, state)

    def block_html(self, token: dict[str, dict], state: mistune.BlockState) -> str:
        # the block separator is added back by the base renderer
        token["raw"] = self.rewrite_html(token["raw"]).rstrip("\n")
        return super().block_html(token, state)

    def strikethrough(self, token: dict[str, dict], state: mistune.BlockState) -> str:
        return "~~" + self.render_children(token, state) + "~~"

    def rewrite_html(self, html: str) -> str:
        return rewrite_image_sources(html, self.options.cdn_base_url, self.options.strict_urls)

    @classmethod
    def get_markdown(cls, md_text: str, options: ResolveOptions) -> str:
        parser = create_parser()
        try:
            tokens, state = parser.parse(md_text)
        except Exception as e:
            raise MarkdownParseError(f"could not parse markdown: {e}") from e

        try:
            out = cls(options)(tokens, state)
        except RelinkError:
            raise
        except Exception as e:
            raise MarkdownSerializeError(f"could not render markdown: {e}") from e
        return out.strip()


def resolve_markdown_relative_links(
    content: str, options: typing.Union[ResolveOptions, typing.Mapping[str, typing.Any]]
) -> str:
    """
    Replace relative paths in `content` with absolute urls.

    `options` is a `ResolveOptions` or a mapping with `cdnBaseURL` and
    `githubBaseURL` (snake_case names are accepted too).
    """
    options = ResolveOptions.coerce(options)
    return MarkdownLinkResolver.get_markdown(content, options)

import hyperlink

from .errors import InvalidURLError


def already_url(path: str, strict: bool = False) -> bool:
    """`http` prefix test; with `strict` any uri with a scheme counts."""
    if not strict:
        return path.startswith("http")
    try:
        return bool(hyperlink.parse(path, decoded=False).scheme)
    except hyperlink.URLParseError as e:
        raise InvalidURLError(f"cannot classify url `{path}`: {e}") from e


def resolve_absolute_url(path: str, base: str) -> str:
    # only a single leading "./" is dropped, "../" passes through
    if path.startswith("./"):
        path = path[2:]
    return f"{base}/{path}"

import pytest

from mdrelink.errors import InvalidURLError
from mdrelink.url_utils import already_url, resolve_absolute_url


@pytest.mark.parametrize(
    ["path", "expected"],
    [
        ("http://example.com/a.png", True),
        ("https://example.com/a.png", True),
        ("httpfoo", True),
        ("HTTP://example.com", False),
        ("./a.png", False),
        ("docs/guide.md", False),
        ("mailto:someone@example.com", False),
        ("#section", False),
        ("", False),
    ],
)
def test_already_url(path, expected):
    assert already_url(path) == expected


@pytest.mark.parametrize(
    ["path", "expected"],
    [
        ("https://example.com/a.png", True),
        ("mailto:someone@example.com", True),
        ("httpfoo", False),
        ("./a.png", False),
        ("../a.png", False),
    ],
)
def test_already_url__strict(path, expected):
    assert already_url(path, strict=True) == expected


def test_already_url__strict_unparsable():
    with pytest.raises(InvalidURLError):
        already_url("http://example.com:port/", strict=True)


@pytest.mark.parametrize(
    ["path", "expected"],
    [
        ("./guide.md", "https://base.test/guide.md"),
        ("guide.md", "https://base.test/guide.md"),
        ("docs/guide.md", "https://base.test/docs/guide.md"),
        ("../guide.md", "https://base.test/../guide.md"),
        ("././guide.md", "https://base.test/./guide.md"),
        ("/guide.md", "https://base.test//guide.md"),
        (".guide.md", "https://base.test/.guide.md"),
    ],
)
def test_resolve_absolute_url(path, expected):
    assert resolve_absolute_url(path, "https://base.test") == expected

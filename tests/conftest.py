import pytest

from mdrelink import ResolveOptions

CDN_BASE_URL = "https://cdn.example.com"
GITHUB_BASE_URL = "https://github.com/org/repo/blob/main"


@pytest.fixture
def options():
    return ResolveOptions(cdn_base_url=CDN_BASE_URL, github_base_url=GITHUB_BASE_URL)


@pytest.fixture
def strict_options():
    return ResolveOptions(
        cdn_base_url=CDN_BASE_URL, github_base_url=GITHUB_BASE_URL, strict_urls=True
    )

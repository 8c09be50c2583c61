from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidOptionsError


class ResolveOptions(BaseModel):
    """Base URLs used to absolutize relative links.

    Base URLs are expected without a trailing slash.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cdn_base_url: str = Field(alias="cdnBaseURL", description="prefix for <img src> inside raw html")
    github_base_url: str = Field(alias="githubBaseURL", description="prefix for markdown link targets")
    strict_urls: bool = Field(
        default=False,
        alias="strictURLs",
        description="classify absolute urls by uri scheme instead of the `http` prefix",
    )

    @classmethod
    def coerce(cls, value) -> "ResolveOptions":
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidOptionsError(f"expected ResolveOptions or mapping, got {type(value).__name__}")
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise InvalidOptionsError(f"invalid resolve options: {e}") from e

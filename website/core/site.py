"""Site configuration handed to ``spawn``."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, DirectoryPath, Field, field_validator


class SiteConfig(BaseModel):
    """
    Immutable configuration of a single site.

    ``root`` holds static assets and ``view`` holds the view templates. Both
    must be absolute paths to existing directories; there is no fallback.
    """

    domain: str = Field(..., min_length=1, max_length=253, description="Public hostname of the site")
    root: DirectoryPath = Field(..., description="Directory with static assets")
    view: DirectoryPath = Field(..., description="Directory with view templates")

    model_config = ConfigDict(frozen=True)

    @field_validator("domain")
    @classmethod
    def normalize_domain(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Domain cannot be empty")
        if any(char in v for char in ["/", ":", " ", "@"]):
            raise ValueError("Domain must be a bare hostname (no scheme, port or path)")
        return v

    @field_validator("root", "view", mode="before")
    @classmethod
    def require_absolute(cls, v):
        if not Path(v).is_absolute():
            raise ValueError(f"Path must be absolute: {v}")
        return v

    @property
    def hosts(self) -> list[str]:
        """Hostnames the site answers as."""
        if self.domain.startswith("www."):
            return [self.domain, self.domain[len("www."):]]
        return [self.domain, f"www.{self.domain}"]

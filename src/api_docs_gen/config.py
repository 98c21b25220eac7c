"""Run configuration.

Defaults reproduce the fixed paths and navigation of the reference site, so
every command works without a config file.
"""

from pathlib import Path

import pydantic
import yaml

from api_docs_gen.exceptions import ConfigError

DEFAULT_TAG_FILENAMES: list[tuple[str, str]] = [
    ("Server Health & Status", "server"),
    ("Agents Management", "agents"),
    ("Messaging System", "messaging"),
    ("Channels & Messages", "channels"),
    ("Memory Management", "memory"),
    ("Audio Processing", "audio"),
    ("Media Upload", "media"),
    ("System Configuration", "system"),
    ("Static Media Files", "static"),
]

# Hand-maintained; not derived from the categories a run produces.
DEFAULT_NAV_PAGES: list[str] = [
    "index",
    "server",
    "agents",
    "messaging",
    "channels",
    "memory",
    "audio",
    "media",
    "system",
    "static",
]


class DocsConfig(pydantic.BaseModel):
    """Paths and site constants for one generation or lint run."""

    model_config = pydantic.ConfigDict(extra="forbid")

    spec_path: Path = Path("api-specs/eliza-openapi.yaml")
    output_dir: Path = Path("content/docs/api-reference/endpoints")
    docs_dir: Path = Path("content/docs")
    report_path: Path = Path("double-header-report.md")
    doc_extension: str = ".mdx"
    base_url: str = "http://localhost:3000"
    api_key_placeholder: str = "your-api-key"
    tag_filenames: list[tuple[str, str]] = pydantic.Field(
        default_factory=lambda: list(DEFAULT_TAG_FILENAMES)
    )
    nav_pages: list[str] = pydantic.Field(default_factory=lambda: list(DEFAULT_NAV_PAGES))

    @pydantic.field_validator("tag_filenames", mode="before")
    @classmethod
    def parse_tag_filenames(cls, v):
        """Accept a plain YAML mapping as well as a list of pairs."""
        if isinstance(v, dict):
            return list(v.items())
        return v


def load_config(path: Path | None = None) -> DocsConfig:
    """Load a YAML config file over the defaults. ``None`` gives the defaults."""
    if path is None:
        return DocsConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return DocsConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    try:
        return DocsConfig(**data)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

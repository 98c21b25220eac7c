"""Endpoint grouper: assigns each endpoint to the page of its first tag."""

import re

from api_docs_gen.config import DocsConfig
from api_docs_gen.parser.base import ApiEndpoint, CategoryPage


def group_by_tag(endpoints: list[ApiEndpoint]) -> dict[str, list[ApiEndpoint]]:
    """Group endpoints by their first tag. Untagged endpoints are dropped."""
    groups: dict[str, list[ApiEndpoint]] = {}
    for ep in endpoints:
        if not ep.tags:
            continue
        groups.setdefault(ep.tags[0], []).append(ep)
    return groups


def filename_for_tag(tag: str, tag_filenames: list[tuple[str, str]]) -> str:
    """Look the tag up in the association list, else slugify it.

    Whitespace and path separators become hyphens so the slug is always a
    single file name inside the output directory.
    """
    for known_tag, filename in tag_filenames:
        if known_tag == tag:
            return filename
    return re.sub(r"[\s/\\]+", "-", tag.lower())


def build_pages(endpoints: list[ApiEndpoint], config: DocsConfig) -> list[CategoryPage]:
    """Build one CategoryPage per tag, in first-seen tag order."""
    return [
        CategoryPage(
            tag=tag,
            filename=filename_for_tag(tag, config.tag_filenames),
            endpoints=tag_endpoints,
        )
        for tag, tag_endpoints in group_by_tag(endpoints).items()
    ]

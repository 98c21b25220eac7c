"""Landing page, navigation manifest, and whole-site assembly."""

import json
import logging
from pathlib import Path

from api_docs_gen.config import DocsConfig
from api_docs_gen.generator.grouping import build_pages
from api_docs_gen.generator.page import PageRenderer
from api_docs_gen.parser.base import CategoryPage
from api_docs_gen.parser.openapi import parse_openapi

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.mdx"
MANIFEST_FILENAME = "meta.json"

# (title, description, slug) for the landing page cards.
CATEGORY_CARDS = [
    ("Server Health & Status", "Health checks, server status, and logs", "server"),
    ("Agents Management", "Create, manage, and control agents", "agents"),
    ("Messaging System", "Message submission and server management", "messaging"),
    ("Memory Management", "Agent memory operations and search", "memory"),
    ("Audio Processing", "Audio transcription and processing", "audio"),
    ("Media Upload", "File upload and media management", "media"),
]

INDEX_TEMPLATE = """---
title: API Endpoints
description: Complete reference for all ElizaOS REST API endpoints
---

import {{ Cards, Card }} from "fumadocs-ui/components/card";

The ElizaOS REST API provides comprehensive access to agent management, messaging, memory, and more.

## Base URL

```
{base_url}
```

## Authentication

All API requests require authentication using an API key:

```bash
curl -H "apikey: {api_key}" {base_url}/api/agents
```

## API Categories

<Cards>
{cards}
</Cards>

## Quick Reference

### Common Response Codes

| Status Code | Description |
|------------|-------------|
| 200 | Success |
| 201 | Created |
| 400 | Bad Request |
| 401 | Unauthorized |
| 404 | Not Found |
| 500 | Internal Server Error |

### Request Headers

| Header | Required | Description |
|--------|----------|-------------|
| apikey | Yes | Your API authentication key |
| Content-Type | Yes* | Required for POST/PUT requests (application/json) |

## Environment Variables

Configure your API client with these environment variables:

```bash
# API Base URL
ELIZA_API_URL={base_url}

# API Key
ELIZA_API_KEY={api_key}-here
```

## Rate Limiting

The API implements rate limiting to ensure fair usage:
- 100 requests per minute per API key
- 1000 requests per hour per API key

## Need Help?

- Check the [TypeScript SDK](/docs/api-reference/sdk) for client examples
- View the [Postman Collection](https://github.com/elizaos/eliza/blob/main/eliza.postman.json)
- Join our [Discord](https://discord.gg/elizaos) for support
"""


def render_index(config: DocsConfig | None = None) -> str:
    """Render the static landing page. Independent of the spec's content."""
    config = config or DocsConfig()
    cards = "\n".join(
        "  <Card\n"
        f'    title="{title}"\n'
        f'    description="{description}"\n'
        f'    href="/docs/api-reference/endpoints/{slug}"\n'
        "  />"
        for title, description, slug in CATEGORY_CARDS
    )
    return INDEX_TEMPLATE.format(
        base_url=config.base_url,
        api_key=config.api_key_placeholder,
        cards=cards,
    )


def render_manifest(config: DocsConfig | None = None) -> str:
    """Render meta.json from the configured navigation list."""
    config = config or DocsConfig()
    return json.dumps({"pages": list(config.nav_pages)}, indent=2)


def missing_from_navigation(pages: list[CategoryPage], config: DocsConfig) -> list[str]:
    """Filenames of pages that are written but not listed in the manifest."""
    listed = set(config.nav_pages)
    return [page.filename for page in pages if page.filename not in listed]


def generate_site(spec_path: Path, config: DocsConfig | None = None) -> dict[str, str]:
    """Generate the full endpoint reference in memory.

    Returns dict of {filename: content}, in write order. Raises SpecParseError
    before anything is rendered when the spec is unreadable.
    """
    config = config or DocsConfig()
    endpoints = parse_openapi(spec_path)
    pages = build_pages(endpoints, config)
    logger.info(f"Loaded {len(endpoints)} endpoints in {len(pages)} categories from {spec_path}")

    renderer = PageRenderer(config)
    files: dict[str, str] = {INDEX_FILENAME: render_index(config)}
    for page in pages:
        files[f"{page.filename}.mdx"] = renderer.render(page)

    # Such pages stay on disk; the manifest is hand-maintained and not patched.
    for filename in missing_from_navigation(pages, config):
        logger.warning(f"Page '{filename}' is not listed in navigation and will not appear in the sidebar")

    files[MANIFEST_FILENAME] = render_manifest(config)
    return files


def write_site(files: dict[str, str], output_dir: Path) -> list[Path]:
    """Write generated files, replacing any previous output. Returns written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, content in files.items():
        file_path = output_dir / filename
        file_path.write_text(content, encoding="utf-8")
        written.append(file_path)
    return written

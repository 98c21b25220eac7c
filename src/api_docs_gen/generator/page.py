"""Page renderer: turns one CategoryPage into an MDX reference document.

Rendering is a pure function of the page and the config: the same input
always produces byte-identical text.
"""

import json
import re

from api_docs_gen.config import DocsConfig
from api_docs_gen.parser.base import ApiEndpoint, CategoryPage, Param

# Snippets use a fixed placeholder body regardless of the endpoint's schema.
PLACEHOLDER_BODY = '{"example": "data"}'

CODE_INDENT = "    "


def format_example(raw: str) -> str:
    """Pretty-print a request body example, or return it unescaped if it is not JSON.

    Never raises: a malformed example falls back to its raw text.
    """
    pretty = pretty_json(raw)
    return pretty if pretty is not None else _unescape(raw)


def pretty_json(raw: str) -> str | None:
    """Return the example as 2-space indented JSON, or None if it does not parse.

    Examples are often stored JSON-encoded inside YAML, so escaped newlines
    and quotes are normalized and one enclosing quote pair is dropped first.
    """
    candidate = re.sub(r'\A"|"\Z', "", _unescape(raw))
    try:
        parsed = json.loads(candidate)
    except ValueError:
        return None
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def _unescape(raw: str) -> str:
    return raw.replace("\\n", "\n").replace('\\"', '"')


class PageRenderer:
    """Renders category pages with signature, parameters, body, response and examples."""

    def __init__(self, config: DocsConfig | None = None):
        self.config = config or DocsConfig()

    def render(self, page: CategoryPage) -> str:
        parts = [self._render_frontmatter(page.tag)]
        for endpoint in page.endpoints:
            parts.append(self._render_endpoint(endpoint))
        return "".join(parts)

    # -- page frame -----------------------------------------------------------

    def _render_frontmatter(self, tag: str) -> str:
        return (
            "---\n"
            f"title: {tag}\n"
            f"description: {tag} endpoints reference\n"
            "---\n"
            "\n"
            'import { Tabs, Tab } from "fumadocs-ui/components/tabs";\n'
            'import { Callout } from "fumadocs-ui/components/callout";\n'
            "\n"
        )

    def _render_endpoint(self, endpoint: ApiEndpoint) -> str:
        heading = endpoint.summary or f"{endpoint.method} {endpoint.path}"
        parts = [f"## {heading}\n\n"]
        if endpoint.description:
            parts.append(f"{endpoint.description}\n\n")

        parts.append(self._render_signature(endpoint))
        if endpoint.parameters:
            parts.append(self._render_parameters(endpoint.parameters))
        if endpoint.request_body_examples:
            parts.append(self._render_request_body(endpoint.request_body_examples))
        parts.append(self._render_response(endpoint.responses))
        parts.append(self._render_examples(endpoint))
        parts.append("---\n\n")
        return "".join(parts)

    # -- endpoint blocks ------------------------------------------------------

    def _render_signature(self, endpoint: ApiEndpoint) -> str:
        return f"### Endpoint\n\n```\n{endpoint.method} {endpoint.path}\n```\n\n"

    def _render_parameters(self, params: list[Param]) -> str:
        lines = [
            "### Parameters",
            "",
            "| Name | Type | In | Required | Description |",
            "|------|------|-----|----------|-------------|",
        ]
        for p in params:
            required = "Yes" if p.required else "No"
            description = p.description or p.example or "-"
            lines.append(f"| {p.name} | {p.param_type} | {p.location} | {required} | {description} |")
        return "\n".join(lines) + "\n\n"

    def _render_request_body(self, examples: dict[str, str]) -> str:
        parts = ["### Request Body\n\n"]
        for content_type, raw in examples.items():
            pretty = pretty_json(raw)
            body = _indent(pretty) if pretty is not None else CODE_INDENT + _unescape(raw)
            parts.append(
                '<Tabs items={["Example", "Schema"]}>\n'
                '  <Tab value="Example">\n'
                "    ```json\n"
                f"{body}\n"
                "    ```\n"
                "  </Tab>\n"
                '  <Tab value="Schema">\n'
                f"    Content-Type: `{content_type}`\n"
                "  </Tab>\n"
                "</Tabs>\n\n"
            )
        return "".join(parts)

    def _render_response(self, responses: dict[str, dict]) -> str:
        parts = ["### Response\n\n"]
        ok = responses.get("200")
        if ok is not None:
            parts.append("**Status Code:** 200 OK\n\n")
            if ok.get("description"):
                parts.append(f"{ok['description']}\n\n")
        return "".join(parts)

    def _render_examples(self, endpoint: ApiEndpoint) -> str:
        return (
            '### Example\n\n<Tabs items={["cURL", "TypeScript", "Python"]}>\n'
            + self._render_curl(endpoint)
            + self._render_typescript(endpoint)
            + self._render_python(endpoint)
            + "</Tabs>\n\n"
        )

    # -- usage snippets -------------------------------------------------------

    def _render_curl(self, endpoint: ApiEndpoint) -> str:
        lines = [
            '  <Tab value="cURL">',
            "    ```bash",
            f"    curl -X {endpoint.method} \\",
            f'      -H "apikey: {self.config.api_key_placeholder}" \\',
        ]
        if endpoint.has_request_body:
            lines.append('      -H "Content-Type: application/json" \\')
            lines.append(f"      -d '{PLACEHOLDER_BODY}' \\")
        lines.extend([
            f"      {self.config.base_url}{endpoint.path}",
            "    ```",
            "  </Tab>",
        ])
        return "\n".join(lines) + "\n"

    def _render_typescript(self, endpoint: ApiEndpoint) -> str:
        lines = [
            '  <Tab value="TypeScript">',
            "    ```typescript",
            f"    const response = await fetch('{self.config.base_url}{endpoint.path}', {{",
            f"      method: '{endpoint.method}',",
            "      headers: {",
            f"        'apikey': '{self.config.api_key_placeholder}',",
        ]
        if endpoint.has_request_body:
            lines.append("        'Content-Type': 'application/json',")
        lines.append("      },")
        if endpoint.has_request_body:
            lines.append("      body: JSON.stringify({ example: 'data' }),")
        lines.extend([
            "    });",
            "    const data = await response.json();",
            "    ```",
            "  </Tab>",
        ])
        return "\n".join(lines) + "\n"

    def _render_python(self, endpoint: ApiEndpoint) -> str:
        lines = [
            '  <Tab value="Python">',
            "    ```python",
            "    import requests",
            "",
            f"    response = requests.{endpoint.method.lower()}(",
            f"        '{self.config.base_url}{endpoint.path}',",
            f"        headers={{'apikey': '{self.config.api_key_placeholder}'}},",
        ]
        if endpoint.has_request_body:
            lines.append("        json={'example': 'data'}")
        lines.extend([
            "    )",
            "    data = response.json()",
            "    ```",
            "  </Tab>",
        ])
        return "\n".join(lines) + "\n"


def render_page(page: CategoryPage, config: DocsConfig | None = None) -> str:
    """Render one category page to MDX text."""
    return PageRenderer(config).render(page)


def _indent(text: str) -> str:
    return "\n".join(CODE_INDENT + line for line in text.split("\n"))

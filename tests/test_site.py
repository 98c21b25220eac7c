import json
import logging
from pathlib import Path

import pytest

from api_docs_gen.config import DocsConfig
from api_docs_gen.exceptions import SpecParseError
from api_docs_gen.generator.grouping import build_pages
from api_docs_gen.generator.index import (
    generate_site,
    missing_from_navigation,
    render_index,
    render_manifest,
    write_site,
)
from api_docs_gen.parser.openapi import parse_openapi

FIXTURES = Path(__file__).parent / "fixtures"


class TestRenderIndex:
    def test_static_landing_page(self):
        text = render_index()
        assert text.startswith("---\ntitle: API Endpoints\n")
        assert 'href="/docs/api-reference/endpoints/audio"' in text
        assert "## Rate Limiting" in text
        assert "ELIZA_API_URL=http://localhost:3000" in text

    def test_uses_configured_base_url(self):
        text = render_index(DocsConfig(base_url="https://api.example.com"))
        assert "```\nhttps://api.example.com\n```" in text


class TestRenderManifest:
    def test_default_manifest(self):
        data = json.loads(render_manifest())
        assert data["pages"][0] == "index"
        assert "static" in data["pages"]

    def test_two_space_indent(self):
        text = render_manifest(DocsConfig(nav_pages=["index", "audio"]))
        assert text == '{\n  "pages": [\n    "index",\n    "audio"\n  ]\n}'


class TestNavigationGap:
    def test_unmapped_category_not_in_navigation(self):
        config = DocsConfig()
        pages = build_pages(parse_openapi(FIXTURES / "eliza.yaml"), config)
        assert missing_from_navigation(pages, config) == ["plugin-registry"]


class TestGenerateSite:
    def test_files_in_write_order(self):
        files = generate_site(FIXTURES / "eliza.yaml")
        assert list(files) == [
            "index.mdx",
            "server.mdx",
            "agents.mdx",
            "audio.mdx",
            "plugin-registry.mdx",
            "meta.json",
        ]

    def test_unlisted_page_is_still_generated_and_warned(self, caplog):
        with caplog.at_level(logging.WARNING):
            files = generate_site(FIXTURES / "eliza.yaml")
        assert "plugin-registry.mdx" in files
        assert "plugin-registry" not in json.loads(files["meta.json"])["pages"]
        assert "plugin-registry" in caplog.text

    def test_multi_tag_endpoint_rendered_once(self):
        files = generate_site(FIXTURES / "eliza.yaml")
        rendered = "".join(files.values())
        assert rendered.count("## Create agent") == 1
        assert "## Create agent" in files["agents.mdx"]

    def test_untagged_endpoint_not_rendered(self):
        files = generate_site(FIXTURES / "eliza.yaml")
        assert not any("/api/internal/debug" in content for content in files.values())

    def test_parse_error_raises(self, tmp_path):
        spec = tmp_path / "bad.yaml"
        spec.write_text("paths: [unclosed\n")
        with pytest.raises(SpecParseError):
            generate_site(spec)


class TestWriteSite:
    def test_regeneration_is_byte_identical(self, tmp_path):
        out = tmp_path / "endpoints"
        write_site(generate_site(FIXTURES / "eliza.yaml"), out)
        first = {p.name: p.read_bytes() for p in out.iterdir()}
        write_site(generate_site(FIXTURES / "eliza.yaml"), out)
        second = {p.name: p.read_bytes() for p in out.iterdir()}
        assert first == second

    def test_replaces_prior_output(self, tmp_path):
        out = tmp_path / "endpoints"
        out.mkdir()
        (out / "audio.mdx").write_text("stale")
        write_site(generate_site(FIXTURES / "eliza.yaml"), out)
        assert (out / "audio.mdx").read_text().startswith("---\ntitle: Audio Processing\n")

    def test_tag_with_slash_stays_in_output_dir(self, tmp_path):
        spec = tmp_path / "spec.yaml"
        spec.write_text("paths:\n  /admin/users:\n    get:\n      tags: [Users/Admin]\n")
        out = tmp_path / "endpoints"
        write_site(generate_site(spec), out)
        assert (out / "users-admin.mdx").exists()

from pathlib import Path

from api_docs_gen.lint.scanner import check_file, check_text, find_doc_files, render_report, scan_directory

DUPLICATE_DOC = """---
title: "Audio API"
description: Audio endpoints
---

import { Callout } from "fumadocs-ui/components/callout";
## Audio API

Body text.
"""


class TestCheckText:
    def test_identical_heading_reported(self):
        issue = check_text(DUPLICATE_DOC, Path("audio.mdx"))
        assert issue is not None
        assert issue.declared_title == "Audio API"
        assert issue.duplicate_heading_text == "Audio API"
        assert issue.heading_line_number == 7
        assert issue.line_content == "## Audio API"

    def test_unrelated_heading_not_reported(self):
        text = '---\ntitle: "Overview"\n---\n\n## Getting Started\n'
        assert check_text(text, Path("overview.mdx")) is None

    def test_no_frontmatter_skipped(self):
        assert check_text("## Audio API\n", Path("a.mdx")) is None

    def test_no_title_skipped(self):
        assert check_text("---\ndescription: x\n---\n## x\n", Path("a.mdx")) is None

    def test_heading_outside_window_ignored(self):
        text = "---\ntitle: Audio\n---\n" + "text\n" * 10 + "## Audio\n"
        assert check_text(text, Path("a.mdx")) is None

    def test_heading_at_window_edge_reported(self):
        text = "---\ntitle: Audio\n---\n" + "text\n" * 9 + "## Audio\n"
        issue = check_text(text, Path("a.mdx"))
        assert issue.heading_line_number == 13

    def test_first_match_only(self):
        text = "---\ntitle: Audio\n---\n## Intro\n## Audio\n## Audio Processing\n"
        issue = check_text(text, Path("a.mdx"))
        assert issue.duplicate_heading_text == "Audio"
        assert issue.heading_line_number == 5

    def test_indented_heading_matched(self):
        issue = check_text("---\ntitle: Audio\n---\n  ## Audio\n", Path("a.mdx"))
        assert issue.line_content == "  ## Audio"


class TestScanDirectory:
    def test_recursive_scan(self, tmp_path):
        (tmp_path / "api").mkdir()
        (tmp_path / "api" / "audio.mdx").write_text(DUPLICATE_DOC)
        (tmp_path / "overview.mdx").write_text('---\ntitle: "Overview"\n---\n\n## Getting Started\n')
        (tmp_path / "notes.md").write_text(DUPLICATE_DOC)

        assert find_doc_files(tmp_path) == sorted([tmp_path / "api" / "audio.mdx", tmp_path / "overview.mdx"])
        issues = scan_directory(tmp_path)
        assert [i.file_path for i in issues] == [tmp_path / "api" / "audio.mdx"]

    def test_other_extension(self, tmp_path):
        (tmp_path / "notes.md").write_text(DUPLICATE_DOC)
        assert len(scan_directory(tmp_path, ".md")) == 1

    def test_unreadable_file_skipped(self, tmp_path):
        bad = tmp_path / "bad.mdx"
        bad.write_bytes(b"---\ntitle: \xff\xfe\n---\n")
        assert check_file(bad) is None


class TestRenderReport:
    def test_lists_paths_relative_to_base(self, tmp_path):
        doc = tmp_path / "content" / "audio.mdx"
        doc.parent.mkdir()
        doc.write_text(DUPLICATE_DOC)
        report = render_report(scan_directory(tmp_path), base=tmp_path)
        assert "- `content/audio.mdx`\n" in report
        assert "Found 1 files with double header issues." in report

    def test_empty_report(self):
        assert "No double header issues found." in render_report([])

"""Duplicate-heading scanner.

Flags documents whose first level-2 heading after the frontmatter repeats
the frontmatter title. Read-only.
"""

import logging
from pathlib import Path

from pydantic import BaseModel

from .frontmatter import is_duplicate_heading, read_frontmatter_lines

logger = logging.getLogger(__name__)

SCAN_WINDOW = 10


class HeadingIssue(BaseModel):
    """A level-2 heading that duplicates the page title."""

    file_path: Path
    declared_title: str
    duplicate_heading_text: str
    heading_line_number: int  # 1-based
    line_content: str


def find_doc_files(root: Path, extension: str = ".mdx") -> list[Path]:
    """Recursively list documentation files under root, sorted."""
    return sorted(p for p in root.rglob(f"*{extension}") if p.is_file())


def check_text(text: str, file_path: Path) -> HeadingIssue | None:
    """Return the first duplicate heading in the document text, if any."""
    lines = text.split("\n")
    frontmatter = read_frontmatter_lines(lines)
    if frontmatter is None:
        return None
    title, end = frontmatter

    search_limit = min(end + SCAN_WINDOW + 1, len(lines))
    for i in range(end + 1, search_limit):
        line = lines[i].strip()
        if not line.startswith("## "):
            continue
        heading = line[3:].strip()
        if is_duplicate_heading(title, heading):
            return HeadingIssue(
                file_path=file_path,
                declared_title=title,
                duplicate_heading_text=heading,
                heading_line_number=i + 1,
                line_content=lines[i],
            )
    return None


def check_file(file_path: Path) -> HeadingIssue | None:
    """Check one file. Unreadable files are logged and skipped."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read {file_path}, skipping: {e}")
        return None
    return check_text(text, file_path)


def scan_directory(root: Path, extension: str = ".mdx") -> list[HeadingIssue]:
    """Scan every documentation file under root; at most one issue per file."""
    issues = []
    for file_path in find_doc_files(root, extension):
        issue = check_file(file_path)
        if issue:
            issues.append(issue)
    return issues


def display_path(file_path: Path, base: Path | None) -> str:
    """Path relative to base when inside it, else as given."""
    if base is not None:
        try:
            return file_path.resolve().relative_to(base.resolve()).as_posix()
        except ValueError:
            pass
    return str(file_path)


def render_report(issues: list[HeadingIssue], base: Path | None = None) -> str:
    """Render issues as a Markdown report.

    Each file is listed as ``- `path```, which is the line format the fixer
    reads back.
    """
    lines = ["# Double Header Report", ""]
    if not issues:
        lines.append("No double header issues found.")
        return "\n".join(lines) + "\n"

    lines.append(f"Found {len(issues)} files with double header issues.")
    lines.append("")
    for issue in issues:
        lines.append(f"- `{display_path(issue.file_path, base)}`")
        lines.append(f'  Frontmatter title: "{issue.declared_title}"')
        lines.append(f'  H2 title (line {issue.heading_line_number}): "{issue.duplicate_heading_text}"')
    return "\n".join(lines) + "\n"

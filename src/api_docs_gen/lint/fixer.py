"""Duplicate-heading fixer.

Rewrites files listed in a scanner report, removing the heading that
repeats the frontmatter title plus an adjacent blank line and a line that
repeats the frontmatter description. New content is computed in memory and
swapped in with an atomic replace.
"""

import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from .frontmatter import is_duplicate_heading, split_frontmatter

logger = logging.getLogger(__name__)

FIX_WINDOW = 15

_REPORT_PATH_RE = re.compile(r"- `([^`]+)`")


@dataclass
class FixSummary:
    fixed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def extract_report_paths(report: str) -> list[str]:
    """Pull file paths out of ``- `path``` list items."""
    return _REPORT_PATH_RE.findall(report)


def fix_content(text: str) -> str | None:
    """Return the text with the duplicate heading removed, or None if nothing to fix."""
    frontmatter = split_frontmatter(text)
    if frontmatter is None:
        return None

    lines = text[frontmatter.end:].split("\n")
    for i in range(min(FIX_WINDOW, len(lines))):
        line = lines[i]
        if not line.startswith("## ") or not is_duplicate_heading(frontmatter.title, line[3:]):
            continue

        del lines[i]
        if i < len(lines) and not lines[i].strip():
            del lines[i]
        if frontmatter.description and i < len(lines) and frontmatter.description in lines[i]:
            del lines[i]
            if i < len(lines) and lines[i] in ("", "\r"):
                del lines[i]
        return text[:frontmatter.end] + "\n".join(lines)
    return None


def atomic_write(file_path: Path, content: str) -> None:
    """Write content to a temp file beside the target, then replace the target."""
    fd, tmp_name = tempfile.mkstemp(dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if file_path.exists():
            shutil.copymode(file_path, tmp_name)
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def fix_file(file_path: Path) -> bool:
    """Fix one file in place. Returns False when it had nothing to fix."""
    with file_path.open(encoding="utf-8", newline="") as f:
        text = f.read()
    new_text = fix_content(text)
    if new_text is None:
        return False
    atomic_write(file_path, new_text)
    return True


def fix_files(paths: list[Path]) -> FixSummary:
    """Fix every listed file. Per-file failures are logged and counted as skipped."""
    summary = FixSummary()
    for file_path in paths:
        try:
            fixed = fix_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error processing {file_path}: {e}")
            summary.skipped.append(file_path)
            continue

        if fixed:
            logger.info(f"Fixed {file_path}")
            summary.fixed.append(file_path)
        else:
            logger.warning(f"No frontmatter title or duplicate heading found in {file_path}")
            summary.skipped.append(file_path)
    return summary

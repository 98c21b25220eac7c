"""Frontmatter extraction and the duplicate-heading matching policy."""

import re
from dataclasses import dataclass

_FRONTMATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---\r?\n", re.DOTALL)
_TITLE_RE = re.compile(r"title:\s*(.+)")
_DESCRIPTION_RE = re.compile(r"description:\s*(.+)")
_QUOTES_RE = re.compile(r"""\A["']|["']\Z""")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True)
class Frontmatter:
    title: str
    description: str
    end: int  # character offset just past the closing delimiter line


def strip_quotes(value: str) -> str:
    """Drop one leading and one trailing quote character."""
    return _QUOTES_RE.sub("", value.strip())


def normalize(text: str) -> str:
    return _NON_ALNUM_RE.sub("", text.lower())


def is_duplicate_heading(title: str, heading: str) -> bool:
    """Whether a heading repeats the page title.

    Both sides are lower-cased and stripped to alphanumerics, then compared
    for equality or containment either way. Short generic titles can match
    longer headings ("API" vs "API Reference"); that is accepted.
    """
    a = normalize(title)
    b = normalize(heading)
    return a == b or a in b or b in a


def read_frontmatter_lines(lines: list[str]) -> tuple[str, int] | None:
    """Find the title and closing-delimiter index in a file split into lines.

    The first line must be exactly ``---``. Returns None when there is no
    closed frontmatter block or no non-empty title.
    """
    if not lines or lines[0] != "---":
        return None

    title = ""
    for i in range(1, len(lines)):
        line = lines[i]
        if line == "---":
            return (title, i) if title else None
        if line.startswith("title:"):
            title = strip_quotes(line[len("title:"):])
    return None


def split_frontmatter(text: str) -> Frontmatter | None:
    """Parse a ``---`` delimited block at the very start of the text.

    Returns None when there is no block or it has no title.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return None

    body = match.group(1)
    title_match = _TITLE_RE.search(body)
    if not title_match:
        return None
    desc_match = _DESCRIPTION_RE.search(body)

    return Frontmatter(
        title=strip_quotes(title_match.group(1)),
        description=strip_quotes(desc_match.group(1)) if desc_match else "",
        end=match.end(),
    )

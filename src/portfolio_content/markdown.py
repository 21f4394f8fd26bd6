"""Markdown to HTML renderer for portfolio content bodies.

The renderer covers the Markdown subset the content files are written in. It
is an ordered sequence of text stages, each taking the output of the previous
one::

    escape → headings → emphasis → code → images/links → blockquotes
           → rules → lists → tables → paragraphs

Known limitations:

- ordered and unordered lists both render as ``<ul>``
- lists do not nest
- every ``> quote`` line is its own ``<blockquote>``
- headings and emphasis run before code, so ``#`` lines and ``*``/``_``
  inside fenced code are still interpreted
- emphasis leaves link targets and whole images alone, but ``*``/``_`` in a
  link label are still interpreted
- table rows must start and end with ``|``

Output is not meant to be fed back through the renderer.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable
from functools import partial, reduce

Stage = Callable[[str], str]

_HEADINGS = tuple(
    (level, re.compile(rf"^{'#' * level} (.*)$", re.MULTILINE)) for level in range(6, 0, -1)
)

# Image markup and link targets are matched first and passed through untouched.
_LINK_TARGET = r"(!\[[^\]]*\]\([^)]+\)|\]\([^)]+\))"

_EMPHASIS = tuple(
    (re.compile(rf"{_LINK_TARGET}|{pattern}"), open_tag, close_tag)
    for pattern, open_tag, close_tag in (
        (r"\*\*\*(.+?)\*\*\*", "<strong><em>", "</em></strong>"),
        (r"\*\*(.+?)\*\*", "<strong>", "</strong>"),
        (r"\*(.+?)\*", "<em>", "</em>"),
        (r"(?<!\w)__(.+?)__(?!\w)", "<strong>", "</strong>"),
        (r"(?<!\w)_(.+?)_(?!\w)", "<em>", "</em>"),
    )
)
_STAR_BULLET = re.compile(r"^([ \t]*\* )(.*)$")
_RULE = re.compile(r"^(?:---|\*\*\*|___)$", re.MULTILINE)

_FENCED_CODE = re.compile(r"```(?:([\w+-]+)?\n)?([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`]+)`")

_IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_BLOCKQUOTE = re.compile(r"^&gt; (.*)$", re.MULTILINE)

_LIST_ITEM = re.compile(r"^[ \t]*(?:[-*+]|\d+\.) (.*)$", re.MULTILINE)
_LIST_RUN = re.compile(r"(?:^<li>.*</li>(?:\n|\Z))+", re.MULTILINE)

_TABLE_ROW = re.compile(r"^[ \t]*\|(.+)\|[ \t]*$")
_TABLE_SEPARATOR = re.compile(r"^[ \t]*\|[ \t]*:?-+:?[ \t]*(?:\|[ \t]*:?-+:?[ \t]*)*\|[ \t]*$")

_BLOCK_TAG = re.compile(
    r"^<(?:h[1-6]|p|ul|/ul|li|pre|blockquote|hr|table|img|div)\b", re.IGNORECASE
)


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _attribute(value: str) -> str:
    return value.replace('"', "&quot;")


def _headings(text: str) -> str:
    for level, pattern in _HEADINGS:
        text = pattern.sub(rf"<h{level}>\1</h{level}>", text)
    return text


def _wrap_emphasis(open_tag: str, close_tag: str, match: re.Match[str]) -> str:
    return match.group(1) or f"{open_tag}{match.group(2)}{close_tag}"


def _emphasize(line: str) -> str:
    for pattern, open_tag, close_tag in _EMPHASIS:
        line = pattern.sub(partial(_wrap_emphasis, open_tag, close_tag), line)
    return line


def _emphasis(text: str) -> str:
    lines = []
    for line in text.split("\n"):
        if _RULE.fullmatch(line):
            lines.append(line)
            continue
        bullet = _STAR_BULLET.match(line)
        if bullet:
            lines.append(bullet.group(1) + _emphasize(bullet.group(2)))
        else:
            lines.append(_emphasize(line))
    return "\n".join(lines)


def _fenced_block(match: re.Match[str]) -> str:
    language, body = match.group(1), match.group(2)
    # Keep the block on one line so the line-based stages leave it alone.
    body = body.replace("\n", "&#10;")
    if language:
        return f'<pre><code class="language-{language}">{body}</code></pre>'
    return f"<pre><code>{body}</code></pre>"


def _code(text: str) -> str:
    text = _FENCED_CODE.sub(_fenced_block, text)
    return _INLINE_CODE.sub(r"<code>\1</code>", text)


def _image(match: re.Match[str]) -> str:
    alt, src = match.group(1), _attribute(match.group(2))
    return f'<img src="{src}" alt="{_attribute(alt)}" loading="lazy">'


def _link(match: re.Match[str]) -> str:
    label, href = match.group(1), _attribute(match.group(2))
    return f'<a href="{href}" target="_blank" rel="noopener">{label}</a>'


def _links(text: str) -> str:
    # Images first, the link pattern would otherwise eat their [alt](src).
    return _LINK.sub(_link, _IMAGE.sub(_image, text))


def _blockquotes(text: str) -> str:
    return _BLOCKQUOTE.sub(r"<blockquote>\1</blockquote>", text)


def _rules(text: str) -> str:
    return _RULE.sub("<hr>", text)


def _wrap_list(match: re.Match[str]) -> str:
    run = match.group(0)
    if run.endswith("\n"):
        return f"<ul>\n{run}</ul>\n"
    return f"<ul>\n{run}\n</ul>"


def _lists(text: str) -> str:
    text = _LIST_ITEM.sub(r"<li>\1</li>", text)
    return _LIST_RUN.sub(_wrap_list, text)


def _cells(line: str, tag: str) -> str:
    row = _TABLE_ROW.match(line)
    cells = [cell.strip() for cell in row.group(1).split("|")] if row else []
    return "<tr>" + "".join(f"<{tag}>{cell}</{tag}>" for cell in cells if cell) + "</tr>"


def _table(rows: list[str]) -> str:
    if len(rows) >= 2 and _TABLE_SEPARATOR.match(rows[1]):
        head = _cells(rows[0], "th")
        body = "".join(_cells(row, "td") for row in rows[2:])
        return f"<table><thead>{head}</thead><tbody>{body}</tbody></table>"
    return "<table>" + "".join(_cells(row, "td") for row in rows) + "</table>"


def _tables(text: str) -> str:
    out: list[str] = []
    rows: list[str] = []
    for line in text.split("\n"):
        if _TABLE_ROW.match(line):
            rows.append(line)
            continue
        if rows:
            out.append(_table(rows))
            rows = []
        out.append(line)
    if rows:
        out.append(_table(rows))
    return "\n".join(out)


def _paragraphs(text: str) -> str:
    out: list[str] = []
    pending: list[str] = []

    def flush() -> None:
        paragraph = "\n".join(pending).strip()
        if paragraph:
            out.append(f"<p>{paragraph}</p>")
        pending.clear()

    for line in text.split("\n"):
        if not line.strip():
            flush()
        elif _BLOCK_TAG.match(line.lstrip()):
            flush()
            out.append(line)
        else:
            pending.append(line)
    flush()
    return "\n".join(out)


STAGES: tuple[Stage, ...] = (
    _escape,
    _headings,
    _emphasis,
    _code,
    _links,
    _blockquotes,
    _rules,
    _lists,
    _tables,
    _paragraphs,
)


def render_markdown(markdown: str) -> str:
    """Render a markdown body to an HTML string.

    Input ``<``, ``>`` and ``&`` are always escaped, so the only tags in the
    output are the ones the renderer inserts.
    """
    if not markdown:
        return ""
    text = markdown.replace("\r\n", "\n")
    return reduce(lambda acc, stage: stage(acc), STAGES, text)

"""YAML-like frontmatter parser for portfolio content files.

Only a small YAML subset is understood, which is all the content files use:

- ``key: value`` scalars with type inference (see :func:`parse_value`)
- inline arrays ``key: [a, b, c]``
- block arrays, one ``- item`` per line
- literal (``|``) and folded (``>``) block scalars

Anything else degrades to plain strings. The parser never raises.
"""

from __future__ import annotations

import json
import re
import textwrap
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n(.*))?\Z",
    re.DOTALL,
)
_KEY_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*):\s*(.*)$")
_INT_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(r"-?[0-9]+\.[0-9]+")

_TRUE_LITERALS = frozenset({"true", "True", "TRUE"})
_FALSE_LITERALS = frozenset({"false", "False", "FALSE"})
_NULL_LITERALS = frozenset({"null", "~", "Null", "NULL"})

_LITERAL = "|"
_FOLDED = ">"


@dataclass(frozen=True)
class FrontmatterResult:
    """Parsed frontmatter metadata and markdown body content."""

    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""


class _Mode(Enum):
    READING_KEY = "reading_key"
    IN_ARRAY = "in_array"
    IN_MULTILINE = "in_multiline"


@dataclass(frozen=True)
class _State:
    """Parser state. ``key`` is the pending key, ``lines`` its accumulated raw lines."""

    mode: _Mode = _Mode.READING_KEY
    key: str | None = None
    lines: tuple[str, ...] = ()
    style: str | None = None


_Emission = list[tuple[str, Any]]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"not a JSON value: {name}")


def parse_value(value: str) -> Any:
    """Infer the type of a scalar frontmatter value.

    Rules are tried in order and the first match wins: empty → ``None``,
    bracket array, quoted string, integer, float, boolean, null literal,
    comma-separated list, plain string.
    """
    value = value.strip()

    if not value:
        return None

    if value.startswith("[") and value.endswith("]"):
        try:
            return json.loads(value.replace("'", '"'), parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            items = (parse_value(item) for item in value[1:-1].split(","))
            return [item for item in items if item is not None]

    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        return value[1:-1]

    if _INT_PATTERN.fullmatch(value):
        # int() refuses digit strings past sys.get_int_max_str_digits().
        try:
            return int(value)
        except ValueError:
            return value

    if _FLOAT_PATTERN.fullmatch(value):
        return float(value)

    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False

    if value in _NULL_LITERALS:
        return None

    if "," in value and ":" not in value:
        return [part.strip() for part in value.split(",") if part.strip()]

    return value


def _is_list_item(line: str | None) -> bool:
    return line is not None and line.strip().startswith("- ")


def _join_block(state: _State) -> str:
    if state.style == _FOLDED:
        return " ".join(state.lines).strip()
    return textwrap.dedent("\n".join(state.lines)).strip("\n")


def _flush(state: _State) -> _Emission:
    """Emit the pending key's value according to the current mode."""
    if state.key is None:
        return []
    if state.mode is _Mode.IN_ARRAY:
        return [(state.key, list(state.lines))]
    if state.mode is _Mode.IN_MULTILINE:
        return [(state.key, _join_block(state))]
    return [(state.key, parse_value("\n".join(state.lines).strip()))]


def _start_key(line: str, next_line: str | None) -> tuple[_State, _Emission]:
    """Begin a new key from *line*, or return to an idle state if it is not one."""
    match = _KEY_PATTERN.match(line)
    if match is None:
        return _State(), []

    key, rest = match.group(1), match.group(2).strip()

    if rest.startswith("[") and rest.endswith("]"):
        return _State(), [(key, parse_value(rest))]
    if rest in (_LITERAL, _FOLDED):
        return _State(mode=_Mode.IN_MULTILINE, key=key, style=rest), []
    if not rest:
        if _is_list_item(next_line):
            return _State(mode=_Mode.IN_ARRAY, key=key), []
        return _State(key=key), []
    return _State(key=key, lines=(rest,)), []


def _step(state: _State, line: str, next_line: str | None) -> tuple[_State, _Emission]:
    """Advance the parser by one line."""
    if state.mode is _Mode.IN_ARRAY:
        stripped = line.strip()
        if stripped.startswith("- "):
            return replace(state, lines=(*state.lines, stripped[2:].strip())), []
        if not stripped:
            return state, []
        new_state, emitted = _start_key(line, next_line)
        return new_state, _flush(state) + emitted

    if state.mode is _Mode.IN_MULTILINE:
        if not line.strip() or line.startswith(("  ", "\t")):
            kept = line if state.style == _LITERAL else line.strip()
            return replace(state, lines=(*state.lines, kept)), []
        new_state, emitted = _start_key(line, next_line)
        return new_state, _flush(state) + emitted

    if _KEY_PATTERN.match(line):
        new_state, emitted = _start_key(line, next_line)
        return new_state, _flush(state) + emitted

    # Continuation of a pending scalar; stray lines with no key are dropped.
    if state.key is None:
        return state, []
    return replace(state, lines=(*state.lines, line)), []


def _parse_block(block: str) -> dict[str, Any]:
    metadata: dict[str, Any] = {}
    lines = re.split(r"\r?\n", block)
    state = _State()

    for i, line in enumerate(lines):
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        state, emitted = _step(state, line, next_line)
        metadata.update(emitted)

    metadata.update(_flush(state))
    return metadata


def parse_frontmatter(text: str) -> FrontmatterResult:
    """Split *text* into frontmatter metadata and body.

    The document must open with a ``---`` line and close the block with
    another ``---`` line. Without that the whole input is returned unchanged
    as the body with empty metadata. The body is stripped of leading and
    trailing whitespace.
    """
    match = _FRONTMATTER_PATTERN.match(text)
    if match is None:
        return FrontmatterResult(metadata={}, content=text)

    block, body = match.group(1) or "", match.group(2) or ""
    return FrontmatterResult(metadata=_parse_block(block), content=body.strip())


def load_frontmatter(path: Path) -> FrontmatterResult:
    """Read a UTF-8 markdown file and parse its frontmatter.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    return parse_frontmatter(Path(path).read_text(encoding="utf-8"))

"""
  glisp Reader

Turns source text into glisp values without evaluating anything:

    - (a b c)     -> List, unevaluated call syntax
    - [a b c]     -> List (list a b c), a literal-list call
    - {k v ...}   -> List (dict k v ...), a literal-dict call
    - "text"/'t'  -> String
    - 12, -3      -> Int (`,` thousands separators are stripped)
    - 1.5, 2e3    -> Float
    - :name       -> Keyword
    - anything    -> Symbol (true/false/Nothing are symbols bound at the root)

Every reader function takes the input and a read offset and returns the
value read together with the next read offset.
"""

from __future__ import annotations

import math
import re
from typing import Iterator

from glisp.errors import GlispParseError
from glisp.types.base import Value
from glisp.types.sequence import List
from glisp.types.symbol import Symbol
from glisp.types.value import Float, Int, Keyword, String

WHITESPACE_RE = re.compile(r"(?:\s+|;[^\n]*)+")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"|\'(?:\\.|[^\\\'])*\'', re.DOTALL)
FLOAT_RE = re.compile(r"-?[\d,]+(?:\.\d*(?:[eE][-+]?\d+)?|[eE][-+]?\d+)")
INT_RE = re.compile(r"-?[\d,]+")
SYMBOL_RE = re.compile(r"[^0-9\s()\[\]{}\"';][^\s()\[\]{}\"';]*")
KEYWORD_RE = re.compile(r":[^0-9\s()\[\]{}\"';:][^\s()\[\]{}\"';]*")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

DELIMITERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = frozenset(DELIMITERS.values())
LIST_MARKER = Symbol("list")
DICT_MARKER = Symbol("dict")

NAMED_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


def skip_whitespace(text: str, offset: int) -> int:
    """Skip whitespace and `;` line comments."""
    match = WHITESPACE_RE.match(text, offset)
    return match.end() if match else offset


def _at_token_end(text: str, offset: int) -> bool:
    if offset >= len(text):
        return True
    ch = text[offset]
    return ch.isspace() or ch in DELIMITERS or ch in CLOSERS or ch == ";"


def parse_any(text: str, offset: int) -> tuple[Value, int]:
    """Read any value, dispatching on the lookahead character."""
    offset = skip_whitespace(text, offset)
    if offset >= len(text):
        raise GlispParseError("Unexpected end of input", offset)

    ch = text[offset]
    if ch in DELIMITERS:
        return parse_list(text, offset)
    if ch in CLOSERS:
        raise GlispParseError(f"Unexpected '{ch}'", offset)
    if ch in "\"'":
        return parse_string(text, offset)
    if ch.isdigit() or (ch == "-" and offset + 1 < len(text) and text[offset + 1].isdigit()):
        return parse_number(text, offset)
    if ch == ":":
        return parse_keyword(text, offset)
    return parse_symbol(text, offset)


def _read_children(text: str, offset: int) -> tuple[list[Value], int]:
    """Read values up to the delimiter closing the one at `offset`."""
    end = DELIMITERS[text[offset]]
    items: list[Value] = []
    pos = offset + 1
    while True:
        pos = skip_whitespace(text, pos)
        if pos >= len(text):
            raise GlispParseError(f"Unterminated list, expected '{end}'", offset)
        if text[pos] == end:
            return items, pos + 1
        item, pos = parse_any(text, pos)
        items.append(item)


def parse_list(text: str, offset: int) -> tuple[Value, int]:
    """Read `(...)`, `[...]` or `{...}`.

    Bracket forms get a leading `list` symbol so that evaluating them builds
    a literal list instead of calling a function.
    """
    start = text[offset]
    if start == "{":
        return parse_dict(text, offset)
    items, pos = _read_children(text, offset)
    if start == "[":
        items.insert(0, LIST_MARKER)
    return List(items), pos


def parse_dict(text: str, offset: int) -> tuple[Value, int]:
    """Read `{k1 v1 k2 v2 ...}` as the call `(dict k1 v1 k2 v2 ...)`."""
    items, pos = _read_children(text, offset)
    if len(items) % 2 != 0:
        raise GlispParseError("Dict literal needs an even number of entries", offset)
    return List([DICT_MARKER, *items]), pos


def _unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: NAMED_ESCAPES.get(m.group(1), m.group(1)), body)


def parse_string(text: str, offset: int) -> tuple[Value, int]:
    match = STRING_RE.match(text, offset)
    if not match:
        raise GlispParseError("Unterminated string", offset)
    literal = match.group(0)
    return String(_unescape(literal[1:-1])), match.end()


def parse_number(text: str, offset: int) -> tuple[Value, int]:
    """Read a float if the literal has a decimal point or exponent, else an int."""
    match = FLOAT_RE.match(text, offset)
    convert = float
    if match is None:
        match = INT_RE.match(text, offset)
        convert = int
    if match is None or not _at_token_end(text, match.end()):
        raise GlispParseError(f"Invalid number format {text[offset:offset + 20]!r}", offset)
    digits = match.group(0).replace(",", "")
    try:
        number = convert(digits)
    except ValueError:
        raise GlispParseError(f"Invalid number format {match.group(0)!r}", offset) from None
    if convert is float:
        # an overflowing literal would render as `inf` and read back as a symbol
        if math.isinf(number):
            raise GlispParseError(f"Invalid number format {match.group(0)!r}", offset)
        return Float(number), match.end()
    return Int(number), match.end()


def parse_keyword(text: str, offset: int) -> tuple[Value, int]:
    match = KEYWORD_RE.match(text, offset)
    if not match:
        raise GlispParseError("Failed to parse keyword", offset)
    return Keyword(match.group(0)), match.end()


def parse_symbol(text: str, offset: int) -> tuple[Value, int]:
    match = SYMBOL_RE.match(text, offset)
    if not match:
        raise GlispParseError(f"Failed to parse symbol at {text[offset:offset + 20]!r}", offset)
    return Symbol(match.group(0)), match.end()


def parse(text: str) -> Value:
    """Read exactly one expression from `text`.

    Any fault inside the reader is reported as a GlispParseError.
    """
    try:
        value, pos = parse_any(text, 0)
        pos = skip_whitespace(text, pos)
        if pos < len(text):
            raise GlispParseError("Unexpected input after expression", pos)
        return value
    except GlispParseError:
        raise
    except Exception as exc:
        raise GlispParseError(f"Failed to parse string: {exc}") from exc


def parse_all(text: str) -> Iterator[Value]:
    """Yield every top-level expression in `text`."""
    pos = skip_whitespace(text, 0)
    while pos < len(text):
        try:
            value, pos = parse_any(text, pos)
        except GlispParseError:
            raise
        except Exception as exc:
            raise GlispParseError(f"Failed to parse string: {exc}", pos) from exc
        yield value
        pos = skip_whitespace(text, pos)

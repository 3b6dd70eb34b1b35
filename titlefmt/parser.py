"""Parser turning a title-format string into a list of expressions.

The grammar follows the usual title-formatting rules: ``%field%`` references,
``$func(arg,...)`` calls, ``[...]`` conditional sections, ``//`` comments and
literal text, where ``'...'`` escapes special characters and ``''`` yields a
single quote.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .types import Conditional, Expr, FuncCall, Literal, ParseError, Variable

# Characters that end a run of plain literal text.
_PLAIN_TEXT = re.compile(r"[^%$,\[\]<>'()/\r\n]+")

# Single characters that count as literal text in each context, on top of the
# literals allowed everywhere.
_FUNCTION_EXTRA = "(]"
_CONDITIONAL_EXTRA = ")(,"
_STANDARD_EXTRA = "()],"


class _NoMatch(Exception):
    """The current alternative does not apply; another one may be tried."""


class _Fatal(Exception):
    """The input cannot be parsed at all."""


def _skip_comment(text: str) -> str:
    """Drop a ``//`` comment (through the end of its line) from the front of text."""
    if not text.startswith("//"):
        return text
    end = text.find("\n", 2)
    return "" if end < 0 else text[end + 1:]


def _base_literal(text: str) -> Tuple[str, str]:
    """Parse one piece of literal text valid in every context."""
    text = _skip_comment(text)
    if not text:
        raise _NoMatch
    if text.startswith("''"):
        piece, rest = "'", text[2:]
    else:
        plain = _PLAIN_TEXT.match(text)
        if plain:
            piece, rest = plain.group(), text[plain.end():]
        elif text.startswith("'"):
            close = text.find("'", 1)
            if close < 0:
                raise _NoMatch
            piece, rest = text[1:close], text[close + 1:]
        elif text.startswith("\n"):
            piece, rest = "", text[1:]
        elif text.startswith("\r\n"):
            piece, rest = "", text[2:]
        elif text[0] in "<>/":
            piece, rest = text[0], text[1:]
        else:
            raise _NoMatch
    return _skip_comment(rest), piece


def _literal_piece(text: str, extra: str) -> Tuple[str, str]:
    if text and text[0] in extra:
        return text[1:], text[0]
    return _base_literal(text)


def _literal_run(text: str, extra: str) -> Tuple[str, Expr]:
    """Join as many literal pieces as possible into one literal."""
    pieces: List[str] = []
    while True:
        try:
            rest, piece = _literal_piece(text, extra)
        except _NoMatch:
            break
        if len(rest) == len(text):
            raise _NoMatch
        pieces.append(piece)
        text = rest
    if not pieces:
        raise _NoMatch
    return text, Literal("".join(pieces))


def _variable(text: str) -> Tuple[str, Expr]:
    if not text.startswith("%"):
        raise _NoMatch
    end = text.find("%", 1)
    if end < 0:
        raise _NoMatch
    return text[end + 1:], Variable(text[1:end])


def _find_argument_end(text: str) -> int:
    """Index of the ``,`` or ``)`` that ends the current function argument."""
    depth = 1
    for index, ch in enumerate(text):
        if ch == "$":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return index
        elif ch == "," and depth == 1:
            return index
    raise _Fatal


def _split_arguments(text: str) -> Tuple[str, List[str]]:
    """Split the raw argument texts following an opening parenthesis."""
    raw_args: List[str] = []
    while True:
        end = _find_argument_end(text)
        raw_args.append(text[:end])
        text = text[end:]
        if not text.startswith(","):
            break
        text = text[1:]
    if not text.startswith(")"):
        raise _NoMatch
    return text[1:], raw_args


def _function(text: str) -> Tuple[str, Expr]:
    if not text.startswith("$"):
        raise _NoMatch
    open_paren = text.find("(", 1)
    if open_paren < 0:
        raise _NoMatch
    name = text[1:open_paren]
    rest, raw_args = _split_arguments(text[open_paren + 1:])
    args = [_all_consuming(raw, _FUNCTION_EXTRA) for raw in raw_args]
    return rest.lstrip("\n"), FuncCall(name, args)


def _find_conditional_end(text: str) -> int:
    """Index of the ``]`` that closes the current conditional section."""
    depth = 1
    for index, ch in enumerate(text):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return index
    raise _Fatal


def _conditional(text: str) -> Tuple[str, Expr]:
    if not text.startswith("["):
        raise _NoMatch
    inner = text[1:]
    end = _find_conditional_end(inner)
    rest = inner[end + 1:]
    body = _all_consuming(inner[:end], _CONDITIONAL_EXTRA)
    # A conditional is only accepted when nothing follows it in its context.
    if rest:
        raise _NoMatch
    return rest, Conditional(body)


def _element(text: str, extra: str) -> Tuple[str, Expr]:
    for alternative in (_conditional, _function, _variable):
        try:
            return alternative(text)
        except _NoMatch:
            pass
    return _literal_run(text, extra)


def _many(text: str, extra: str) -> Tuple[str, List[Expr]]:
    """Parse elements until none applies; return what is left and the elements."""
    items: List[Expr] = []
    while True:
        try:
            rest, item = _element(text, extra)
        except _NoMatch:
            return text, items
        if len(rest) == len(text):
            raise _NoMatch
        items.append(item)
        text = rest


def _all_consuming(text: str, extra: str) -> List[Expr]:
    rest, items = _many(text, extra)
    if rest:
        raise _NoMatch
    return items


def parse(text: str) -> List[Expr]:
    """Parse a title-format string into a list of expressions.

    Parsing stops quietly at the first part of the input that matches
    nothing; unterminated function calls or conditionals raise ParseError.
    """
    try:
        _, items = _many(text, _STANDARD_EXTRA)
    except (_Fatal, _NoMatch, RecursionError):
        raise ParseError() from None
    return items
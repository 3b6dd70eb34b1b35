"""Compiled title-format programs that can be run against track metadata."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from .environment import Environment
from .parser import parse as parse_format
from .types import (
    Conditional,
    Expr,
    FuncCall,
    Literal,
    ResolvedValue,
    Value,
    Variable,
)

_EMPTY_FALSE = Value("", False)


class Program:
    """A parsed title-format string ready to be evaluated."""

    def __init__(self) -> None:
        self._instructions: List[Expr] = []

    def parse(self, text: str) -> None:
        """Parse ``text``, replacing any previously parsed program.

        Raises ParseError if the text cannot be parsed.
        """
        self._instructions = parse_format(text)

    def run(self) -> str:
        """Run the program without any metadata."""
        return self.run_with_meta({})

    def run_with_meta(self, metadata: Optional[Mapping[str, Sequence[str]]]) -> str:
        """Run the program against ``metadata``, a mapping of tag names to values."""
        env = Environment(metadata or {})
        return self._resolve(env, self._instructions).text

    def _resolve(self, env: Environment, exprs: Sequence[Expr]) -> Value:
        """Evaluate a sequence of expressions into one concatenated value.

        The result is true if any of its parts is true.
        """
        parts = [self._eval(env, expr) for expr in exprs]
        return Value(
            "".join(part.text for part in parts),
            any(part.cond for part in parts),
        )

    def _eval(self, env: Environment, expr: Expr) -> Value:
        if isinstance(expr, ResolvedValue):
            return expr.value
        if isinstance(expr, Literal):
            # Literals always count as true for conditionals.
            return Value(expr.text, True)
        if isinstance(expr, Variable):
            return env.get_variable(expr.name)
        if isinstance(expr, Conditional):
            resolved = self._resolve(env, expr.body)
            return Value(resolved.text, True) if resolved.cond else _EMPTY_FALSE
        if isinstance(expr, FuncCall):
            args = [self._resolve(env, arg) for arg in expr.args]
            return env.call(expr.name, args)
        raise TypeError(f"unknown expression: {expr!r}")
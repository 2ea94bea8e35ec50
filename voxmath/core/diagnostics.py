"""
Fail-fast assertion facility for development-time misuse detection.

Checks are elided when Python runs with -O, so nothing that must hold in
production may depend on them.
"""

import ast
import inspect
import logging

import jax.numpy as jnp

from .primitives import ArrayLike

logger = logging.getLogger(__name__)

_UNREACHABLE_EXPRESSIONS = frozenset({"False", "0"})


class AssertionFailure(AssertionError):
    """Raised by `check` when its condition is false."""

    def __init__(self, expression: str, file: str, line: int, message: str = ""):
        self.expression = expression
        self.file = file
        self.line = line
        self.message = message
        self.report = self._format_report()
        super().__init__(self.report)
        logger.error(self.report)

    def _format_report(self) -> str:
        prefix = f"{self.message}: " if self.message else ""
        if self.expression in _UNREACHABLE_EXPRESSIONS:
            body = "Unreachable code assertion"
        else:
            body = f"Assertion '{self.expression}'"
        return f"{prefix}{body} failed in file '{self.file}' line {self.line}"


def _caller_expression(frame_info: inspect.FrameInfo) -> str:
    """
    Source text of the condition passed to `check` at the caller.

    Falls back to the whole source line when the call spans several lines
    or cannot be found on it.
    """
    if not frame_info.code_context:
        return "<unknown>"
    line = frame_info.code_context[0].strip()
    try:
        tree = ast.parse(line)
    except SyntaxError:
        return line

    for node in ast.walk(tree):
        if not isinstance(node, ast.Call) or not node.args:
            continue
        func = node.func
        name = func.id if isinstance(func, ast.Name) else getattr(func, "attr", None)
        if name == "check":
            return ast.get_source_segment(line, node.args[0]) or line
    return line


def check(
    condition,
    message: str = "",
    expression: str | None = None,
    stacklevel: int = 1,
) -> None:
    """
    Raise `AssertionFailure` if `condition` is false.

    Parameters
    ----------
    condition : bool-like
        Condition to verify. Must be concrete, not a traced value.
    message : str
        Human-readable description of what went wrong.
    expression : str, optional
        Source text of the condition. Defaults to the condition's text in the
        caller's `check(...)` call, or the whole line if the call spans lines.
    stacklevel : int
        Which caller frame to report, 1 being the direct caller of `check`.

    Raises
    ------
    AssertionFailure
        If `condition` is false. The report is logged before raising.
    """
    if not __debug__:
        return
    if condition:
        return
    caller = inspect.stack(context=1)[stacklevel]
    if expression is None:
        expression = _caller_expression(caller)
    raise AssertionFailure(expression, caller.filename, caller.lineno, message)


def assert_finite(v: ArrayLike, name: str = "vector") -> None:
    """Check that every component of `v` is finite (no NaN or Inf)."""
    if not __debug__:
        return
    finite = bool(jnp.all(jnp.isfinite(jnp.asarray(v))))
    check(
        finite,
        f"{name} must have finite components",
        expression=f"isfinite({name})",
        stacklevel=2,
    )

"""Dynamic evaluator: runs a Python snippet and captures what it prints.

The snippet runs as a ``__main__`` module body in a fresh global namespace.
A top-level ``return`` (one not nested in a function, class or lambda)
supplies the completion value: such statements are rewritten to raise a
private exception carrying the value, which ends the program early.

Output is captured by injecting a ``print`` bound to an OutputSink owned by
the caller; nothing process-wide (``sys.stdout``, ``builtins.print``) is
patched, so concurrent evaluations each see only their own output.

Not a sandbox: the snippet runs in-process with full builtins.
"""

from __future__ import annotations

import ast
import builtins
import logging
from typing import Any, Optional

from . import constants

logger = logging.getLogger(__name__)


class _SnippetReturn(BaseException):
    """Carries a top-level return value out of the executing snippet."""

    def __init__(self, value: Any = None):
        super().__init__(value)
        self.value = value


class OutputSink:
    """Ordered buffer of captured output, one entry per ``print`` call."""

    def __init__(self):
        self.lines: list[str] = []

    def print(self, *args: Any, sep: Optional[str] = " ", end: Optional[str] = "\n",
              file: Any = None, flush: bool = False) -> None:
        if file is not None:
            builtins.print(*args, sep=sep, end=end, file=file, flush=flush)
            return
        joiner = " " if sep is None else sep
        self.lines.append(joiner.join(str(arg) for arg in args))


class _TopLevelReturnRewriter(ast.NodeTransformer):
    """Turns module-level ``return X`` into ``raise __snippet_return__(X)``."""

    def visit_FunctionDef(self, node: ast.FunctionDef) -> ast.AST:
        return node

    visit_AsyncFunctionDef = visit_FunctionDef
    visit_ClassDef = visit_FunctionDef
    visit_Lambda = visit_FunctionDef

    def visit_Return(self, node: ast.Return) -> ast.AST:
        value = node.value if node.value is not None else ast.Constant(value=None)
        call = ast.Call(
            func=ast.Name(id=constants.SNIPPET_RETURN_NAME, ctx=ast.Load()),
            args=[value],
            keywords=[],
        )
        return ast.copy_location(ast.Raise(exc=call, cause=None), node)


def _compile_snippet(code: str):
    """Compile *code* as a module, with top-level returns rewritten."""
    module = ast.parse(code, filename=constants.SNIPPET_FILENAME)
    module = _TopLevelReturnRewriter().visit(module)
    ast.fix_missing_locations(module)
    return compile(module, constants.SNIPPET_FILENAME, "exec", dont_inherit=True)


def _run_snippet(code: str, sink: OutputSink) -> Any:
    namespace: dict[str, Any] = {
        "__name__": constants.SNIPPET_MODULE_NAME,
        "__builtins__": builtins,
        "print": sink.print,
        constants.SNIPPET_RETURN_NAME: _SnippetReturn,
    }
    try:
        exec(_compile_snippet(code), namespace)
    except _SnippetReturn as returned:
        return returned.value
    return None


def evaluate(code: str, sink: Optional[OutputSink] = None) -> str:
    """Execute *code* and return its captured output.

    Args:
        code: Python source, run as a top-level program.
        sink: Output buffer to capture into; a fresh one is used when omitted.

    Returns:
        The captured ``print`` lines joined by newlines, followed by
        ``Return value: <value>`` when the snippet returns something other
        than ``None``.  Any failure yields the single line
        ``Error: <message>`` instead.
    """
    sink = sink if sink is not None else OutputSink()
    try:
        result = _run_snippet(code, sink)
    except (Exception, SystemExit) as exc:
        logger.info("Snippet evaluation failed: %s: %s", type(exc).__name__, exc)
        return f"{constants.ERROR_PREFIX}{exc}"

    lines = list(sink.lines)
    if result is not None:
        lines.append(f"{constants.RETURN_VALUE_PREFIX}{result}")
    logger.debug("Snippet produced %d output line(s)", len(lines))
    return "\n".join(lines)

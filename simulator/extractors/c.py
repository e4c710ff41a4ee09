"""C: ``printf`` format-string literals."""

from __future__ import annotations

from ._base import LiteralPrintExtractor, PrintCallSyntax

_NEWLINE_ESCAPE = "\\n"


class CExtractor(LiteralPrintExtractor):
    LANGUAGE = "c"
    # Format arguments may follow the literal.
    SYNTAX = PrintCallSyntax(r"printf", sole_argument=False)
    PLACEHOLDER = (
        "// C code execution is simulated\n"
        "// Only simple printf statements are supported in this demo"
    )

    def _transform_literal(self, literal: str) -> str:
        # Only the first escape per literal is converted.
        return literal.replace(_NEWLINE_ESCAPE, "\n", 1)

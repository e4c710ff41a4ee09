"""Java: ``System.out.println`` literals (non-GUI snippets)."""

from __future__ import annotations

from ._base import LiteralPrintExtractor, PrintCallSyntax


class JavaExtractor(LiteralPrintExtractor):
    LANGUAGE = "java"
    SYNTAX = PrintCallSyntax(r"System\.out\.println")
    PLACEHOLDER = (
        "// Java code execution is simulated\n"
        "// Only simple System.out.println statements are supported in this demo"
    )

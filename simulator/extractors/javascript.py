"""JavaScript: ``console.log`` literals."""

from __future__ import annotations

from ._base import LiteralPrintExtractor, PrintCallSyntax


class JavaScriptExtractor(LiteralPrintExtractor):
    LANGUAGE = "javascript"
    SYNTAX = PrintCallSyntax(r"console\.log")
    PLACEHOLDER = (
        "// JavaScript code execution is simulated\n"
        "// Only simple console.log statements are supported in this demo"
    )

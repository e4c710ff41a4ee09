"""Tests for the literal-print extractors."""

from __future__ import annotations

import pytest

from simulator.extractors import (
    EXTRACTOR_LANGUAGES,
    PrintCallSyntax,
    get_extractor,
)
from simulator.extractors.c import CExtractor
from simulator.extractors.java import JavaExtractor
from simulator.extractors.javascript import JavaScriptExtractor


class TestRegistry:
    def test_known_languages(self):
        assert set(EXTRACTOR_LANGUAGES) == {"javascript", "java", "c"}

    @pytest.mark.parametrize(
        "language,cls",
        [("javascript", JavaScriptExtractor), ("java", JavaExtractor), ("c", CExtractor)],
    )
    def test_returns_matching_class(self, language, cls):
        assert isinstance(get_extractor(language), cls)

    def test_unknown_language_raises(self):
        with pytest.raises(ValueError, match="cobol"):
            get_extractor("cobol")

    def test_python_is_not_extracted(self):
        with pytest.raises(ValueError):
            get_extractor("python")


class TestPrintCallSyntax:
    def test_sole_argument_requires_closing_paren(self):
        pattern = PrintCallSyntax(r"say").compile()
        assert pattern.search('say("hi")') is not None
        assert pattern.search('say("hi", x)') is None

    def test_trailing_arguments_allowed(self):
        pattern = PrintCallSyntax(r"say", sole_argument=False).compile()
        assert pattern.search('say("hi", x)').group(1) == "hi"


class TestJavaScriptExtractor:
    def test_single_log(self):
        assert get_extractor("javascript").extract('console.log("Hello");') == "Hello"

    def test_multiple_logs_in_source_order(self):
        code = "console.log('first');\nlet x = 1;\nconsole.log(\"second\");"
        assert get_extractor("javascript").extract(code) == "first\nsecond"

    def test_whitespace_inside_call(self):
        assert get_extractor("javascript").extract('console.log (  "spaced"  )') == "spaced"

    def test_non_literal_argument_ignored(self):
        code = 'console.log(x);\nconsole.log("kept");'
        assert get_extractor("javascript").extract(code) == "kept"

    def test_placeholder_when_nothing_matches(self):
        extractor = get_extractor("javascript")
        assert extractor.extract("let x = 1;") == JavaScriptExtractor.PLACEHOLDER
        assert JavaScriptExtractor.PLACEHOLDER.startswith("// JavaScript code execution is simulated\n")

    def test_placeholder_is_idempotent(self):
        extractor = get_extractor("javascript")
        assert extractor.extract("x") == extractor.extract("x")


class TestJavaExtractor:
    def test_println_literal(self):
        code = """\
public class Main {
    public static void main(String[] args) {
        System.out.println("Hello, World!");
        System.out.println("Bye");
    }
}
"""
        assert get_extractor("java").extract(code) == "Hello, World!\nBye"

    def test_stops_at_first_closing_quote(self):
        # Non-greedy: each call yields its own literal.
        code = 'System.out.println("a"); System.out.println("b");'
        assert get_extractor("java").find_literals(code) == ["a", "b"]

    def test_concatenation_is_not_a_literal(self):
        code = 'System.out.println("a" + b);'
        assert get_extractor("java").extract(code) == JavaExtractor.PLACEHOLDER

    def test_placeholder_text(self):
        assert get_extractor("java").extract("int x = 1;") == (
            "// Java code execution is simulated\n"
            "// Only simple System.out.println statements are supported in this demo"
        )


class TestCExtractor:
    def test_newline_escape_converted(self):
        code = '#include <stdio.h>\nint main() { printf("Hello\\n"); return 0; }'
        assert get_extractor("c").extract(code) == "Hello\n"

    def test_only_first_newline_escape_converted(self):
        code = 'printf("a\\nb\\nc");'
        assert get_extractor("c").extract(code) == "a\nb\\nc"

    def test_format_arguments_allowed(self):
        code = 'printf("x = %d", x);'
        assert get_extractor("c").extract(code) == "x = %d"

    def test_multiple_calls_joined_by_newline(self):
        code = 'printf("one"); printf("two");'
        assert get_extractor("c").extract(code) == "one\ntwo"

    def test_placeholder_text(self):
        assert get_extractor("c").extract("int main() { return 0; }") == (
            "// C code execution is simulated\n"
            "// Only simple printf statements are supported in this demo"
        )

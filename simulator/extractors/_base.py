"""Literal-print extraction shared by every non-evaluated language."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrintCallSyntax:
    """Describes how a language spells a print call.

    ``call_pattern`` is a regex fragment matching the callee
    (e.g. ``System\\.out\\.println``).  When ``sole_argument`` is set the
    string literal must be followed by the closing parenthesis.
    """

    call_pattern: str
    sole_argument: bool = True

    def compile(self) -> re.Pattern[str]:
        tail = r"\s*\)" if self.sole_argument else ""
        return re.compile(rf"{self.call_pattern}\s*\(\s*[\"'](.+?)[\"']{tail}")


class LiteralPrintExtractor:
    """Collects the literal arguments of print calls in source order.

    Subclasses set ``LANGUAGE``, ``SYNTAX`` and ``PLACEHOLDER``; the
    ``_transform_literal`` hook post-processes each captured literal.
    """

    LANGUAGE: str = ""
    SYNTAX: PrintCallSyntax
    PLACEHOLDER: str = ""

    def __init__(self):
        self._pattern = self.SYNTAX.compile()

    def find_literals(self, code: str) -> list[str]:
        return [
            self._transform_literal(match.group(1))
            for match in self._pattern.finditer(code)
        ]

    def extract(self, code: str) -> str:
        """Return the simulated output of *code*, or the placeholder."""
        literals = self.find_literals(code)
        logger.debug(
            "%s extractor found %d print literal(s)", self.LANGUAGE, len(literals)
        )
        if not literals:
            return self.PLACEHOLDER
        return "\n".join(literals)

    def _transform_literal(self, literal: str) -> str:
        return literal

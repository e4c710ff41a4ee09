"""Literal-print extractors for the languages that are simulated, not run."""

from __future__ import annotations

import importlib

from ._base import LiteralPrintExtractor, PrintCallSyntax

# Lazy imports to avoid loading every extractor at startup
_EXTRACTOR_CLASSES: dict[str, str] = {
    "javascript": "javascript.JavaScriptExtractor",
    "java": "java.JavaExtractor",
    "c": "c.CExtractor",
}


def get_extractor(language: str) -> LiteralPrintExtractor:
    """Instantiate the literal-print extractor for *language*.

    Raises ``ValueError`` if *language* has no registered extractor.
    """
    spec = _EXTRACTOR_CLASSES.get(language)
    if spec is None:
        raise ValueError(f"No literal-print extractor for language: {language}")
    module_name, class_name = spec.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls()


EXTRACTOR_LANGUAGES: tuple[str, ...] = tuple(_EXTRACTOR_CLASSES.keys())

__all__ = [
    "LiteralPrintExtractor",
    "PrintCallSyntax",
    "get_extractor",
    "EXTRACTOR_LANGUAGES",
]

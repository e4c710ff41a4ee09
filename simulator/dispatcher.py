"""Routes a (code, language) pair to the right strategy.

Python is the one language that is actually executed, because the host
interpreter can run it in-process.  JavaScript is only simulated, from the
literal arguments of its ``console.log`` calls, so a call with a computed
argument such as ``console.log(1 + 2)`` produces the placeholder comment
rather than ``3``.  The web playground this engine replaces had these two
roles the other way round: it evaluated JavaScript and scanned Python
``print`` calls.
"""

from __future__ import annotations

import logging

from . import constants, evaluator, gui_builder
from .extractors import get_extractor
from .sim_types import ExecutionResult

logger = logging.getLogger(__name__)


def uses_gui_library(code: str) -> bool:
    """True when a Java snippet references the AWT or Swing namespaces."""
    return any(marker in code for marker in constants.GUI_IMPORT_MARKERS)


def _run_java(code: str) -> ExecutionResult:
    if uses_gui_library(code):
        logger.debug("Java snippet references a GUI library; building preview")
        built = gui_builder.build(code)
        return ExecutionResult(output=built.trace, preview=built.model)
    return ExecutionResult(output=get_extractor(constants.LANG_JAVA).extract(code))


def run(code: str, language: str) -> ExecutionResult:
    """Simulate running *code* written in *language*.

    Args:
        code: Snippet source text (non-empty; validated by the caller).
        language: Language tag, one of ``constants.SUPPORTED_LANGUAGES``.

    Returns:
        An ExecutionResult.  ``preview`` is only set for Java GUI snippets;
        unknown tags yield the fixed "Unsupported language" output.
    """
    logger.debug("Dispatching %d-char snippet (language=%s)", len(code), language)
    if language == constants.LANG_PYTHON:
        return ExecutionResult(output=evaluator.evaluate(code))
    if language == constants.LANG_JAVA:
        return _run_java(code)
    if language in (constants.LANG_JAVASCRIPT, constants.LANG_C):
        return ExecutionResult(output=get_extractor(language).extract(code))
    logger.info("Unsupported language: %s", language)
    return ExecutionResult(output=constants.UNSUPPORTED_LANGUAGE_OUTPUT)

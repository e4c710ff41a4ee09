"""Named constants shared across the simulator."""

from __future__ import annotations

LANG_PYTHON = "python"
LANG_JAVASCRIPT = "javascript"
LANG_JAVA = "java"
LANG_C = "c"

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    LANG_PYTHON,
    LANG_JAVASCRIPT,
    LANG_JAVA,
    LANG_C,
)

UNSUPPORTED_LANGUAGE_OUTPUT = "Unsupported language"

# Substrings that switch a Java snippet over to the GUI model builder
GUI_IMPORT_MARKERS: tuple[str, ...] = ("java.awt", "javax.swing")

# Preview window defaults
DEFAULT_WINDOW_TITLE = "Java AWT Window"
DEFAULT_WINDOW_WIDTH = 400
DEFAULT_WINDOW_HEIGHT = 300
DEFAULT_TEXTFIELD_SIZE = 10

GUI_TRACE_HEADER = "// Java AWT/Swing execution is simulated"

RETURN_VALUE_PREFIX = "Return value: "
ERROR_PREFIX = "Error: "
SNIPPET_FILENAME = "<snippet>"
SNIPPET_MODULE_NAME = "__main__"
SNIPPET_RETURN_NAME = "__snippet_return__"

# Boundary error messages
MISSING_INPUT_ERROR = "Code and language are required"
EXECUTE_FAILURE_PREFIX = "Failed to execute code: "
NO_IMAGE_ERROR = "No image provided"
INVALID_IMAGE_ERROR = "Invalid image format"
SCAN_FAILURE_PREFIX = "Failed to process image: "

PROVIDER_CLAUDE = "claude"
PROVIDER_OPENAI = "openai"

SCAN_MODELS_ENV = "SNIPPET_SIM_SCAN_MODELS"

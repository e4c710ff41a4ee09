"""Image-to-code scanner: turns a screenshot or sketch into source code.

Models are tried in the configured preference order.  If every attempt
fails the scanner still answers, with a placeholder snippet and a warning,
so the caller always has code to put in the editor.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import ModelCandidate, ScanConfig
from .llm_client import LLMClient, get_llm_client
from .sim_types import ImagePayload, ScanResult

logger = logging.getLogger(__name__)


class InvalidImageError(ValueError):
    """Raised when an image data URL carries no base64 payload."""

    pass


SCAN_PROMPT = """\
Analyze this image and generate the appropriate code.
If it's a screenshot of code, extract and format it correctly.
If it's a diagram or sketch of a UI, generate the corresponding code.
If it's a flowchart or algorithm, convert it to pseudocode or actual code.

Respond ONLY with the generated code, no explanations or additional text.
"""

FALLBACK_WARNING = (
    "AI models could not process your image. "
    "A placeholder code has been provided instead."
)

FALLBACK_CODE = '''\
# Generated code from image
# Note: The AI model couldn't process your image properly.
# Here's a placeholder code sample instead:


def analyze_image(data):
    # Image analysis logic would go here
    return {"width": "unknown", "height": "unknown", "format": "unknown"}


def process_image(image_data):
    print("Processing image data...")
    analysis = analyze_image(image_data)
    return {
        "type": "unknown",
        "content": "Could not determine content",
        "analysis": analysis,
        "suggestions": [
            "Try uploading a clearer image",
            "Make sure the image contains visible code or diagrams",
            "Try cropping the image to focus on the code",
        ],
    }

# Call the function with your image
# process_image(your_image_data)
'''


def decode_data_url(data_url: str) -> ImagePayload:
    """Split a ``data:image/...;base64,...`` URL into media type and payload.

    Raises:
        InvalidImageError: If there is nothing after the first comma.
    """
    _, _, data = data_url.partition(",")
    if not data:
        raise InvalidImageError("Image data URL has no base64 payload")
    media_type = "image/png" if data_url.startswith("data:image/png") else "image/jpeg"
    return ImagePayload(media_type=media_type, data=data)


def _strip_markdown_fences(text: str) -> str:
    """Remove markdown code fences from LLM response text."""
    text = text.strip()
    if text.startswith("```"):
        first_newline = text.find("\n")
        text = text[first_newline + 1 :] if first_newline != -1 else text[3:]
    if text.endswith("```"):
        text = text[: text.rfind("```")]
    return text.strip()


def _default_client_factory(candidate: ModelCandidate) -> LLMClient:
    return get_llm_client(provider=candidate.provider, model=candidate.model)


class ImageScanner:
    """Generates code from an image by trying each configured model in turn."""

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        client_factory: Callable[[ModelCandidate], LLMClient] = _default_client_factory,
    ):
        self._config = config or ScanConfig()
        self._client_factory = client_factory

    def scan(self, data_url: str) -> ScanResult:
        """Generate code for the image in *data_url*.

        Args:
            data_url: A base64 ``data:`` URL as sent by the browser.

        Returns:
            A ScanResult naming the model that answered, or the fallback
            placeholder with a warning when every model failed.

        Raises:
            InvalidImageError: If *data_url* carries no payload.
        """
        image = decode_data_url(data_url)
        for candidate in self._config.candidates:
            logger.info("Trying model: %s", candidate)
            try:
                client = self._client_factory(candidate)
                text = client.describe_image(
                    SCAN_PROMPT, image, max_tokens=self._config.max_tokens
                )
                generated_code = _strip_markdown_fences(text)
            except Exception as exc:
                logger.warning("Error with model %s: %s", candidate, exc)
                continue
            logger.info("Successfully used model: %s", candidate)
            return ScanResult(generated_code=generated_code, model=str(candidate))

        logger.warning("All models failed, using fallback code")
        return ScanResult(generated_code=FALLBACK_CODE, warning=FALLBACK_WARNING)

"""Transport-independent request handlers.

An HTTP layer maps a JSON body to ``handle_execute`` / ``handle_scan_image``
and writes back ``ApiResponse.status`` and ``ApiResponse.body``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from .dispatcher import run
from .image_scanner import ImageScanner, InvalidImageError
from . import constants

logger = logging.getLogger(__name__)


class ExecuteRequest(BaseModel):
    code: str = Field(min_length=1)
    language: str = Field(min_length=1)


class ScanImageRequest(BaseModel):
    image: str = Field(min_length=1)


@dataclass(frozen=True)
class ApiResponse:
    status: int
    body: dict[str, Any]


def execute_snippet(code: str, language: str) -> dict[str, Any]:
    """Run a snippet and return the wire payload ``{output, preview?}``."""
    return run(code, language).to_payload()


def handle_execute(payload: Any) -> ApiResponse:
    """Validate an execute request and simulate the snippet.

    Args:
        payload: Decoded JSON body, expected to carry ``code`` and ``language``.

    Returns:
        200 with ``{output, preview?}``; 400 when either field is missing or
        empty; 500 when simulation fails unexpectedly.
    """
    try:
        request = ExecuteRequest.model_validate(payload)
    except ValidationError:
        return ApiResponse(400, {"error": constants.MISSING_INPUT_ERROR})

    try:
        body = execute_snippet(request.code, request.language)
    except Exception as exc:
        logger.exception("Snippet execution failed (language=%s)", request.language)
        return ApiResponse(
            500, {"error": f"{constants.EXECUTE_FAILURE_PREFIX}{exc}"}
        )
    return ApiResponse(200, body)


def handle_scan_image(
    payload: Any, scanner: Optional[ImageScanner] = None
) -> ApiResponse:
    """Validate a scan request and generate code from its image.

    Returns:
        200 with ``{generatedCode, warning?}``; 400 for a missing or
        malformed image; 500 when scanning fails unexpectedly.
    """
    try:
        request = ScanImageRequest.model_validate(payload)
    except ValidationError:
        return ApiResponse(400, {"error": constants.NO_IMAGE_ERROR})

    scanner = scanner or ImageScanner()
    try:
        result = scanner.scan(request.image)
    except InvalidImageError:
        return ApiResponse(400, {"error": constants.INVALID_IMAGE_ERROR})
    except Exception as exc:
        logger.exception("Error scanning image")
        return ApiResponse(500, {"error": f"{constants.SCAN_FAILURE_PREFIX}{exc}"})

    body: dict[str, Any] = {"generatedCode": result.generated_code}
    if result.warning:
        body["warning"] = result.warning
    return ApiResponse(200, body)

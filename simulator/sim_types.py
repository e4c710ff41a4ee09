"""Result data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from . import constants


class ComponentType(str, Enum):
    BUTTON = "button"
    LABEL = "label"
    TEXTFIELD = "textfield"


class LayoutKind(str, Enum):
    FLOW = "flow"
    GRID = "grid"
    BORDER = "border"


class GUIComponent(BaseModel):
    """One widget detected in a GUI snippet."""

    type: ComponentType
    text: str
    name: str
    size: Optional[int] = None  # text fields only


class PreviewModel(BaseModel):
    """Structured description of the window a GUI snippet would build."""

    title: str = constants.DEFAULT_WINDOW_TITLE
    width: int = constants.DEFAULT_WINDOW_WIDTH
    height: int = constants.DEFAULT_WINDOW_HEIGHT
    layout: LayoutKind = LayoutKind.FLOW
    components: list[GUIComponent] = Field(default_factory=list)


class ExecutionResult(BaseModel):
    """Uniform result of simulating one snippet."""

    output: str
    preview: Optional[PreviewModel] = None

    def to_payload(self) -> dict:
        """Wire shape: enum values as strings, absent fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)


@dataclass(frozen=True)
class GUIBuildResult:
    """Trace log and preview model produced by the GUI model builder."""

    trace: str
    model: PreviewModel


@dataclass(frozen=True)
class ImagePayload:
    """A decoded image ready to send to a vision model."""

    media_type: str
    data: str  # base64, no data-URL prefix

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"


@dataclass(frozen=True)
class ScanResult:
    """Code generated from an image, plus a warning when it is a placeholder."""

    generated_code: str
    warning: Optional[str] = None
    model: Optional[str] = None  # the model that produced the code

"""Java AWT/Swing preview builder.

Derives a PreviewModel from the GUI-construction statements of a Java
snippet.  Each construct is found by its own small matcher over the full
source text; ``build`` runs them in a fixed order and collects one trace
line per finding:

    header → frame (+ size) → buttons → labels → text fields
           → layout → action listeners → visibility

Widgets are ordered category-major (every button, then every label, then
every text field), not by interleaved source position.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .sim_types import (
    ComponentType,
    GUIBuildResult,
    GUIComponent,
    LayoutKind,
    PreviewModel,
)
from . import constants

logger = logging.getLogger(__name__)

_FRAME_RE = re.compile(
    r'(?:JFrame|Frame)\s+(\w+)\s*=\s*new\s+(?:JFrame|Frame)\s*\(\s*(?:"([^"]+)")?\s*\)'
)
_BUTTON_RE = re.compile(
    r'(?:JButton|Button)\s+(\w+)\s*=\s*new\s+(?:JButton|Button)\s*\(\s*"([^"]+)"\s*\)'
)
_LABEL_RE = re.compile(
    r'(?:JLabel|Label)\s+(\w+)\s*=\s*new\s+(?:JLabel|Label)\s*\(\s*"([^"]+)"\s*\)'
)
# Also accepts a bare column count, e.g. `new JTextField(20)`, which the
# literal-first form alone would miss.
_TEXTFIELD_RE = re.compile(
    r"(?:JTextField|TextField)\s+(\w+)\s*=\s*new\s+(?:JTextField|TextField)"
    r'\s*\(\s*(?:"([^"]+)"\s*(?:,\s*(\d+))?|(\d+))?\s*\)'
)

# Checked in order; first hit wins.
_LAYOUT_MARKERS: tuple[tuple[str, LayoutKind], ...] = (
    ("new GridLayout", LayoutKind.GRID),
    ("new BorderLayout", LayoutKind.BORDER),
)

_LISTENER_MARKER = ".addActionListener"
_VISIBLE_MARKER = ".setVisible(true)"


@dataclass(frozen=True)
class FrameMatch:
    name: str
    title: Optional[str]


def find_frame(code: str) -> Optional[FrameMatch]:
    """Return the first frame/window declaration, if any."""
    match = _FRAME_RE.search(code)
    if match is None:
        return None
    return FrameMatch(name=match.group(1), title=match.group(2))


def find_size(code: str, frame_name: str) -> Optional[tuple[int, int]]:
    """Return ``(width, height)`` from the first ``<frame>.setSize(w, h)``."""
    pattern = re.compile(
        rf"{re.escape(frame_name)}\.setSize\s*\(\s*(\d+)\s*,\s*(\d+)\s*\)"
    )
    match = pattern.search(code)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def find_buttons(code: str) -> list[GUIComponent]:
    return [
        GUIComponent(type=ComponentType.BUTTON, text=m.group(2), name=m.group(1))
        for m in _BUTTON_RE.finditer(code)
    ]


def find_labels(code: str) -> list[GUIComponent]:
    return [
        GUIComponent(type=ComponentType.LABEL, text=m.group(2), name=m.group(1))
        for m in _LABEL_RE.finditer(code)
    ]


def _column_count(raw: Optional[str]) -> int:
    return int(raw) if raw else constants.DEFAULT_TEXTFIELD_SIZE


def find_text_fields(code: str) -> list[GUIComponent]:
    """Text fields take an optional literal and/or a column count."""
    return [
        GUIComponent(
            type=ComponentType.TEXTFIELD,
            text=m.group(2) or "",
            name=m.group(1),
            size=_column_count(m.group(3) or m.group(4)),
        )
        for m in _TEXTFIELD_RE.finditer(code)
    ]


def resolve_layout(code: str) -> LayoutKind:
    return next(
        (kind for marker, kind in _LAYOUT_MARKERS if marker in code),
        LayoutKind.FLOW,
    )


def has_action_listener(code: str) -> bool:
    return _LISTENER_MARKER in code


def sets_visible(code: str) -> bool:
    return _VISIBLE_MARKER in code


def _describe(component: GUIComponent) -> str:
    if component.type == ComponentType.BUTTON:
        return f"// Created button: {component.text}"
    if component.type == ComponentType.LABEL:
        return f"// Created label: {component.text}"
    text_part = f": {component.text}" if component.text else ""
    return f"// Created text field{text_part} (size: {component.size})"


def build(code: str) -> GUIBuildResult:
    """Scan *code* for GUI constructs and assemble the preview model.

    Args:
        code: Java source text.

    Returns:
        A GUIBuildResult whose ``trace`` holds one ``// ...`` line per
        finding (each newline-terminated) and whose ``model`` falls back to
        the default title, size and flow layout for anything not found.
    """
    trace: list[str] = [constants.GUI_TRACE_HEADER]
    title = constants.DEFAULT_WINDOW_TITLE
    width = constants.DEFAULT_WINDOW_WIDTH
    height = constants.DEFAULT_WINDOW_HEIGHT

    frame = find_frame(code)
    if frame is not None:
        title = frame.title or title
        size = find_size(code, frame.name)
        if size is not None:
            width, height = size
        trace.append(f"// Created frame: {title} ({width}x{height})")

    components = find_buttons(code) + find_labels(code) + find_text_fields(code)
    trace.extend(_describe(component) for component in components)

    layout = resolve_layout(code)
    trace.append(f"// Using {layout.value} layout")

    if has_action_listener(code):
        trace.append("// Action listeners detected (simulated only)")
    if sets_visible(code):
        trace.append("// Window set to visible")

    logger.debug(
        "GUI build: frame=%s, %d component(s), layout=%s",
        frame.name if frame else None,
        len(components),
        layout.value,
    )
    model = PreviewModel(
        title=title,
        width=width,
        height=height,
        layout=layout,
        components=components,
    )
    return GUIBuildResult(trace="".join(f"{line}\n" for line in trace), model=model)

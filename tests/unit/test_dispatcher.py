"""Tests for simulator.dispatcher.run."""

from __future__ import annotations

import pytest

from simulator.dispatcher import run, uses_gui_library
from simulator.sim_types import ComponentType, ExecutionResult, LayoutKind

SWING_WINDOW = """\
import javax.swing.*;

public class App {
    public static void main(String[] args) {
        JFrame frame = new JFrame("Counter");
        frame.setSize(500, 250);
        JButton inc = new JButton("+1");
        JLabel count = new JLabel("0");
        JTextField step = new JTextField("1", 4);
        frame.setLayout(new BorderLayout());
        frame.setVisible(true);
    }
}
"""


class TestGuiMarkers:
    @pytest.mark.parametrize("marker", ["import java.awt.*;", "import javax.swing.JFrame;"])
    def test_detects_markers(self, marker):
        assert uses_gui_library(marker)

    def test_plain_java(self):
        assert not uses_gui_library("import java.util.List;")


class TestRun:
    def test_returns_execution_result(self):
        assert isinstance(run('print("hi")', "python"), ExecutionResult)

    def test_python_is_evaluated(self):
        result = run('print("a")\nprint("b")', "python")
        assert result.output == "a\nb"
        assert result.preview is None

    def test_python_error_never_raises(self):
        result = run("1 / 0", "python")
        assert result.output.startswith("Error: ")
        assert result.preview is None

    def test_javascript_extracted(self):
        result = run('console.log("hello");', "javascript")
        assert result.output == "hello"
        assert result.preview is None

    def test_javascript_is_simulated_not_evaluated(self):
        result = run("console.log(1 + 2);", "javascript")
        assert result.output.startswith("// JavaScript code execution is simulated")

    def test_c_extracted(self):
        assert run('printf("Hi\\n");', "c").output == "Hi\n"

    def test_plain_java_has_no_preview(self):
        code = 'import java.util.*;\nJFrame f = new JFrame("x");\nSystem.out.println("ok");'
        result = run(code, "java")
        assert result.output == "ok"
        assert result.preview is None

    def test_java_gui_builds_preview(self):
        result = run(SWING_WINDOW, "java")
        preview = result.preview
        assert preview is not None
        assert preview.title == "Counter"
        assert (preview.width, preview.height) == (500, 250)
        assert preview.layout == LayoutKind.BORDER
        assert [c.type for c in preview.components] == [
            ComponentType.BUTTON,
            ComponentType.LABEL,
            ComponentType.TEXTFIELD,
        ]
        assert preview.components[2].size == 4
        assert result.output.startswith("// Java AWT/Swing execution is simulated\n")
        assert "// Window set to visible\n" in result.output

    def test_unsupported_language(self):
        result = run("puts 'hi'", "ruby")
        assert result.output == "Unsupported language"
        assert result.preview is None

    def test_language_tags_are_case_sensitive(self):
        assert run('print("x")', "Python").output == "Unsupported language"


class TestToPayload:
    def test_preview_omitted_when_absent(self):
        assert run('console.log("x")', "javascript").to_payload() == {"output": "x"}

    def test_preview_serialized(self):
        payload = run(SWING_WINDOW, "java").to_payload()
        preview = payload["preview"]
        assert preview["layout"] == "border"
        assert preview["components"][0] == {"type": "button", "text": "+1", "name": "inc"}
        assert preview["components"][2] == {
            "type": "textfield",
            "text": "1",
            "name": "step",
            "size": 4,
        }

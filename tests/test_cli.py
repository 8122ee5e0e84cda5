"""Tests for the command-line interface."""
from typer.testing import CliRunner

from chatscroll.cli.app import app
from chatscroll.history import CLEAR_COLOR, CURRENT_COLOR

runner = CliRunner()


class TestRenderCommand:
    """Tests for `chatscroll render`."""

    def test_render_frame(self, history_file):
        """Test rendering a file with the first-received message selected."""
        result = runner.invoke(app, ["render", str(history_file), "--width", "80", "--height", "3"])

        assert result.exit_code == 0
        expected = "alice: hi\n" + CURRENT_COLOR + "bob: yo\n" + CLEAR_COLOR + "carol: sup\n"
        assert result.stdout_bytes == expected.encode()

    def test_render_with_cursor_moves(self, history_file):
        """Test moving the selection before rendering."""
        result = runner.invoke(
            app,
            ["render", str(history_file), "-w", "80", "-h", "3", "--up", "1"]
        )

        assert result.exit_code == 0
        expected = CURRENT_COLOR + "alice: hi\n" + CLEAR_COLOR + "bob: yo\ncarol: sup\n"
        assert result.stdout_bytes == expected.encode()

    def test_render_dimensions_from_environment(self, history_file, monkeypatch):
        """Test that the viewport falls back to environment variables."""
        monkeypatch.setenv("CHATSCROLL_WIDTH", "80")
        monkeypatch.setenv("CHATSCROLL_HEIGHT", "1")

        result = runner.invoke(app, ["render", str(history_file)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"carol: sup\n"

    def test_render_debug_log(self, history_file):
        """Test that debug diagnostics are printed when requested."""
        result = runner.invoke(
            app,
            ["render", str(history_file), "-w", "80", "-h", "3", "--log-level", "debug"]
        )

        assert result.exit_code == 0
        assert "DEBUG" in result.output

    def test_render_invalid_file(self, tmp_path):
        """Test that a malformed message line fails with exit code 1."""
        path = tmp_path / "bad.jsonl"
        path.write_text('{"Username": "a", "Timestamp": 1}\n{"Username": "b"}\n')

        result = runner.invoke(app, ["render", str(path), "-w", "80", "-h", "3"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_render_missing_file(self, tmp_path):
        """Test that a missing file is rejected by argument validation."""
        result = runner.invoke(app, ["render", str(tmp_path / "missing.jsonl")])

        assert result.exit_code != 0


class TestShowCommand:
    """Tests for `chatscroll show`."""

    def test_show_lists_messages_in_order(self, history_file):
        """Test that messages are listed oldest first."""
        result = runner.invoke(app, ["show", str(history_file)])

        assert result.exit_code == 0
        assert "3 messages" in result.output
        assert result.output.index("alice") < result.output.index("bob") < result.output.index("carol")

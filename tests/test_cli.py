"""
Tests for the CLI module.
"""

import io
import json

import pytest
from flowtext.cli import export_document, main, read_input, render
from flowtext.session import FlowDocument


@pytest.fixture
def flow_file(tmp_path, order_text):
    path = tmp_path / "order.flow"
    path.write_text(order_text)
    return path


@pytest.fixture
def built_document(order_text):
    doc = FlowDocument("My Flow / With <Special> Chars!")
    doc.build_from_text(order_text)
    return doc


class TestRender:
    """Tests for format dispatch."""

    def test_auto_uses_detected_form(self, built_document):
        """auto writes the form picked from node ids."""
        content, ext = render(built_document, "auto")

        assert ext == ".dsl"
        assert content.startswith("1.Receive order")

    def test_chain(self, built_document):
        """Forcing shorthand flattens multi-line labels."""
        content, ext = render(built_document, "chain")

        assert ext == ".chain"
        assert "Receive order -> Check stock look in every warehouse" in content

    def test_mermaid(self, built_document):
        content, ext = render(built_document, "mermaid")

        assert ext == ".mmd"
        assert content.startswith("graph TD")

    @pytest.mark.parametrize("format", ["graphviz", "dot"])
    def test_dot(self, built_document, format):
        """Both graphviz names give DOT source."""
        content, ext = render(built_document, format)

        assert ext == ".dot"
        assert "digraph" in content

    def test_json(self, built_document):
        """json writes the render payload."""
        content, ext = render(built_document, "json")

        assert ext == ".json"
        assert len(json.loads(content)["nodes"]) == 4

    def test_unknown_format_raises(self, built_document):
        """An unknown format name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown format"):
            render(built_document, "unknown")


class TestExportDocument:
    """Tests for writing an export file."""

    def test_writes_file(self, built_document, tmp_path):
        """The export lands in the output directory."""
        output = export_document(built_document, tmp_path, "dsl")

        assert output.exists()
        assert output.read_text().startswith("1.Receive order")

    def test_sanitizes_filename(self, built_document, tmp_path):
        """Unsafe characters in the document name are replaced."""
        output = export_document(built_document, tmp_path, "json")

        assert "/" not in output.name
        assert "<" not in output.name
        assert output.name == "my_flow___with_special_chars.json"


class TestReadInput:
    """Tests for reading a file or stdin."""

    def test_file(self, flow_file, order_text):
        assert read_input(str(flow_file)) == ("order", order_text)

    def test_stdin(self, monkeypatch):
        """A dash reads from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("A -> B"))

        assert read_input("-") == ("stdin", "A -> B")

    def test_missing_file(self, tmp_path):
        """A missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_input(str(tmp_path / "nope.flow"))


class TestMainCLI:
    """Tests for the main CLI entrypoint."""

    def test_main_missing_file_returns_error(self, capsys):
        """Test main returns 1 when the file does not exist."""
        result = main(["nonexistent.flow"])

        assert result == 1
        assert "File not found" in capsys.readouterr().err

    def test_main_directory_returns_error(self, tmp_path):
        """Test main returns 1 when given a directory."""
        result = main([str(tmp_path)])

        assert result == 1

    def test_main_export_to_output_dir(self, flow_file, tmp_path):
        """Test main writes into the output directory."""
        output_dir = tmp_path / "output"

        result = main([str(flow_file), "-o", str(output_dir), "-f", "mermaid"])

        assert result == 0
        assert (output_dir / "order.mmd").exists()

    def test_main_stdout(self, flow_file, capsys):
        """Test --stdout prints instead of writing a file."""
        result = main([str(flow_file), "--format", "chain", "--stdout"])

        assert result == 0
        out = capsys.readouterr().out
        assert "Check stock look in every warehouse -> |in stock| Ship" in out

    def test_main_stdin(self, monkeypatch, capsys):
        """Test main reads stdin when given a dash."""
        monkeypatch.setattr("sys.stdin", io.StringIO("A -> B -> C"))

        result = main(["-", "--stdout"])

        assert result == 0
        assert capsys.readouterr().out == "A -> B\nB -> C\n"

    def test_main_reports_diagnostics(self, tmp_path, capsys):
        """Test parse diagnostics are printed as warnings."""
        path = tmp_path / "messy.flow"
        path.write_text("1.A\n1->|broken2")

        result = main([str(path), "--stdout"])

        assert result == 0
        assert "malformed" in capsys.readouterr().err

    def test_main_unrecognized_input_warns(self, tmp_path, capsys):
        """Test text that no dialect accepts still exports, with a warning."""
        path = tmp_path / "prose.txt"
        path.write_text("just some prose")

        result = main([str(path), "--stdout"])

        assert result == 0
        assert "not recognized" in capsys.readouterr().err

    def test_main_invalid_utf8_returns_error(self, tmp_path, capsys):
        """Test main returns 1 for a file that is not UTF-8 text."""
        path = tmp_path / "bad.flow"
        path.write_bytes(b"1.A\xff\n1->2")

        result = main([str(path), "--stdout"])

        assert result == 1
        captured = capsys.readouterr()
        assert "not valid UTF-8" in captured.err
        assert captured.out == ""

    def test_main_graphviz_writes_dot_source(self, flow_file, tmp_path):
        """Test the graphviz format writes DOT source, not a rendered image."""
        output_dir = tmp_path / "dot"

        result = main([str(flow_file), "-o", str(output_dir), "-f", "graphviz"])

        assert result == 0
        assert [p.name for p in output_dir.iterdir()] == ["order.dot"]
        assert "digraph order" in (output_dir / "order.dot").read_text()

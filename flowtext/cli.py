"""
Command-line interface for flowtext.

Usage:
    flowtext ./examples/order.flow -o ./build/
    flowtext ./examples/order.flow -o ./build/ --format mermaid
    flowtext ./examples/order.flow --format chain --stdout
    cat order.flow | flowtext - --format graphviz --stdout
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from flowtext.backend.graphviz import GraphvizExporter
from flowtext.backend.mermaid import MermaidExporter
from flowtext.backend.text import TextExporter
from flowtext.core.serialization import JsonSerializer
from flowtext.frontend.results import Recognized
from flowtext.logging_utils import setup_logging
from flowtext.session import FlowDocument

logger = logging.getLogger(__name__)

FORMATS = ["auto", "dsl", "chain", "mermaid", "graphviz", "dot", "json"]


def render(document: FlowDocument, format: str) -> tuple:
    """Return (content, extension) for the document in the given format."""
    if format == "auto":
        form = TextExporter.detect_form(document.chart)
        return document.export_text(), f".{form}"
    elif format == "dsl":
        return document.export_dsl(), ".dsl"
    elif format == "chain":
        return document.export_chain(), ".chain"
    elif format == "mermaid":
        return MermaidExporter.to_mermaid(document.chart), ".mmd"
    elif format == "graphviz" or format == "dot":
        return GraphvizExporter.to_dot(document.chart), ".dot"
    elif format == "json":
        return JsonSerializer.to_json(document.chart), ".json"
    raise ValueError(f"Unknown format: {format}. Use: {', '.join(FORMATS)}")


def export_document(document: FlowDocument, output_path: Path, format: str) -> Path:
    """Export a built document into ``output_path``."""
    content, ext = render(document, format)

    # Sanitize the document name for use as filename
    safe_name = document.name.lower().replace(" ", "_").replace("/", "_")
    safe_name = "".join(c for c in safe_name if c.isalnum() or c == "_") or "flow"

    output_file = output_path / f"{safe_name}{ext}"
    output_file.write_text(content + "\n", encoding="utf-8")
    return output_file


def read_input(source: str) -> tuple:
    """Return (name, text) for a file path or '-' for stdin."""
    if source == "-":
        return "stdin", sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise IsADirectoryError(f"Not a file: {path}")
    return path.stem, path.read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="flowtext",
        description="Convert flow text between the DSL, chain shorthand and diagram formats.",
        epilog="Example: flowtext ./examples/order.flow -f mermaid --stdout"
    )

    parser.add_argument(
        "input",
        help="Flow text file, or '-' to read standard input"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("."),
        help="Output directory (default: current directory)"
    )

    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="auto",
        help="Output format (default: auto, the text form the graph's ids call for)"
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the result instead of writing a file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    try:
        name, text = read_input(args.input)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: {args.input} is not valid UTF-8 text ({e.reason} at byte {e.start})", file=sys.stderr)
        return 1

    document = FlowDocument(name)
    chart = document.build_from_text(text)

    result = document.last_result
    if isinstance(result, Recognized):
        for diagnostic in result.diagnostics:
            print(f"Warning: {diagnostic}", file=sys.stderr)
    elif text.strip():
        print(f"Warning: input not recognized ({result.reason})", file=sys.stderr)

    logger.info("Built %s with %d nodes and %d edges", name, len(chart.nodes), len(chart.edges))

    if args.stdout:
        content, _ = render(document, args.format)
        print(content)
        return 0

    args.output.mkdir(parents=True, exist_ok=True)
    try:
        output_file = export_document(document, args.output, args.format)
    except OSError as e:
        print(f"Error exporting {name}: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Exported '{name}' -> {output_file}")
    else:
        print(f"{output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Arrow-chain shorthand parser.

    Start -> Check input -> Done
    Check input -> |retry| Start

Every line is a chain of labels joined by arrows (``->``, ``-->``, ``→``).
A line that ends with an arrow, or a line that starts with one, continues
the chain of its neighbour.
Labels are deduplicated across the whole text, so a label that appears on
several lines is a single node.
"""

import logging
from typing import List

from flowtext.frontend.results import Diagnostic, NotApplicable, ParseResult, Recognized, SimpleGraph
from flowtext.frontend.syntax import has_arrow, join_wrapped_lines, split_arrows, split_hop

logger = logging.getLogger(__name__)


class ChainParser:
    """Recognizes the shorthand arrow-chain dialect."""

    dialect = "chain"

    def parse(self, text: str) -> ParseResult:
        if not has_arrow(text):
            return NotApplicable("no arrow found")

        graph = SimpleGraph()
        seen = set()
        diagnostics: List[Diagnostic] = []

        for line_no, line in join_wrapped_lines(text):
            hops = []
            for segment in split_arrows(line):
                edge_label, target, problem = split_hop(segment)
                if problem:
                    diagnostics.append(Diagnostic(line_no, problem, line))
                if not target:
                    continue
                hops.append((edge_label, target))

            if hops and hops[0][0]:
                diagnostics.append(Diagnostic(line_no, f"edge label {hops[0][0]!r} has no source", line))

            for _, target in hops:
                if target not in seen:
                    seen.add(target)
                    graph.nodes.append(target)

            for (_, source), (edge_label, target) in zip(hops, hops[1:]):
                graph.edges.append((source, target, edge_label))

        if len(graph.nodes) < 2:
            return NotApplicable("fewer than two distinct labels")

        logger.debug("Chain parse: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
        return Recognized(graph, diagnostics, self.dialect)

"""
Numbered-node DSL parser.

Example:
    1.Start
    2.Check input
    validate every field
    3.Done
    1->2->|ok|3
    2->|retry|1

Line classes, checked in this order:

- definition ``<digits>.<label>``: starts a node. The digit run is kept as
  text, so ``01`` and ``1`` are different nodes.
- connection: any other line with an arrow. ``a->|label|b`` labels the edge
  pointing into ``b``. Connection lines may appear anywhere.
- continuation: anything else; appended to the last defined node's label
  on a new line.

Anomalies never abort the parse. They are collected as diagnostics on the
Recognized result and the best-effort reading is kept.
"""

import logging
import re
from typing import Dict, List, Optional

from flowtext.frontend.results import Diagnostic, DslGraph, DslNode, NotApplicable, ParseResult, Recognized
from flowtext.frontend.syntax import has_arrow, split_arrows, split_hop

logger = logging.getLogger(__name__)

DEFINITION_RE = re.compile(r"^(\d+)\.(.*)$")
TOKEN_RE = re.compile(r"^\d+$")


class DslParser:
    """Recognizes the numbered-definition + connection-list dialect."""

    dialect = "dsl"

    def parse(self, text: str) -> ParseResult:
        graph = DslGraph()
        diagnostics: List[Diagnostic] = []
        by_token: Dict[str, DslNode] = {}
        current: Optional[DslNode] = None

        for line_no, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line:
                continue

            match = DEFINITION_RE.match(line)
            if match:
                token, label = match.group(1), match.group(2).strip()
                current = by_token.get(token)
                if current is not None:
                    diagnostics.append(Diagnostic(line_no, f"node {token} redefined", line))
                    current.label = label
                else:
                    current = DslNode(token, label)
                    by_token[token] = current
                    graph.nodes.append(current)
                continue

            if has_arrow(line):
                graph.edges.extend(self._parse_connection(line_no, line, diagnostics))
                continue

            if current is None:
                diagnostics.append(Diagnostic(line_no, "text before the first node definition ignored", line))
                continue
            current.label = f"{current.label}\n{line}" if current.label else line

        if not graph.nodes:
            return NotApplicable("no node definitions")

        logger.debug(
            "DSL parse: %d nodes, %d edges, %d diagnostics",
            len(graph.nodes), len(graph.edges), len(diagnostics),
        )
        return Recognized(graph, diagnostics, self.dialect)

    @staticmethod
    def _parse_connection(line_no: int, line: str, diagnostics: List[Diagnostic]) -> List[tuple]:
        hops = []
        for segment in split_arrows(line):
            edge_label, target, problem = split_hop(segment)
            if problem:
                diagnostics.append(Diagnostic(line_no, problem, line))
            if not target:
                diagnostics.append(Diagnostic(line_no, "empty hop dropped", line))
                continue
            if not TOKEN_RE.match(target):
                diagnostics.append(Diagnostic(line_no, f"non-numeric node reference {target!r}", line))
            hops.append((edge_label, target))

        return [
            (source, target, edge_label)
            for (_, source), (edge_label, target) in zip(hops, hops[1:])
        ]

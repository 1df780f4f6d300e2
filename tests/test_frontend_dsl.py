"""
Tests for the numbered-node DSL parser.
"""

import pytest
from flowtext.frontend.dsl import DslParser
from flowtext.frontend.results import DslGraph, NotApplicable, Recognized


@pytest.fixture
def parser():
    return DslParser()


def labels(result):
    return {node.token: node.label for node in result.graph.nodes}


class TestDefinitions:
    """Definition and continuation lines."""

    def test_definitions(self, parser):
        """Definitions give one node per token with trimmed labels."""
        result = parser.parse("1.Start\n2. End ")

        assert isinstance(result, Recognized)
        assert result.dialect == "dsl"
        assert isinstance(result.graph, DslGraph)
        assert labels(result) == {"1": "Start", "2": "End"}

    def test_tokens_kept_as_text(self, parser):
        """``01`` and ``1`` are different tokens."""
        result = parser.parse("01.Padded\n1.Plain")

        assert [n.token for n in result.graph.nodes] == ["01", "1"]

    def test_multi_line_continuation(self, parser):
        """Lines after a definition continue its label."""
        result = parser.parse("1.Start\nmore detail\n2.End\n1->2")

        assert labels(result)["1"] == "Start\nmore detail"
        assert labels(result)["2"] == "End"

    def test_continuation_into_empty_label(self, parser):
        """An empty label is replaced by its first continuation."""
        result = parser.parse("1.\nBody text")

        assert labels(result)["1"] == "Body text"

    def test_definition_with_arrow_stays_definition(self, parser):
        """A definition line wins over an arrow in its label."""
        result = parser.parse("1.Go -> there\n2.Back")

        assert labels(result)["1"] == "Go -> there"
        assert result.graph.edges == []

    def test_blank_lines_ignored(self, parser):
        result = parser.parse("\n  \n1.A\n\n   \n2.B\n")

        assert labels(result) == {"1": "A", "2": "B"}

    def test_no_definitions_is_not_applicable(self, parser):
        """Text with no numbered definition is left to other dialects."""
        result = parser.parse("A -> B -> C")

        assert isinstance(result, NotApplicable)

    def test_empty_is_not_applicable(self, parser):
        """Blank input is not a DSL document."""
        assert isinstance(parser.parse(""), NotApplicable)
        assert isinstance(parser.parse("   \n\t\n"), NotApplicable)


class TestConnections:
    """Connection lines, hops and inline edge labels."""

    def test_chain_of_hops(self, parser):
        """One connection line can chain several hops."""
        result = parser.parse("1.A\n1->2->3")

        assert result.graph.edges == [("1", "2", ""), ("2", "3", "")]

    def test_label_belongs_to_target_hop(self, parser):
        """``|label|`` labels the edge pointing into the next token."""
        result = parser.parse("1.A\n2->|connect|4->5")

        assert result.graph.edges == [("2", "4", "connect"), ("4", "5", "")]

    def test_connections_before_definitions(self, parser):
        """Connections may appear before the nodes they join."""
        result = parser.parse("1->2\n1.A\n2.B")

        assert result.graph.edges == [("1", "2", "")]
        assert labels(result) == {"1": "A", "2": "B"}

    def test_whitespace_around_hops(self, parser):
        result = parser.parse("1.A\n 1 -> | yes | 2 ")

        assert result.graph.edges == [("1", "2", "yes")]

    def test_long_arrows(self, parser):
        """Longer arrows are accepted."""
        result = parser.parse("1.A\n1-->2")

        assert result.graph.edges == [("1", "2", "")]


class TestDiagnostics:
    """Anomalies are tolerated and reported, never raised."""

    def test_malformed_hop_is_bare_target(self, parser):
        """An unclosed label is kept as a target and reported."""
        result = parser.parse("1.A\n1->|broken2")

        assert result.graph.edges == [("1", "broken2", "")]
        messages = [d.message for d in result.diagnostics]
        assert any("malformed" in m for m in messages)

    def test_empty_hop_dropped(self, parser):
        """Empty hops are skipped with one diagnostic each."""
        result = parser.parse("1.A\n1->->2\n1->")

        assert result.graph.edges == [("1", "2", "")]
        assert sum("empty hop" in d.message for d in result.diagnostics) == 2

    def test_non_numeric_reference_reported(self, parser):
        """A word used as a hop target is kept and reported."""
        result = parser.parse("1.A\n1->end")

        assert result.graph.edges == [("1", "end", "")]
        assert any("non-numeric" in d.message for d in result.diagnostics)

    def test_text_before_first_definition(self, parser):
        """Preamble text is ignored with a diagnostic on its line."""
        result = parser.parse("preamble\n1.A")

        assert labels(result) == {"1": "A"}
        assert result.diagnostics[0].line_no == 1

    def test_redefinition_replaces_label(self, parser):
        """A repeated token replaces the label in place."""
        result = parser.parse("1.First\n2.B\n1.Second")

        assert [n.token for n in result.graph.nodes] == ["1", "2"]
        assert labels(result)["1"] == "Second"
        assert "redefined" in result.diagnostics[0].message

    def test_clean_input_has_no_diagnostics(self, parser, order_text):
        """A well-formed document produces no diagnostics."""
        result = parser.parse(order_text)

        assert result.diagnostics == []

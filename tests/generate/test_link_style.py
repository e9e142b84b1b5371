"""
Unit tests for LinkStyle and SolutionCollector.
"""

import pytest

from assembly_toolkit.core.models import Connector, Frame, Link, Point, Section
from assembly_toolkit.generate import LinkStyle, SolutionCollector


@pytest.fixture
def style() -> LinkStyle:
    return LinkStyle()


@pytest.fixture
def cons():
    return Connector("S", "+"), Connector("S", "-")


class TestLinkStyle:
    """Tests for link creation and lookup."""

    def test_have_link_when_made_then_returns_same_link(self, style, cons):
        """make then look up returns the stored edge."""
        # Arrange
        s_plus, s_minus = cons
        p1, p2 = Point("A", "1"), Point("B", "2")

        # Act
        link = style.create_undirected_link(s_plus, s_minus, p1, p2)

        # Assert
        assert style.have_undirected_link(s_plus, s_minus, p1, p2) is link
        assert style.have_undirected_link(s_minus, s_plus, p2, p1) is link

    def test_have_link_when_unrelated_pair_then_none(self, style, cons):
        s_plus, s_minus = cons
        style.create_undirected_link(s_plus, s_minus, Point("A", "1"), Point("B", "2"))
        assert style.have_undirected_link(s_plus, s_minus, Point("A", "1"), Point("C", "3")) is None

    def test_create_link_when_repeated_then_not_duplicated(self, style, cons):
        s_plus, s_minus = cons
        p1, p2 = Point("A", "1"), Point("B", "2")
        first = style.create_undirected_link(s_plus, s_minus, p1, p2)
        second = style.create_undirected_link(s_minus, s_plus, p2, p1)

        assert second is first
        assert len(style) == 1
        assert style.pair_link_count(p1, p2) == 1

    def test_pair_link_count_when_two_connector_types_then_counts_both(self, style, cons):
        s_plus, s_minus = cons
        p1, p2 = Point("A", "1"), Point("B", "2")
        style.create_undirected_link(s_plus, s_minus, p1, p2)
        style.create_undirected_link(Connector("O", "+"), Connector("O", "-"), p1, p2)

        assert style.pair_link_count(p2, p1) == 2
        assert style.pair_link_count(p1, Point("C")) == 0
        assert all(isinstance(link, Link) for link in style.links)

    def test_create_unique_section_when_called_twice_then_distinct_copies(self, style, cons):
        template = Section.build("A", [cons[0]])

        first = style.create_unique_section(template)
        second = style.create_unique_section(template)

        assert first != second
        assert first.template == template
        assert second.template == template
        assert first.connectors == template.connectors


class TestSolutionCollector:
    """Tests for solution recording."""

    def test_record_when_new_linkage_then_stored(self, cons):
        s_plus, s_minus = cons
        link = Link.between(s_plus, s_minus, Point("A", "1"), Point("B", "2"))
        collector = SolutionCollector()

        assert collector.record_solution(Frame(linkage=frozenset({link})))
        assert collector.solutions == (frozenset({link}),)
        assert len(collector) == 1

    def test_record_when_same_linkage_then_ignored(self, cons):
        s_plus, s_minus = cons
        link = Link.between(s_plus, s_minus, Point("A", "1"), Point("B", "2"))
        collector = SolutionCollector()
        collector.record_solution(Frame(linkage=frozenset({link})))

        assert not collector.record_solution(Frame(linkage=frozenset({link})))
        assert len(collector) == 1

    def test_clear_when_called_then_empty(self):
        collector = SolutionCollector()
        collector.record_solution(Frame())
        collector.clear()
        assert len(collector) == 0
        assert collector.record_solution(Frame())

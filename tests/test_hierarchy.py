"""
Tests for the tag hierarchy graph
"""
import pytest

from services.hierarchy import HierarchyGraph
from models.records import TagRecord


@pytest.fixture
def diamond():
    """
    1 is the root, 2 and 3 are its children, 4 has both 2 and 3 as parents
    """
    return HierarchyGraph(edges=[(2, 1), (3, 1), (4, 2), (4, 3)], tag_ids=[1, 2, 3, 4, 5])


class TestClosures:
    def test_ancestors_include_self(self, diamond):
        assert diamond.ancestors(1) == {1}

    def test_ancestors_follow_every_parent(self, diamond):
        assert diamond.ancestors(4) == {1, 2, 3, 4}

    def test_descendants_include_self_and_shared_child(self, diamond):
        assert diamond.descendants(1) == {1, 2, 3, 4}
        assert diamond.descendants(2) == {2, 4}

    def test_isolated_tag(self, diamond):
        assert diamond.ancestors(5) == {5}
        assert diamond.descendants(5) == {5}

    def test_unknown_tag_is_its_own_closure(self, diamond):
        assert diamond.descendants(99) == {99}

    def test_closure_terminates_on_stored_cycle(self):
        """Bad data must not hang traversal"""
        graph = HierarchyGraph(edges=[(1, 2), (2, 3), (3, 1)])
        assert graph.ancestors(1) == {1, 2, 3}
        assert graph.descendants(1) == {1, 2, 3}

    def test_closure_terminates_on_self_loop(self):
        graph = HierarchyGraph(edges=[(1, 1)])
        assert graph.ancestors(1) == {1}


class TestConstruction:
    def test_from_tags(self):
        tags = [
            TagRecord(id=1, name='a', color='#000000'),
            TagRecord(id=2, name='b', color='#000000', parent_ids=[1]),
        ]
        graph = HierarchyGraph.from_tags(tags)
        assert len(graph) == 2
        assert 1 in graph
        assert graph.children[1] == {2}
        assert graph.parents[2] == {1}

    def test_add_edge_registers_both_nodes(self):
        graph = HierarchyGraph()
        graph.add_edge(7, 8)
        assert 7 in graph and 8 in graph


class TestCycleDetection:
    def test_self_parent_rejected(self, diamond):
        message = diamond.cycle_error(2, [2])
        assert message == "Circular reference: tag '2' cannot have itself as parent"

    def test_descendant_as_parent_rejected(self, diamond):
        message = diamond.cycle_error(1, [4])
        assert message == (
            "Circular reference: tag '4' is a descendant of tag '1' and cannot become its parent"
        )

    def test_second_parent_is_allowed(self, diamond):
        assert diamond.cycle_error(5, [2, 3]) is None
        assert diamond.cycle_error(3, [2]) is None

    def test_first_offending_parent_is_reported(self, diamond):
        message = diamond.cycle_error(2, [5, 4])
        assert "tag '4'" in message

    def test_has_cycle(self, diamond):
        assert diamond.has_cycle() is False
        diamond.add_edge(1, 4)
        assert diamond.has_cycle() is True

    def test_empty_graph_has_no_cycle(self):
        assert HierarchyGraph().has_cycle() is False

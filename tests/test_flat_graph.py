"""Tests for the NetworkX export of debug trees."""

import networkx as nx

from viewscope import HEADER_OFFSET, StaticTemplate, TemplateNode, get_children, to_debug, to_flat_graph
from tests.builders import FakeElement, FakeText, build_template, chain, make_view


def _page():
    """<main> with two children, the second hosting a component."""
    widget_template = StaticTemplate(
        first_child=TemplateNode(index=HEADER_OFFSET), name="widget"
    )
    widget = make_view(widget_template, [FakeText("inside")], host=FakeElement("x-widget", "inside"))

    template = StaticTemplate(
        first_child=TemplateNode(
            index=HEADER_OFFSET,
            child=chain(
                TemplateNode(index=HEADER_OFFSET + 1),
                TemplateNode(index=HEADER_OFFSET + 2),
            ),
        ),
        name="page",
    )
    slots = [
        FakeElement("main", FakeElement("h1", "t"), FakeElement("x-widget", "inside")),
        FakeElement("h1", "t"),
        widget,
    ]
    return make_view(template, slots), widget


class TestToFlatGraph:
    """Tests for to_flat_graph."""

    def test_empty_view(self):
        """A view without nodes gives an empty graph."""
        G = to_flat_graph(to_debug(make_view()))

        assert isinstance(G, nx.DiGraph)
        assert G.number_of_nodes() == 0

    def test_node_ids_and_attributes(self):
        """Nodes are keyed by sibling path and carry parent and html."""
        view, _ = _page()
        G = to_flat_graph(to_debug(view))

        assert G.nodes["0"]["html"] == "<main>"
        assert G.nodes["0"]["parent"] is None
        assert G.nodes["0.0"]["html"] == "<h1>"
        assert G.nodes["0.0"]["parent"] == "0"
        assert G.nodes["0.1"]["depth"] == 1

    def test_component_subtree(self):
        """Component views hang under their host node."""
        view, _ = _page()
        G = to_flat_graph(to_debug(view))

        assert G.nodes["0.1"]["node_type"] == "COMPONENT"
        assert G.nodes["0.0"]["node_type"] == "NODE"
        assert G.nodes["0.1/0"]["html"] == "inside"
        assert G.nodes["0.1/0"]["parent"] == "0.1"
        assert G.has_edge("0.1", "0.1/0")

    def test_edges_follow_parents(self):
        """Every non-root node has exactly one incoming edge from its parent."""
        template, total = build_template([2, 3])
        view = make_view(template, [FakeElement("b", str(i)) for i in range(total)])
        G = to_flat_graph(to_debug(view))

        assert G.number_of_nodes() == total
        for node_id, attrs in G.nodes(data=True):
            preds = list(G.predecessors(node_id))
            if attrs["parent"] is None:
                assert preds == []
            else:
                assert preds == [attrs["parent"]]


class TestGetChildren:
    """Tests for get_children."""

    def test_children_in_order(self):
        """Direct children are returned in insertion order."""
        view, _ = _page()
        G = to_flat_graph(to_debug(view))

        assert get_children(G, "0") == ["0.0", "0.1"]
        assert get_children(G, "0.1") == ["0.1/0"]
        assert get_children(G, "0.0") == []

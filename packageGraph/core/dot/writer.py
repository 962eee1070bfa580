"""
Graphviz DOT serialization of dependency graphs.

The output can be rendered directly::

    dot -Tsvg Foo.dot -o Foo.svg
"""

import networkx as nx
import pydot

from packageGraph.core.dot.identifier import KEYWORDS, validate_identifier


# Node attributes written to DOT; anything else stays in the graph model
RENDERED_NODE_ATTRIBUTES = ("color", "shape")


def graph_to_pydot(graph: nx.MultiDiGraph, quote_identifiers: bool = False) -> pydot.Dot:
    """
    Convert a dependency graph to a ``pydot.Dot`` in insertion order.

    Args:
        graph: Graph built by ``DependencyGraphBuilder``
        quote_identifiers: Let pydot quote names that are not bare identifiers
            instead of failing

    Returns:
        pydot graph with one node statement per node and one edge statement per edge

    Raises:
        InvalidIdentifierError: If a name is not a bare identifier and quoting is off
    """
    def node_id(name: str) -> str:
        if not quote_identifiers:
            return validate_identifier(name)
        # pydot reads a bare node/edge/graph name as a default-attribute statement
        if name.lower() in KEYWORDS:
            return f'"{name}"'
        return name

    graph_name = graph.graph.get("name") or "G"
    dot_graph = pydot.Dot(
        graph_name=node_id(graph_name),
        graph_type="digraph" if graph.is_directed() else "graph",
        strict=bool(graph.graph.get("strict", False)),
    )

    for node, data in graph.nodes(data=True):
        attributes = {
            key: str(data[key])
            for key in RENDERED_NODE_ATTRIBUTES
            if data.get(key) is not None
        }
        dot_graph.add_node(pydot.Node(node_id(node), **attributes))

    for source, target in graph.edges():
        dot_graph.add_edge(pydot.Edge(node_id(source), node_id(target)))

    return dot_graph


def graph_to_dot(graph: nx.MultiDiGraph, quote_identifiers: bool = False) -> str:
    """
    Render a dependency graph as DOT text.

    Node statements come first in insertion order, followed by one edge
    statement per edge, grouped by source node.
    """
    return graph_to_pydot(graph, quote_identifiers).to_string()

"""Rich-based rendering of query descriptions."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.tree import Tree

from ..core import FQB
from ..models import Edge, RootEdge


def render_query(target: FQB | Edge) -> str:
    """Render an edge tree as text, labelled with the compiled path for root edges."""
    edge = target.require_root_edge() if isinstance(target, FQB) else target
    tree = Tree(_edge_label(edge))
    _add_fields(tree, edge)

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()


def _edge_label(edge: Edge) -> str:
    if isinstance(edge, RootEdge):
        return edge.compile_edge()
    return edge.compile_selector()


def _add_fields(parent_tree: Tree, edge: Edge) -> None:
    for field in edge.fields:
        if isinstance(field, Edge):
            branch = parent_tree.add(f"{field.name}/")
            _add_fields(branch, field)
        else:
            parent_tree.add(field)

#!/usr/bin/env python3
"""
Command line interface for graphview.

- List the node types present in a graph
- Show the filtered view, the selected node's details and hover neighbors
- Render the current view with the Graphviz or NetworkX backend

Usage:
    python -m graphview types
    python -m graphview show --filter Person --filter Company --select 1
    python -m graphview render --backend networkx --layout force --output graph.png
    python -m graphview render --html --hover 6 --output graph.html
"""

import argparse
import sys

from .client import GraphExplorer
from .data.loader import load_dataset
from .models.graph_models import NodeType
from .shared.exceptions import GraphViewError
from .shared.logger import setup_logging

NODE_TYPE_CHOICES = [t.value for t in NodeType]


def _build_explorer(args) -> GraphExplorer:
    """Create an explorer and replay the requested interactions on it."""
    dataset = load_dataset(args.dataset) if getattr(args, 'dataset', None) else None
    explorer = GraphExplorer(
        dataset=dataset,
        backend=getattr(args, 'backend', None),
        layout=getattr(args, 'layout', None),
    )

    engine = explorer.engine
    for type_name in dict.fromkeys(getattr(args, 'filter', None) or []):
        engine.toggle_type_filter(NodeType(type_name))
    if getattr(args, 'select', None):
        engine.set_selected_node(args.select)
    if getattr(args, 'hover', None):
        engine.set_hovered_node(args.hover)
    return explorer


def types_command(args):
    """List node types present in the graph"""
    explorer = _build_explorer(args)
    engine = explorer.engine

    types = engine.node_types_available()
    print(f"📊 {len(types)} node types:")
    for node_type in types:
        print(f"  - {node_type.value} ({len(engine.nodes_by_type(node_type))} nodes)")
    return 0


def show_command(args):
    """Print the filtered view, selection details and hover highlight"""
    explorer = _build_explorer(args)
    engine = explorer.engine

    print(explorer.filter_panel())
    print()
    print(f"🔍 Visible: {len(engine.visible_nodes())} nodes, {len(engine.visible_edges())} edges")

    if getattr(args, 'list_nodes', False):
        for node in engine.visible_nodes():
            print(f"  - {node.id}: {node.label} ({node.type.value})")

    print()
    print(explorer.details_panel())

    if engine.hovered_node_id is not None:
        labels = sorted(engine.node_by_id(n).label for n in engine.hovered_neighbor_ids())
        print()
        print(f"🔗 Hovering {engine.hovered_node_id}: {len(labels)} visible neighbors")
        for label in labels:
            print(f"  - {label}")
    return 0


def render_command(args):
    """Render the current view to a file"""
    explorer = _build_explorer(args)
    try:
        path = explorer.render(
            output_path=getattr(args, 'output', None),
            format=getattr(args, 'format', None),
            html=getattr(args, 'html', False),
        )
    finally:
        explorer.close()

    print(f"📈 Visualization saved: {path}")
    return 0


def _add_view_arguments(parser):
    parser.add_argument('--dataset', help='JSON dataset file (defaults to the bundled sample graph)')
    parser.add_argument('--filter', action='append', choices=NODE_TYPE_CHOICES,
                        help='Show only this node type (repeatable)')
    parser.add_argument('--select', help='Node id to select')
    parser.add_argument('--hover', help='Node id to hover')


def main(argv=None):
    """graphview CLI entry point"""
    parser = argparse.ArgumentParser(
        prog='graphview',
        description='Explore typed graphs: filter by type, inspect and highlight neighborhoods'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='graphview operations')

    # Types command
    types_parser = subparsers.add_parser('types', help='List node types present in the graph')
    types_parser.add_argument('--dataset', help='JSON dataset file (defaults to the bundled sample graph)')
    types_parser.set_defaults(func=types_command)

    # Show command
    show_parser = subparsers.add_parser('show', help='Print the filtered view and node details')
    _add_view_arguments(show_parser)
    show_parser.add_argument('--list-nodes', action='store_true', help='List every visible node')
    show_parser.set_defaults(func=show_command)

    # Render command
    render_parser = subparsers.add_parser('render', help='Render the current view to a file')
    _add_view_arguments(render_parser)
    render_parser.add_argument('--backend', choices=['graphviz', 'networkx'], help='Visualization backend')
    render_parser.add_argument('--layout', help='Layout (networkx: circular, force, shell, random; graphviz: dot, neato, ...)')
    render_parser.add_argument('--format', choices=['png', 'svg', 'pdf'], help='Image format')
    render_parser.add_argument('--output', help='Output file path')
    render_parser.add_argument('--html', action='store_true', help='Export an interactive HTML page (pyvis)')
    render_parser.set_defaults(func=render_command)

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(log_level='DEBUG')

    if not args.command:
        parser.print_help()
        print("\n💡 Examples:")
        print("  python -m graphview types")
        print("  python -m graphview show --filter Person --filter Company --select 1")
        print("  python -m graphview render --backend networkx --layout force --output graph.png")
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n⚠️ Operation cancelled by user")
        return 1
    except GraphViewError as e:
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
GraphExplorer tests: dataset resolution, renderer lifecycle and rendering.
"""

import json
from pathlib import Path

import pytest

from graphview.client import GraphExplorer
from graphview.data.sample import SAMPLE_GRAPH
from graphview.models.graph_models import NodeType
from graphview.shared.exceptions import DatasetError, VisualizationError
from graphview.shared.settings import get_settings
from graphview.visualization.networkx_viz import NetworkXRenderer


def test_defaults_to_sample_graph():
    explorer = GraphExplorer()
    assert len(explorer.engine.visible_nodes()) == 26


def test_uses_given_dataset(tiny_dataset):
    explorer = GraphExplorer(tiny_dataset)
    assert [n.id for n in explorer.engine.visible_nodes()] == ["P1", "C1", "T1"]


def test_configured_dataset_path(tmp_path, monkeypatch):
    data = {"nodes": SAMPLE_GRAPH["nodes"][:3], "edges": []}
    path = tmp_path / "people.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    monkeypatch.setenv("GRAPH_VIEW_DATASET_PATH", str(path))
    get_settings.cache_clear()

    explorer = GraphExplorer()
    assert [n.label for n in explorer.engine.visible_nodes()] == ["Alice", "Bob", "Charlie"]


def test_configured_dataset_path_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("GRAPH_VIEW_DATASET_PATH", str(tmp_path / "missing.json"))
    get_settings.cache_clear()
    with pytest.raises(DatasetError):
        GraphExplorer()


def test_panels_without_renderer(tiny_dataset):
    explorer = GraphExplorer(tiny_dataset)
    explorer.engine.set_selected_node("P1")
    assert explorer.filter_panel().startswith("Filter by Type")
    assert "Alice [Person]" in explorer.details_panel()
    assert explorer._renderer is None


def test_renderer_is_mounted_lazily(tiny_dataset):
    explorer = GraphExplorer(tiny_dataset, backend="networkx")
    renderer = explorer.renderer
    assert isinstance(renderer, NetworkXRenderer)
    assert renderer.mounted

    explorer.engine.toggle_type_filter(NodeType.PERSON)
    assert renderer.rebuild_count == 2
    assert [n.id for n in renderer.scene.nodes] == ["P1"]


def test_close_unmounts(tiny_dataset):
    explorer = GraphExplorer(tiny_dataset, backend="networkx")
    renderer = explorer.renderer
    explorer.close()
    assert not renderer.mounted
    assert explorer._renderer is None


def test_switch_backend(tiny_dataset, mocker):
    from graphview.visualization.graphviz_viz import GraphvizRenderer

    mocker.patch.object(GraphvizRenderer, "is_available", return_value=True)
    explorer = GraphExplorer(tiny_dataset, backend="networkx")
    old = explorer.renderer

    new = explorer.switch_backend("graphviz")

    assert isinstance(new, GraphvizRenderer)
    assert new.mounted
    assert not old.mounted
    assert explorer.backend == "graphviz"


def test_render_to_default_location(tiny_dataset):
    explorer = GraphExplorer(tiny_dataset, backend="networkx")
    result = explorer.render()
    assert Path(result) == Path("output") / "graph.png"
    assert Path(result).exists()


def test_render_explicit_path(tiny_dataset, tmp_path):
    explorer = GraphExplorer(tiny_dataset, backend="networkx", layout="force")
    explorer.engine.set_hovered_node("C1")
    output = tmp_path / "hover.png"
    assert explorer.render(str(output)) == str(output)
    assert output.exists()


def test_render_html(tiny_dataset, tmp_path):
    pytest.importorskip("pyvis")
    explorer = GraphExplorer(tiny_dataset, backend="networkx")
    output = tmp_path / "graph.html"
    assert explorer.render(str(output), html=True) == str(output)
    assert "Acme" in output.read_text(encoding="utf-8")


def test_render_empty_view_raises(tiny_dataset):
    explorer = GraphExplorer(tiny_dataset, backend="networkx")
    explorer.engine.toggle_type_filter(NodeType.INVESTOR)
    with pytest.raises(VisualizationError):
        explorer.render()

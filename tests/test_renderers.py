"""
Backend tests for the NetworkX/Matplotlib, pyvis and Graphviz renderers.
"""

import pytest

from graphview.core.engine import GraphViewEngine
from graphview.models.graph_models import GraphDataset, NodeType
from graphview.visualization.graphviz_viz import GraphvizRenderer
from graphview.visualization.networkx_viz import NetworkXRenderer


class TestNetworkXRenderer:

    @pytest.fixture(autouse=True)
    def _require_backend(self):
        pytest.importorskip("networkx")
        pytest.importorskip("matplotlib")

    def test_is_available(self, engine):
        assert NetworkXRenderer(engine).is_available()

    def test_layout_resolution(self, engine):
        assert NetworkXRenderer(engine).layout == "circular"
        assert NetworkXRenderer(engine, layout="spring").layout == "force"
        assert NetworkXRenderer(engine, layout="hexagonal").layout == "circular"

    def test_configured_default_layout(self, engine, monkeypatch):
        from graphview.shared.settings import get_settings

        monkeypatch.setenv("GRAPH_VIEW_DEFAULT_LAYOUT", "shell")
        get_settings.cache_clear()
        assert NetworkXRenderer(engine).layout == "shell"

    @pytest.mark.parametrize("layout", ["circular", "force", "shell", "random"])
    def test_positions_cover_every_scene_node(self, engine, layout):
        renderer = NetworkXRenderer(engine)
        engine.set_hovered_node("P1")
        positions = renderer.compute_positions(renderer.scene, layout)
        assert set(positions) == {"P1", "C1", "T1"}

    def test_seeded_layouts_are_stable(self, sample_engine):
        first = NetworkXRenderer(sample_engine)
        second = NetworkXRenderer(sample_engine)
        assert first.compute_positions(first.scene, "force") == second.compute_positions(second.scene, "force")

    def test_hover_does_not_move_nodes(self, engine):
        renderer = NetworkXRenderer(engine, layout="force")
        before = renderer.compute_positions(renderer.scene)
        engine.set_hovered_node("T1")
        assert renderer.compute_positions(renderer.scene) == before

    def test_generate_image(self, engine, tmp_path):
        output = tmp_path / "plots" / "graph.png"
        result = NetworkXRenderer(engine).generate_image(str(output))
        assert result == str(output)
        assert output.stat().st_size > 0

    def test_generate_image_with_hover_and_selection(self, sample_engine, tmp_path):
        sample_engine.toggle_type_filter(NodeType.PERSON)
        sample_engine.toggle_type_filter(NodeType.COMPANY)
        sample_engine.set_selected_node("1")
        sample_engine.set_hovered_node("6")
        output = tmp_path / "hover.png"
        assert NetworkXRenderer(sample_engine, layout="force").generate_image(str(output))
        assert output.exists()

    def test_generate_image_of_empty_view(self, engine, tmp_path):
        engine.toggle_type_filter(NodeType.INVESTOR)
        output = tmp_path / "empty.png"
        assert NetworkXRenderer(engine).generate_image(str(output)) == ""
        assert not output.exists()

    def test_generate_image_base64(self, engine):
        data = NetworkXRenderer(engine).generate_image_base64()
        assert data.startswith("data:image/png;base64,")

    def test_show_interactive(self, engine, mocker):
        show = mocker.patch("matplotlib.pyplot.show")
        NetworkXRenderer(engine).show_interactive()
        show.assert_called_once_with()

    def test_generate_html(self, engine, tmp_path):
        pytest.importorskip("pyvis")
        engine.set_selected_node("C1")
        output = tmp_path / "graph.html"

        result = NetworkXRenderer(engine).generate_html(str(output))

        assert result == str(output)
        html = output.read_text(encoding="utf-8")
        assert "Acme" in html
        assert "Works At" in html


class TestGraphvizRenderer:

    @pytest.fixture(autouse=True)
    def _require_package(self):
        pytest.importorskip("graphviz")

    def test_dot_source_layout(self, engine):
        source = GraphvizRenderer(engine).generate_dot_source()
        assert "rankdir=TB" in source
        assert "Alice" in source
        assert "n0 -> n1" in source
        assert "id=P1" in source
        assert "#4CAF50" in source

    def test_dot_source_follows_filter(self, engine):
        engine.toggle_type_filter(NodeType.COMPANY)
        source = GraphvizRenderer(engine).generate_dot_source()
        assert "Acme" in source
        assert "Alice" not in source
        assert "->" not in source

    def test_hover_keeps_hidden_nodes_invisible(self, engine):
        engine.set_hovered_node("P1")
        source = GraphvizRenderer(engine).generate_dot_source()
        assert "style=invis" in source
        assert "#ff0000" in source
        assert "Python" in source

    def test_selected_node_outline(self, engine):
        engine.set_selected_node("T1")
        source = GraphvizRenderer(engine).generate_dot_source()
        assert "#3B82F6" in source

    def test_node_ids_with_colons_keep_edges_attached(self):
        engine = GraphViewEngine(GraphDataset.model_validate({
            "nodes": [
                {"id": "a:b", "label": "Ada", "type": "Person"},
                {"id": "c", "label": "Corp", "type": "Company"},
            ],
            "edges": [{"source": "a:b", "target": "c", "relationship": "Works At"}],
        }))
        source = GraphvizRenderer(engine).generate_dot_source()
        assert "n0 -> n1" in source
        assert 'id="a:b"' in source
        assert "a:b ->" not in source

    def test_parallel_edges_get_distinct_ids(self):
        engine = GraphViewEngine(GraphDataset.model_validate({
            "nodes": [
                {"id": "a", "label": "Ada", "type": "Person"},
                {"id": "b", "label": "Corp", "type": "Company"},
            ],
            "edges": [
                {"source": "a", "target": "b", "relationship": "Works At"},
                {"source": "a", "target": "b", "relationship": "Invests In"},
            ],
        }))
        source = GraphvizRenderer(engine).generate_dot_source()
        assert 'id="a-b"' in source
        assert 'id="a-b#2"' in source

    def test_unknown_engine_falls_back_to_dot(self, engine):
        assert GraphvizRenderer(engine, layout="bogus").layout == "dot"
        assert GraphvizRenderer(engine, layout="neato").layout == "neato"

    def test_generate_image(self, engine, tmp_path):
        renderer = GraphvizRenderer(engine)
        if not renderer.is_available():
            pytest.skip("Graphviz executables not installed")
        result = renderer.generate_image(str(tmp_path / "graph.png"), format="svg")
        assert result.endswith("graph.svg")
        assert (tmp_path / "graph.svg").exists()

    def test_generate_image_base64(self, engine):
        renderer = GraphvizRenderer(engine)
        if not renderer.is_available():
            pytest.skip("Graphviz executables not installed")
        assert renderer.generate_image_base64(format="svg").startswith("data:image/svg+xml;base64,")

    def test_unavailable_backend_returns_empty(self, engine, mocker, tmp_path):
        renderer = GraphvizRenderer(engine)
        mocker.patch.object(renderer, "is_available", return_value=False)
        assert renderer.generate_image(str(tmp_path / "graph")) == ""
        assert renderer.generate_image_base64() == ""

"""
Command line interface tests.
"""

import json

import pytest

from graphview.cli import main


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "Examples" in capsys.readouterr().out


def test_types(capsys):
    assert main(["types"]) == 0
    out = capsys.readouterr().out
    assert "📊 7 node types:" in out
    assert "  - Person (5 nodes)" in out
    assert "  - Investor (2 nodes)" in out


def test_show_unfiltered(capsys):
    assert main(["show"]) == 0
    out = capsys.readouterr().out
    assert "🔍 Visible: 26 nodes, 34 edges" in out
    assert "(no filter: all types visible)" in out
    assert "No node selected" in out


def test_show_with_filter_and_selection(capsys):
    assert main(["show", "--filter", "Person", "--filter", "Company", "--select", "1"]) == 0
    out = capsys.readouterr().out
    assert "  [x] Person" in out
    assert "  [x] Company" in out
    assert "  [ ] Technology" in out
    assert "🔍 Visible: 9 nodes, 7 edges" in out
    assert "Alice [Person]" in out
    assert "Connections (1):" in out
    assert "Works At with TechCorp" in out


def test_repeated_filter_is_applied_once(capsys):
    assert main(["show", "--filter", "Person", "--filter", "Person"]) == 0
    assert "🔍 Visible: 5 nodes, 0 edges" in capsys.readouterr().out


def test_show_hover(capsys):
    assert main(["show", "--filter", "Person", "--filter", "Company", "--hover", "6"]) == 0
    out = capsys.readouterr().out
    assert "🔗 Hovering 6: 3 visible neighbors" in out
    assert out.index("  - Alice") < out.index("  - Bob") < out.index("  - Startup Y")


def test_show_list_nodes(capsys):
    assert main(["show", "--filter", "Investor", "--list-nodes"]) == 0
    out = capsys.readouterr().out
    assert "  - 21: Investor A (Investor)" in out
    assert "  - 22: Investor B (Investor)" in out


def test_invalid_filter_choice():
    with pytest.raises(SystemExit):
        main(["show", "--filter", "Spaceship"])


def test_custom_dataset(tmp_path, capsys):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps({
        "nodes": [
            {"id": "a", "label": "Ada", "type": "Person"},
            {"id": "b", "label": "Lab", "type": "Community"},
        ],
        "edges": [{"source": "a", "target": "b", "relationship": "Member Of"}],
    }), encoding="utf-8")

    assert main(["types", "--dataset", str(path)]) == 0
    out = capsys.readouterr().out
    assert "📊 2 node types:" in out
    assert "  - Community (1 nodes)" in out


def test_missing_dataset_reports_error(tmp_path, capsys):
    assert main(["show", "--dataset", str(tmp_path / "nope.json")]) == 1
    assert "❌ Error:" in capsys.readouterr().out


def test_undecodable_dataset_reports_error(tmp_path, capsys):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00{\x00}")
    assert main(["types", "--dataset", str(path)]) == 1
    assert "❌ Error:" in capsys.readouterr().out


def test_render_networkx(tmp_path, capsys):
    output = tmp_path / "view.png"
    code = main(["render", "--backend", "networkx", "--filter", "Company", "--output", str(output)])
    assert code == 0
    assert output.exists()
    assert f"📈 Visualization saved: {output}" in capsys.readouterr().out


def test_render_empty_view_fails(tmp_path, capsys):
    dataset = tmp_path / "graph.json"
    dataset.write_text(json.dumps({
        "nodes": [{"id": "a", "label": "Ada", "type": "Person"}],
        "edges": [],
    }), encoding="utf-8")
    code = main(["render", "--backend", "networkx", "--dataset", str(dataset),
                 "--filter", "Event", "--output", str(tmp_path / "none.png")])
    assert code == 1
    assert "❌ Error:" in capsys.readouterr().out

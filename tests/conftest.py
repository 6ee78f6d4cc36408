"""
Shared test fixtures.

``tiny_dataset`` is the three-node graph used throughout the engine tests:
Alice (Person) works at Acme (Company), which uses Python (Technology).
"""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from graphview.core.engine import GraphViewEngine
from graphview.data.sample import sample_graph
from graphview.models.graph_models import Edge, GraphDataset, Node, NodeType
from graphview.shared.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test from a scratch directory with default settings."""
    for name in list(os.environ):
        if name.upper().startswith("GRAPH_VIEW_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tiny_dataset():
    return GraphDataset(
        nodes=[
            Node(id="P1", label="Alice", type=NodeType.PERSON),
            Node(id="C1", label="Acme", type=NodeType.COMPANY),
            Node(id="T1", label="Python", type=NodeType.TECHNOLOGY),
        ],
        edges=[
            Edge(source="P1", target="C1", relationship="Works At"),
            Edge(source="C1", target="T1", relationship="Uses"),
        ],
    )


@pytest.fixture
def engine(tiny_dataset):
    return GraphViewEngine(tiny_dataset)


@pytest.fixture
def sample_engine():
    return GraphViewEngine(sample_graph())


@pytest.fixture
def dangling_dataset():
    """Graph with edges pointing at ids that do not exist, plus a self-loop."""
    return GraphDataset(
        nodes=[
            Node(id="A", label="Ann", type=NodeType.PERSON),
            Node(id="B", label="Beta Inc", type=NodeType.COMPANY),
        ],
        edges=[
            Edge(source="A", target="B", relationship="Works At"),
            Edge(source="A", target="GHOST", relationship="Knows"),
            Edge(source="MISSING", target="B", relationship="Funds"),
            Edge(source="B", target="B", relationship="Owns"),
        ],
    )

"""
Graph datasets: the bundled reference graph and a JSON loader.
"""

from .sample import SAMPLE_GRAPH, sample_graph
from .loader import dataset_from_dict, load_dataset

__all__ = ['SAMPLE_GRAPH', 'sample_graph', 'dataset_from_dict', 'load_dataset']

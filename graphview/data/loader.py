"""
Load graph datasets from JSON documents.

Expected shape::

    {
        "nodes": [{"id": "1", "label": "Alice", "type": "Person"}],
        "edges": [{"source": "1", "target": "6", "relationship": "Works At"}]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from ..models.graph_models import GraphDataset
from ..shared.exceptions import DatasetError
from ..shared.logger import get_logger

logger = get_logger(__name__)


def dataset_from_dict(data: Dict[str, Any]) -> GraphDataset:
    """
    Validate an in-memory mapping into a GraphDataset.

    Raises:
        DatasetError: If the mapping does not describe a valid graph
    """
    if not isinstance(data, dict):
        raise DatasetError(f"Dataset must be a JSON object, got {type(data).__name__}")
    try:
        return GraphDataset.model_validate(data)
    except ValidationError as e:
        raise DatasetError(f"Invalid graph dataset: {e}") from e


def load_dataset(path: Union[str, Path]) -> GraphDataset:
    """
    Read and validate a JSON dataset file.

    Raises:
        DatasetError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetError(f"Dataset file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetError(f"Malformed JSON in {path}: {e}") from e
    except OSError as e:
        raise DatasetError(f"Cannot read {path}: {e}") from e

    dataset = dataset_from_dict(data)
    logger.info(f"Loaded {len(dataset.nodes)} nodes and {len(dataset.edges)} edges from {path}")
    return dataset

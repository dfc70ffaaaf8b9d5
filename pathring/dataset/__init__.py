"""Distance datasets: YAML loading, border filtering and index mapping."""

from pathring.dataset.index_map import City, IndexMapper
from pathring.dataset.loader import (
    Dataset,
    DistanceRecord,
    load_dataset,
    load_dataset_yaml,
)

__all__ = [
    "City",
    "IndexMapper",
    "Dataset",
    "DistanceRecord",
    "load_dataset",
    "load_dataset_yaml",
]

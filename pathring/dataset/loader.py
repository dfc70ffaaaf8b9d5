"""YAML loader + schema validation for distance datasets.

A dataset lists cities (code, name, state), raw road-distance records between
city codes, and optionally the pairs of states that share a border. Only
records between bordering states become graph edges; without a ``borders``
section every record does.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Set, Union

import jsonschema
import yaml

from pathring.dataset.index_map import City, IndexMapper
from pathring.graph.builder import Edge, GraphInput
from pathring.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DistanceRecord:
    """Raw distance between two city codes."""

    src: str
    dst: str
    km: float


@dataclass
class Dataset:
    """Parsed dataset: cities, distance records and bordering state pairs."""

    cities: List[City]
    distances: List[DistanceRecord] = field(default_factory=list)
    borders: Optional[Set[FrozenSet[str]]] = None

    def index_mapper(self) -> IndexMapper:
        return IndexMapper(self.cities)

    def bordering(self, a: City, b: City) -> bool:
        """Return True if ``a`` and ``b`` lie in bordering states."""
        if self.borders is None:
            return True
        if a.state is None or b.state is None:
            return False
        return frozenset((a.state, b.state)) in self.borders

    def border_records(self) -> List[DistanceRecord]:
        """Return the distance records whose endpoints lie in bordering states.

        Raises:
            ValueError: If a record names an unknown city code.
        """
        mapper = self.index_mapper()
        kept: List[DistanceRecord] = []
        covered: Set[FrozenSet[str]] = set()
        for record in self.distances:
            try:
                a = mapper.city(mapper.index_of(record.src))
                b = mapper.city(mapper.index_of(record.dst))
            except KeyError as exc:
                raise ValueError(f"Distance record {record}: {exc.args[0]}") from None
            if self.bordering(a, b):
                kept.append(record)
                if a.state is not None and b.state is not None:
                    covered.add(frozenset((a.state, b.state)))

        dropped = len(self.distances) - len(kept)
        if dropped:
            logger.debug(f"Dropped {dropped} distance records between non-bordering states")
        if self.borders is not None:
            for pair in sorted(self.borders - covered, key=sorted):
                logger.warning(
                    f"No distance record for bordering states {'-'.join(sorted(pair))}"
                )
        return kept

    def to_graph_input(self) -> GraphInput:
        """Return the core graph input (dense indices and undirected edges)."""
        mapper = self.index_mapper()
        edges = [
            Edge(mapper.index_of(r.src), mapper.index_of(r.dst), r.km)
            for r in self.border_records()
        ]
        logger.debug(f"Dataset yields {len(mapper)} nodes and {len(edges)} edges")
        return GraphInput(len(mapper), edges)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("pathring.schemas")
        .joinpath("dataset.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_dataset_yaml(yaml_str: str) -> Dataset:
    """Parse and validate a dataset YAML string.

    Raises:
        ValueError: If the document is not a mapping, or node codes repeat.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _load_schema())

    cities = [
        City(code=str(node["code"]), name=node["name"], state=node.get("state"))
        for node in data["nodes"]
    ]
    distances = [
        DistanceRecord(src=str(rec["from"]), dst=str(rec["to"]), km=rec["km"])
        for rec in data["distances"]
    ]
    borders: Optional[Set[FrozenSet[str]]] = None
    if "borders" in data:
        borders = {frozenset(pair) for pair in data["borders"]}
        missing = [c.name for c in cities if c.state is None]
        if missing:
            raise ValueError(
                f"Nodes without 'state' cannot be matched against borders: {', '.join(missing)}"
            )

    dataset = Dataset(cities, distances, borders)
    # Fails early on duplicate codes
    dataset.index_mapper()
    return dataset


def load_dataset(path: Union[str, Path]) -> Dataset:
    """Read and parse a dataset YAML file."""
    text = Path(path).read_text(encoding="utf-8")
    logger.debug(f"Loading dataset from {path}")
    return load_dataset_yaml(text)

"""Shared graph fixtures.

Node numbering is dense and 1-based. Diagrams show distances on edges.
"""

from __future__ import annotations

import pytest

from pathring.graph import GraphInput


@pytest.fixture
def line_abcd() -> GraphInput:
    #     [2]     [3]     [1]
    #  A ───── B ───── C ───── D
    #  1       2       3       4
    return GraphInput.from_tuples(4, [(1, 2, 2), (2, 3, 3), (3, 4, 1)])


@pytest.fixture
def split_abc() -> GraphInput:
    #     [1]
    #  A ───── B       C
    #  1       2       3
    return GraphInput.from_tuples(3, [(1, 2, 1)])


@pytest.fixture
def square_tie() -> GraphInput:
    #        [2]  B  [2]
    #     ┌──────(2)──────┐
    #  X(1)               Y(4)
    #     └──────(3)──────┘
    #        [1]  C  [3]
    # Both X-B-Y and X-C-Y have distance 4.
    return GraphInput.from_tuples(4, [(1, 2, 2), (2, 4, 2), (1, 3, 1), (3, 4, 3)])


@pytest.fixture
def shortcut_triangle() -> GraphInput:
    #        [1]      [1]
    #  1 ───────── 2 ───────── 3
    #  └──────────[5]──────────┘
    return GraphInput.from_tuples(3, [(1, 2, 1), (2, 3, 1), (1, 3, 5)])


@pytest.fixture
def two_components() -> GraphInput:
    #  1 ─[4]─ 2 ─[1]─ 3        4 ─[2]─ 5
    return GraphInput.from_tuples(5, [(1, 2, 4), (2, 3, 1), (4, 5, 2)])


@pytest.fixture
def single_node() -> GraphInput:
    return GraphInput(1, [])


DATASET_YAML = """\
nodes:
  - {code: 100, name: "Alpha", state: AA}
  - {code: 200, name: "Beta", state: BB}
  - {code: 300, name: "Gamma", state: CC}
  - {code: 400, name: "Delta", state: DD}
  - {code: 500, name: "Epsilon", state: EE}
distances:
  - {from: 100, to: 200, km: 2}
  - {from: 200, to: 300, km: 3}
  - {from: 300, to: 400, km: 1}
  - {from: 100, to: 400, km: 3}
borders:
  - [AA, BB]
  - [BB, CC]
  - [CC, DD]
"""


@pytest.fixture
def dataset_yaml() -> str:
    # Alpha-Delta has a record but AA/DD do not border; Epsilon is isolated.
    return DATASET_YAML


@pytest.fixture
def dataset_file(tmp_path, dataset_yaml):
    path = tmp_path / "cities.yaml"
    path.write_text(dataset_yaml, encoding="utf-8")
    return path

"""Dense index assignment for real-world node identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from pathring.types.base import NodeIndex


@dataclass(frozen=True)
class City:
    """A real-world node: municipal code, display name and optional state."""

    code: str
    name: str
    state: Optional[str] = None


class IndexMapper:
    """Two-way mapping between cities and dense indices ``1..n``.

    Indices follow the order of ``cities``.

    Raises:
        ValueError: If two cities share a code.
    """

    def __init__(self, cities: Sequence[City]) -> None:
        self._cities: List[City] = list(cities)
        self._by_code: Dict[str, NodeIndex] = {}
        self._by_name: Dict[str, NodeIndex] = {}
        for idx, city in enumerate(self._cities, start=1):
            if city.code in self._by_code:
                raise ValueError(f"Duplicate node code '{city.code}'")
            self._by_code[city.code] = idx
            self._by_name.setdefault(city.name.casefold(), idx)

    def __len__(self) -> int:
        return len(self._cities)

    def index_of(self, code: object) -> NodeIndex:
        """Return the dense index of ``code``.

        Raises:
            KeyError: If the code is unknown.
        """
        try:
            return self._by_code[str(code)]
        except KeyError:
            raise KeyError(f"Unknown node code '{code}'") from None

    def city(self, index: NodeIndex) -> City:
        if not 1 <= index <= len(self._cities):
            raise KeyError(f"Node index {index} is outside 1..{len(self._cities)}")
        return self._cities[index - 1]

    def code_of(self, index: NodeIndex) -> str:
        return self.city(index).code

    def name_of(self, index: NodeIndex) -> str:
        return self.city(index).name

    def names(self, route: Sequence[NodeIndex]) -> List[str]:
        """Translate a route of indices into display names."""
        return [self.name_of(idx) for idx in route]

    def resolve(self, token: str) -> NodeIndex:
        """Resolve user input to a dense index.

        ``token`` is tried as a dense index, then as a node code, then as a
        case-insensitive city name.

        Raises:
            KeyError: If nothing matches.
        """
        text = str(token).strip()
        if text.isdigit() and 1 <= int(text) <= len(self._cities):
            return int(text)
        if text in self._by_code:
            return self._by_code[text]
        folded = text.casefold()
        if folded in self._by_name:
            return self._by_name[folded]
        raise KeyError(f"No node matches '{token}'")

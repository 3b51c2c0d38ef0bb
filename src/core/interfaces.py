"""Core protocol and interface definitions.

Defines the AnalysisSession protocol implemented by the flamapy-backed
session (and by test doubles) so the dispatcher can stay engine-agnostic.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol


class AnalysisSession(Protocol):
    """Contract for a single-use analysis session over one feature model."""

    async def initialize(self) -> None:
        ...

    async def atomic_sets(self) -> Optional[List[List[str]]]:
        ...

    async def average_branching_factor(self) -> Optional[float]:
        ...

    async def commonality(self, config_file: str) -> Optional[float]:
        ...

    async def configurations(self) -> Optional[List[Any]]:
        ...

    async def configurations_number(self) -> Optional[int]:
        ...

    async def core_features(self) -> Optional[List[str]]:
        ...

    async def count_leafs(self) -> Optional[int]:
        ...

    async def dead_features(self) -> Optional[List[str]]:
        ...

    async def estimated_number_of_configurations(self) -> Optional[int]:
        ...

    async def false_optional_features(self) -> Optional[List[str]]:
        ...

    async def feature_ancestors(self, config_file: str) -> Optional[List[str]]:
        ...

    async def filter(self, config_file: str) -> Optional[List[Any]]:
        ...

    async def leaf_features(self) -> Optional[List[str]]:
        ...

    async def max_depth(self) -> Optional[int]:
        ...

    async def satisfiable(self) -> Optional[bool]:
        ...


# Builds a fresh, uninitialized session from UVL model text.
SessionFactory = Callable[[str], AnalysisSession]

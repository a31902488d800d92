"""
Domain entities for lane selection in the routed orchestration strategy.
A RouteDecision is produced once per query and never revised.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DataLane:
    ticker: str


@dataclass(frozen=True)
class DefinitionLane:
    pass


RouteDecision = Union[DataLane, DefinitionLane]

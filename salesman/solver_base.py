"""
Shared solver contract.

A solver is anything with a ``name`` and a ``solve(instance, ...)`` method
returning a :class:`SolverResult`. Solvers keep their parameters on the
object and hold no state between calls, so one solver object can be reused
across instances.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, runtime_checkable

from .tour import Tour
from .tsp import TSPInstance


@dataclass(frozen=True)
class SolverResult:
    algorithm: str
    tour: Tuple[int, ...]
    cost: float
    elapsed_sec: float = 0.0
    iterations: Optional[int] = None
    final_temperature: Optional[float] = None
    accepted_moves: Optional[int] = None
    initial_cost: Optional[float] = None
    history: Tuple[float, ...] = ()     # current cost after each iteration

    @property
    def n_cities(self) -> int:
        return len(self.tour)

    def as_tour(self, instance: TSPInstance) -> Tour:
        return Tour(instance, self.tour)


@runtime_checkable
class Solver(Protocol):
    name: str

    def solve(self, instance: TSPInstance) -> SolverResult:
        ...

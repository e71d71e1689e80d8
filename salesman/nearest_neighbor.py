"""Greedy nearest-neighbour tour construction."""
from __future__ import annotations
import logging
import numbers
import time
from typing import Optional

import numpy as np

from .errors import InvalidInput
from .solver_base import SolverResult
from .tsp import TSPInstance

logger = logging.getLogger(__name__)


class NearestNeighbor:
    """Start at ``start_city`` and always move to the closest unvisited city.

    O(N^2) and deterministic: ties go to the lowest city id, because
    ``argmin`` returns the first minimum of the row. No optimality guarantee.
    """

    name = "nearest_neighbor"

    def __init__(self, start_city: Optional[int] = 0):
        if start_city is None:
            start_city = 0
        if isinstance(start_city, bool) or not isinstance(start_city, numbers.Integral):
            raise InvalidInput(f"start_city must be an integer, got {start_city!r}")
        if start_city < 0:
            raise InvalidInput(f"start_city must be >= 0, got {start_city}")
        self.start_city = int(start_city)

    def solve(self, instance: TSPInstance) -> SolverResult:
        n = instance.n_cities()
        if self.start_city >= n:
            raise InvalidInput(f"start_city {self.start_city} out of range for {n} cities")

        start = time.time()
        D = np.asarray(instance.matrix, dtype=float)
        visited = np.zeros(n, dtype=bool)
        tour = [self.start_city]
        visited[self.start_city] = True
        cur = self.start_city
        for _ in range(n - 1):
            dist_row = D[cur].copy()
            dist_row[visited] = np.inf
            nxt = int(np.argmin(dist_row))
            tour.append(nxt)
            visited[nxt] = True
            cur = nxt
        cost = instance.tour_length(tour)
        elapsed = time.time() - start

        logger.debug("nearest neighbour from %d: n=%d cost=%.6f", self.start_city, n, cost)
        return SolverResult(algorithm=self.name, tour=tuple(tour), cost=cost, elapsed_sec=elapsed)


def solve_nearest_neighbor(instance: TSPInstance, start_city: Optional[int] = None) -> SolverResult:
    return NearestNeighbor(start_city=start_city).solve(instance)

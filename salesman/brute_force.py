"""Exact search over all tours, for small instances only."""
from __future__ import annotations
import logging
import math
import numbers
import time
from typing import List, Optional, Tuple

from .errors import InvalidInput, ProblemTooLarge
from .solver_base import SolverResult
from .tsp import TSPInstance

logger = logging.getLogger(__name__)

# (N-1)!/2 tours; 12 cities is already ~20M leaves before pruning
MAX_BRUTE_FORCE_CITIES = 12
DEFAULT_MAX_CITIES = 11


class BruteForce:
    """Provably optimal tour by exhaustive depth-first enumeration.

    City 0 is fixed as the start (rotations are equivalent) and only tours
    whose second city has a lower id than the last are completed (a tour and
    its reverse cost the same). A partial path is abandoned as soon as its
    cost reaches the best complete tour found so far. Enumeration is
    lexicographic, so among equal-cost optima the first one found wins.
    """

    name = "brute_force"

    def __init__(self, max_cities: int = DEFAULT_MAX_CITIES):
        if isinstance(max_cities, bool) or not isinstance(max_cities, numbers.Integral):
            raise InvalidInput(f"max_cities must be an integer, got {max_cities!r}")
        if not 1 <= max_cities <= MAX_BRUTE_FORCE_CITIES:
            raise InvalidInput(f"max_cities must be in [1, {MAX_BRUTE_FORCE_CITIES}], got {max_cities}")
        self.max_cities = int(max_cities)

    def solve(self, instance: TSPInstance) -> SolverResult:
        n = instance.n_cities()
        if n > self.max_cities:
            raise ProblemTooLarge(n, self.max_cities)

        start = time.time()
        if n == 1:
            tour, cost, evaluated = (0,), 0.0, 1
        else:
            tour, cost, evaluated = self._search(instance.matrix, n)
        elapsed = time.time() - start

        logger.debug("brute force: n=%d evaluated=%d cost=%.6f in %.3fs", n, evaluated, cost, elapsed)
        return SolverResult(algorithm=self.name, tour=tour, cost=cost,
                            elapsed_sec=elapsed, iterations=evaluated)

    @staticmethod
    def _search(D, n: int) -> Tuple[Tuple[int, ...], float, int]:
        best_cost = math.inf
        best: Optional[List[int]] = None
        evaluated = 0

        used = [False] * n
        used[0] = True
        path = [0]
        prefix = [0.0]      # prefix[k] = cost of path[:k+1]
        cursor = [1]        # cursor[k] = next city id to try after path[k]

        while cursor:
            cand = cursor[-1]
            while cand < n and used[cand]:
                cand += 1
            if cand >= n:
                cursor.pop()
                used[path.pop()] = False
                prefix.pop()
                continue
            cursor[-1] = cand + 1

            cost = prefix[-1] + D[path[-1]][cand]
            if cost >= best_cost:
                continue

            if len(path) == n - 1:
                second = path[1] if len(path) > 1 else cand
                if second > cand:
                    continue
                evaluated += 1
                total = cost + D[cand][0]
                if total < best_cost:
                    best_cost = total
                    best = path + [cand]
                continue

            path.append(cand)
            used[cand] = True
            prefix.append(cost)
            cursor.append(1)

        return tuple(best), best_cost, evaluated


def solve_brute_force(instance: TSPInstance, max_cities: int = DEFAULT_MAX_CITIES) -> SolverResult:
    return BruteForce(max_cities=max_cities).solve(instance)

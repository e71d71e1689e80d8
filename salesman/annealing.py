"""
Simulated annealing over random pairwise swaps.

State is (current tour, current cost, temperature, iteration). Each
iteration swaps two distinct, uniformly chosen positions, accepts the move
if it does not worsen the tour, or otherwise with the Metropolis probability
exp(-delta / T), then cools geometrically: T <- T * cooling_rate.
The run stops once T <= min_temperature or max_iterations have executed.

All randomness comes from one ``random.Random`` seeded from the config and
owned by a single ``solve`` call, so a fixed ``rng_seed`` replays the exact
same accept/reject sequence.
"""
from __future__ import annotations
import logging
import math
import numbers
import random
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .errors import InvalidInput
from .nearest_neighbor import NearestNeighbor
from .solver_base import SolverResult
from .tour import Tour
from .tsp import TSPInstance

logger = logging.getLogger(__name__)

StartingTour = Union[Tour, Sequence[int], None]


def _check_real(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise InvalidInput(f"{name} must be a finite number, got {value!r}")
    return float(value)


def _check_count(name: str, value, allow_none: bool = False):
    if value is None and allow_none:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise InvalidInput(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def _check_seed(seed):
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, numbers.Integral)):
        raise InvalidInput(f"rng_seed must be an integer or None, got {seed!r}")


def make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(None if seed is None else int(seed))


@dataclass
class AnnealingConfig:
    initial_temperature: float = 100.0  # must be > 0
    cooling_rate: float = 0.995         # in (0, 1)
    min_temperature: float = 1e-3       # stop at or below this
    max_iterations: int = 100_000       # hard cap, independent of temperature
    rng_seed: Optional[int] = None
    keep_best: bool = False             # return best-seen instead of terminal tour

    def validate(self) -> "AnnealingConfig":
        if _check_real("initial_temperature", self.initial_temperature) <= 0:
            raise InvalidInput(f"initial_temperature must be > 0, got {self.initial_temperature}")
        if not 0.0 < _check_real("cooling_rate", self.cooling_rate) < 1.0:
            raise InvalidInput(f"cooling_rate must be in (0, 1), got {self.cooling_rate}")
        if _check_real("min_temperature", self.min_temperature) < 0:
            raise InvalidInput(f"min_temperature must be >= 0, got {self.min_temperature}")
        _check_count("max_iterations", self.max_iterations)
        _check_seed(self.rng_seed)
        return self


def starting_tour(instance: TSPInstance, initial: StartingTour) -> Tour:
    """Fresh, solver-owned copy of the tour a local search starts from."""
    if initial is None:
        return Tour(instance, NearestNeighbor().solve(instance).tour)
    if isinstance(initial, Tour):
        if initial.instance is not instance:
            # re-validates the permutation against this instance
            return Tour(instance, initial.order)
        return initial.copy()
    return Tour(instance, initial)


class SimulatedAnnealing:
    name = "annealing"

    def __init__(self, config: Optional[AnnealingConfig] = None):
        self.cfg = (config or AnnealingConfig()).validate()

    def solve(self, instance: TSPInstance, initial: StartingTour = None) -> SolverResult:
        cfg = self.cfg.validate()
        tour = starting_tour(instance, initial)
        n = len(tour)
        rng = make_rng(cfg.rng_seed)
        positions = range(n)

        start = time.time()
        initial_cost = tour.cost
        best_order, best_cost = tour.order, initial_cost
        temperature = cfg.initial_temperature
        iteration = 0
        accepted = 0
        history = []

        if n >= 2:
            while temperature > cfg.min_temperature and iteration < cfg.max_iterations:
                i, j = rng.sample(positions, 2)
                delta = tour.swap_delta(i, j)
                if delta <= 0 or rng.random() < math.exp(-delta / temperature):
                    tour.swap(i, j)
                    accepted += 1
                    if cfg.keep_best and tour.cost < best_cost:
                        best_order, best_cost = tour.order, tour.cost
                temperature *= cfg.cooling_rate
                iteration += 1
                history.append(tour.cost)

        if cfg.keep_best and best_cost < tour.refresh_cost():
            tour = Tour(instance, best_order)
        cost = tour.refresh_cost()
        elapsed = time.time() - start

        logger.info(
            "annealing: n=%d iterations=%d accepted=%d T_final=%.3g cost %.6f -> %.6f",
            n, iteration, accepted, temperature, initial_cost, cost,
        )
        return SolverResult(
            algorithm=self.name,
            tour=tour.order,
            cost=cost,
            elapsed_sec=elapsed,
            iterations=iteration,
            final_temperature=temperature,
            accepted_moves=accepted,
            initial_cost=initial_cost,
            history=tuple(history),
        )


def solve_simulated_annealing(instance: TSPInstance, starting: StartingTour = None,
                              config: Optional[AnnealingConfig] = None) -> SolverResult:
    return SimulatedAnnealing(config).solve(instance, initial=starting)

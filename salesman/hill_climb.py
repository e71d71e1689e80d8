"""Swap-based hill climbing: annealing at zero temperature."""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Optional

from .annealing import StartingTour, _check_count, _check_seed, make_rng, starting_tour
from .errors import InvalidInput
from .solver_base import SolverResult
from .tsp import TSPInstance

logger = logging.getLogger(__name__)


@dataclass
class HillClimbConfig:
    max_iterations: int = 10_000
    patience: Optional[int] = None  # stop after this many proposals without improvement
    rng_seed: Optional[int] = None

    def validate(self) -> "HillClimbConfig":
        _check_count("max_iterations", self.max_iterations)
        patience = _check_count("patience", self.patience, allow_none=True)
        if patience == 0:
            raise InvalidInput("patience must be >= 1 when given")
        _check_seed(self.rng_seed)
        return self


class HillClimbing:
    """Propose random pairwise swaps and keep only strict improvements."""

    name = "hill_climb"

    def __init__(self, config: Optional[HillClimbConfig] = None):
        self.cfg = (config or HillClimbConfig()).validate()

    def solve(self, instance: TSPInstance, initial: StartingTour = None) -> SolverResult:
        cfg = self.cfg.validate()
        tour = starting_tour(instance, initial)
        n = len(tour)
        rng = make_rng(cfg.rng_seed)
        positions = range(n)

        start = time.time()
        initial_cost = tour.cost
        iteration = 0
        accepted = 0
        stale = 0
        history = []

        if n >= 2:
            while iteration < cfg.max_iterations:
                if cfg.patience is not None and stale >= cfg.patience:
                    break
                i, j = rng.sample(positions, 2)
                if tour.swap_delta(i, j) < 0:
                    tour.swap(i, j)
                    accepted += 1
                    stale = 0
                else:
                    stale += 1
                iteration += 1
                history.append(tour.cost)

        cost = tour.refresh_cost()
        elapsed = time.time() - start
        logger.info("hill climb: n=%d iterations=%d improvements=%d cost %.6f -> %.6f",
                    n, iteration, accepted, initial_cost, cost)
        return SolverResult(
            algorithm=self.name,
            tour=tour.order,
            cost=cost,
            elapsed_sec=elapsed,
            iterations=iteration,
            accepted_moves=accepted,
            initial_cost=initial_cost,
            history=tuple(history),
        )


def solve_hill_climbing(instance: TSPInstance, starting: StartingTour = None,
                        config: Optional[HillClimbConfig] = None) -> SolverResult:
    return HillClimbing(config).solve(instance, initial=starting)

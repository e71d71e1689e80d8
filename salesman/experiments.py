from __future__ import annotations
import itertools
import logging
from dataclasses import asdict, fields
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .annealing import AnnealingConfig, SimulatedAnnealing
from .brute_force import DEFAULT_MAX_CITIES, BruteForce
from .errors import InvalidInput
from .hill_climb import HillClimbConfig, HillClimbing
from .nearest_neighbor import NearestNeighbor
from .solver_base import Solver, SolverResult
from .tsp import TSPInstance

logger = logging.getLogger(__name__)

SOLVERS = {
    "brute_force": BruteForce,
    "nearest_neighbor": NearestNeighbor,
    "annealing": SimulatedAnnealing,
    "hill_climb": HillClimbing,
}
STOCHASTIC = {"annealing", "hill_climb"}


def make_solver(name: str, seed: Optional[int] = None, **params) -> Solver:
    """Build a solver by registry name; ``seed`` only matters for stochastic ones."""
    key = name.lower()
    if key not in SOLVERS:
        raise InvalidInput(f"Unknown algorithm {name!r}, expected one of {sorted(SOLVERS)}")
    if key == "annealing":
        return SimulatedAnnealing(AnnealingConfig(**{**params, "rng_seed": seed}))
    if key == "hill_climb":
        return HillClimbing(HillClimbConfig(**{**params, "rng_seed": seed}))
    return SOLVERS[key](**params)


def summarize_results(results: Sequence[SolverResult]) -> Dict[str, Any]:
    costs = [r.cost for r in results]
    times = [r.elapsed_sec for r in results]
    return {
        "mean_cost": float(np.mean(costs)),
        "std_cost": float(np.std(costs, ddof=1)) if len(costs) > 1 else 0.0,
        "median_cost": float(np.median(costs)),
        "min_cost": float(np.min(costs)),
        "max_cost": float(np.max(costs)),
        "mean_time": float(np.mean(times)),
        "n_runs": len(results),
    }


def run_repeated_trials(instance: TSPInstance, algo: str, n_runs: int = 10, base_seed: int = 42,
                        **params) -> Tuple[Dict[str, Any], List[SolverResult]]:
    if n_runs < 1:
        raise InvalidInput(f"n_runs must be >= 1, got {n_runs}")
    # deterministic solvers give the same answer every time
    if algo.lower() not in STOCHASTIC:
        n_runs = 1
    results = []
    for r in range(n_runs):
        solver = make_solver(algo, seed=base_seed + r, **params)
        results.append(solver.solve(instance))
    stats = {"algo": algo, **summarize_results(results)}
    logger.info("%s on %s: mean cost %.4f over %d run(s)", algo, instance.name, stats["mean_cost"], n_runs)
    return stats, results


def default_algorithms(instance: TSPInstance) -> List[str]:
    algos = ["nearest_neighbor", "hill_climb", "annealing"]
    if instance.n_cities() <= DEFAULT_MAX_CITIES:
        algos.insert(0, "brute_force")
    return algos


def compare_solvers(instance: TSPInstance, algos: Optional[Sequence[str]] = None, n_runs: int = 5,
                    base_seed: int = 42, params: Optional[Dict[str, Dict[str, Any]]] = None) -> pd.DataFrame:
    """One summary row per algorithm, with the gap to the best mean cost in percent."""
    algos = list(algos) if algos is not None else default_algorithms(instance)
    params = params or {}
    records = []
    for algo in algos:
        stats, _ = run_repeated_trials(instance, algo, n_runs=n_runs, base_seed=base_seed,
                                       **params.get(algo, {}))
        records.append(stats)
    df = pd.DataFrame.from_records(records).set_index("algo")
    best = df["mean_cost"].min()
    df["gap_pct"] = 100.0 * (df["mean_cost"] - best) / best if best > 0 else 0.0
    return df


def run_parameter_sweep(instance: TSPInstance, param_grid: Dict[str, List[Any]],
                        base_config: Optional[AnnealingConfig] = None, n_runs: int = 5,
                        base_seed: int = 100, csv_path: Optional[str] = None) -> pd.DataFrame:
    """Grid search over AnnealingConfig fields."""
    base_config = base_config or AnnealingConfig()
    known = {f.name for f in fields(AnnealingConfig)} - {"rng_seed"}
    unknown = set(param_grid) - known
    if unknown:
        raise InvalidInput(f"Unknown annealing parameters: {sorted(unknown)}")

    keys = sorted(param_grid.keys())
    base = {k: v for k, v in asdict(base_config).items() if k != "rng_seed"}
    rows = []
    for values in itertools.product(*[param_grid[k] for k in keys]):
        cfg_dict = {**base, **dict(zip(keys, values))}
        stats, results = run_repeated_trials(instance, "annealing", n_runs=n_runs,
                                             base_seed=base_seed, **cfg_dict)
        rows.append({**dict(zip(keys, values)), **stats,
                     "mean_iterations": float(np.mean([r.iterations for r in results]))})
    df = pd.DataFrame(rows)
    if csv_path is not None:
        df.to_csv(csv_path, index=False)
    return df

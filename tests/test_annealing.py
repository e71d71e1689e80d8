import numpy as np
import pytest

from salesman import (AnnealingConfig, InvalidInput, SimulatedAnnealing, TSPInstance, Tour,
                      solve_nearest_neighbor, solve_simulated_annealing)

from tests.helpers import independent_cost, is_permutation


def quick(**overrides):
    params = dict(initial_temperature=10.0, cooling_rate=0.999, min_temperature=1e-3,
                  max_iterations=3_000, rng_seed=42)
    params.update(overrides)
    return AnnealingConfig(**params)


def test_result_is_a_valid_tour_with_current_cost(random40):
    res = solve_simulated_annealing(random40, config=quick())
    assert is_permutation(res.tour, 40)
    assert res.cost == pytest.approx(independent_cost(random40, res.tour))
    assert res.algorithm == "annealing"
    assert res.iterations == len(res.history)
    assert res.history[-1] == pytest.approx(res.cost)
    assert 0 <= res.accepted_moves <= res.iterations


def test_fixed_seed_is_reproducible(random40):
    start = solve_nearest_neighbor(random40).tour
    a = solve_simulated_annealing(random40, start, quick(rng_seed=7))
    b = solve_simulated_annealing(random40, start, quick(rng_seed=7))
    assert a.tour == b.tour
    assert a.history == b.history
    assert a.accepted_moves == b.accepted_moves
    assert a.final_temperature == b.final_temperature


def test_solver_object_holds_no_run_state(random40):
    solver = SimulatedAnnealing(quick(rng_seed=3))
    assert solver.solve(random40).history == solver.solve(random40).history


def test_different_seeds_explore_differently(random40):
    a = solve_simulated_annealing(random40, config=quick(rng_seed=1))
    b = solve_simulated_annealing(random40, config=quick(rng_seed=2))
    assert a.history != b.history


def test_stops_at_iteration_cap_before_cooling_finishes(random40):
    res = solve_simulated_annealing(random40, config=quick(cooling_rate=0.999999, max_iterations=250))
    assert res.iterations == 250
    assert res.final_temperature > 1e-3


def test_stops_when_temperature_reaches_floor(random8):
    cfg = quick(initial_temperature=1.0, cooling_rate=0.5, min_temperature=0.1)
    res = solve_simulated_annealing(random8, config=cfg)
    assert res.iterations == 4
    assert res.final_temperature == pytest.approx(0.0625)


def test_zero_iterations_returns_start(random8):
    start = [7, 6, 5, 4, 3, 2, 1, 0]
    res = solve_simulated_annealing(random8, start, quick(max_iterations=0))
    assert res.tour == tuple(start)
    assert res.iterations == 0
    assert res.history == ()


def test_starting_tour_is_not_mutated(random8):
    start = Tour(random8, range(8))
    solve_simulated_annealing(random8, start, quick())
    assert start.order == tuple(range(8))


def test_default_start_is_nearest_neighbour(random8):
    res = solve_simulated_annealing(random8, config=quick(max_iterations=0))
    assert res.tour == solve_nearest_neighbor(random8).tour
    assert res.initial_cost == pytest.approx(res.cost)


def test_keep_best_never_ends_above_start(random40):
    start = list(range(40))
    res = solve_simulated_annealing(random40, start, quick(initial_temperature=50.0, keep_best=True))
    assert res.cost <= res.initial_cost + 1e-9


def test_cold_run_improves_random_start(random40):
    res = solve_simulated_annealing(random40, list(range(40)), quick(initial_temperature=0.01, min_temperature=1e-9,
                                                                      max_iterations=5_000))
    assert res.cost < res.initial_cost


def test_single_city(single_city):
    res = solve_simulated_annealing(single_city, [0], quick())
    assert res.tour == (0,)
    assert res.cost == 0.0
    assert res.iterations == 0


def test_two_cities_stay_valid():
    inst = TSPInstance.from_coords([(0, 0), (0, 2)])
    res = solve_simulated_annealing(inst, config=quick(max_iterations=50))
    assert sorted(res.tour) == [0, 1]
    assert res.cost == pytest.approx(4.0)


@pytest.mark.parametrize("start", [[0, 1, 2], [0, 0, 1, 2, 3, 4, 5, 6], list(range(1, 9))])
def test_rejects_invalid_start(random8, start):
    with pytest.raises(InvalidInput):
        solve_simulated_annealing(random8, start, quick())


def test_tour_from_another_instance_is_revalidated(random8, unit_square):
    with pytest.raises(InvalidInput):
        solve_simulated_annealing(random8, Tour(unit_square, [0, 1, 2, 3]), quick())


@pytest.mark.parametrize("overrides", [
    {"initial_temperature": 0.0},
    {"initial_temperature": -1.0},
    {"initial_temperature": float("nan")},
    {"cooling_rate": 0.0},
    {"cooling_rate": 1.0},
    {"cooling_rate": 1.5},
    {"min_temperature": -0.1},
    {"max_iterations": -1},
    {"max_iterations": 10.5},
    {"rng_seed": "abc"},
])
def test_config_out_of_range(overrides):
    with pytest.raises(InvalidInput):
        SimulatedAnnealing(quick(**overrides))


def test_float_ids_in_start_are_rejected(random8):
    with pytest.raises(InvalidInput):
        solve_simulated_annealing(random8, [0, 1.0, 2, 3, 4, 5, 6, 7], quick())


def test_config_changed_after_construction_is_rechecked(random8):
    cfg = quick()
    solver = SimulatedAnnealing(cfg)
    cfg.cooling_rate = 1.5
    with pytest.raises(InvalidInput):
        solver.solve(random8)


def test_numpy_seed_is_accepted(random8):
    a = solve_simulated_annealing(random8, config=quick(rng_seed=np.int64(4), max_iterations=200))
    b = solve_simulated_annealing(random8, config=quick(rng_seed=4, max_iterations=200))
    assert a.history == b.history

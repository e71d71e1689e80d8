from .errors import TSPError, InvalidInput, ProblemTooLarge
from .tsp import City, TSPInstance, euclidean
from .tour import Tour
from .solver_base import Solver, SolverResult
from .brute_force import BruteForce, MAX_BRUTE_FORCE_CITIES, solve_brute_force
from .nearest_neighbor import NearestNeighbor, solve_nearest_neighbor
from .annealing import AnnealingConfig, SimulatedAnnealing, solve_simulated_annealing
from .hill_climb import HillClimbConfig, HillClimbing, solve_hill_climbing
from .experiments import compare_solvers, make_solver, run_parameter_sweep, run_repeated_trials

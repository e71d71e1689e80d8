# run_experiments.py
import os, json, argparse, logging

from salesman import TSPInstance, MAX_BRUTE_FORCE_CITIES, InvalidInput, ProblemTooLarge
from salesman.experiments import SOLVERS, compare_solvers, default_algorithms, run_parameter_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def build_params(args):
    return {
        "annealing": {
            "initial_temperature": args.t0,
            "cooling_rate": args.cooling,
            "min_temperature": args.tmin,
            "max_iterations": args.iters,
        },
        "hill_climb": {"max_iterations": args.iters},
        "brute_force": {"max_cities": min(args.n, MAX_BRUTE_FORCE_CITIES)},
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare TSP solvers on a random Euclidean instance")
    ap.add_argument("--n", type=int, default=10, help="number of cities")
    ap.add_argument("--square", type=float, default=1.0)
    ap.add_argument("--seed", type=int, default=123, help="instance seed")
    ap.add_argument("--algos", nargs="+", choices=sorted(SOLVERS), default=None)
    ap.add_argument("--runs", type=int, default=5, help="runs per stochastic solver")
    ap.add_argument("--iters", type=int, default=50_000)
    ap.add_argument("--t0", type=float, default=1.0, help="annealing start temperature")
    ap.add_argument("--cooling", type=float, default=0.9995)
    ap.add_argument("--tmin", type=float, default=1e-6)
    ap.add_argument("--sweep", action="store_true", help="also grid-search the cooling schedule")
    ap.add_argument("--outdir", default=OUTDIR)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s | %(name)s | %(message)s")

    try:
        inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square,
                                            name=f"demo{args.n}")
        algos = args.algos or default_algorithms(inst)
        df = compare_solvers(inst, algos, n_runs=args.runs, params=build_params(args))
    except (InvalidInput, ProblemTooLarge) as exc:
        ap.error(str(exc))

    print(json.dumps(df.reset_index().to_dict(orient="records"), indent=2))
    summary_csv = ensure(os.path.join(args.outdir, "results_summary.csv"))
    df.to_csv(summary_csv)
    print("Saved:", summary_csv)

    if args.sweep:
        grid = {"cooling_rate": [0.99, 0.995, 0.999, 0.9995], "initial_temperature": [0.1, 1.0, 10.0]}
        sweep_csv = ensure(os.path.join(args.outdir, "annealing_grid.csv"))
        rows = run_parameter_sweep(inst, grid, n_runs=3, base_seed=500, csv_path=sweep_csv)
        print("Grid search evaluated:", len(rows))
        print("Saved:", sweep_csv)


if __name__ == "__main__":
    main()

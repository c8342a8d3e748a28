# ----------------- main.py -----------------
import argparse
import logging

from atsp_aco.aco.config import load_config
from atsp_aco.aco.engine import solve
from atsp_aco.aco.params import ColonyParams
from atsp_aco.datasets.graphloader import read_atsp

logger = logging.getLogger(__name__)


def build_argparser():
    p = argparse.ArgumentParser(
        prog="atsp-aco",
        description="Ant Colony Optimization for the asymmetric TSP (.atsp input).",
    )
    p.add_argument("file", help="Path to a TSPLIB .atsp file")
    p.add_argument("--variant", choices=["as", "mmas", "acs"], default=None,
                   help="Pheromone update strategy (default from config)")
    p.add_argument("--config", default=None, help="YAML config overriding the defaults")
    p.add_argument("--iterations", type=int, default=None)
    p.add_argument("--ants", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--plot", default=None, help="Save a convergence plot to this path")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None):
    parser = build_argparser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    if args.iterations is not None:
        cfg["iterations"] = args.iterations
    if args.ants is not None:
        cfg["num_ants"] = args.ants
    if args.seed is not None:
        cfg["seed"] = args.seed

    try:
        params = ColonyParams.from_config(cfg, args.variant)
        graph = read_atsp(args.file)
        res = solve(graph, params.variant, iterations=params.iterations, seed=params.seed,
                    alpha=params.alpha, beta=params.beta, rho=params.rho, q=params.q,
                    num_ants=params.num_ants, **params.variant_params)
    except (ValueError, OSError) as e:
        parser.exit(2, f"atsp-aco: error: {e}\n")

    if res.best_tour is None:
        print("No tour computed (0 iterations).")
        return 0

    print("Best tour:", " -> ".join(map(str, res.best_tour + res.best_tour[:1])))
    print(f"Best length: {res.best_length:.3f}")
    print("Iterations:", res.iterations)

    if args.plot:
        from atsp_aco.aco.pheromone_heatmap import convergence_plot
        convergence_plot(res.history, save_path=args.plot)
        logger.info("Saved convergence plot to %s", args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

import logging
from dataclasses import dataclass, field

import numpy as np
from atsp_aco.aco.ant import Ant
from atsp_aco.aco.params import ConfigurationError, validate_common, validate_graph
from atsp_aco.aco.pheromones import PheromoneMatrix
from atsp_aco.aco.strategies import (
    AntColonySystem,
    AntSystem,
    MaxMinAntSystem,
    make_strategy,
)

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    best_tour: list = None
    best_length: float = None
    iterations: int = 0
    history: list = field(default_factory=list)


class Colony:
    def __init__(self, cost_matrix, strategy, alpha=1.0, beta=5.0, rho=0.1, q=1.0,
                 num_ants=10, seed=None, snapshot_pheromones=False):
        validate_common(alpha, beta, rho, q, num_ants)
        self.cost_matrix = validate_graph(cost_matrix)
        self.num_nodes = len(self.cost_matrix)
        self.strategy = strategy
        self.alpha = alpha
        self.beta = beta
        self.q = q
        self.num_ants = num_ants
        self.total_iterations = 0

        # Desirability: scale / d, diagonal unused
        self.heuristic = np.zeros_like(self.cost_matrix, dtype=float)
        off_diag = ~np.eye(self.num_nodes, dtype=bool)
        self.heuristic[off_diag] = strategy.heuristic_scale() / self.cost_matrix[off_diag]

        self.pheromones = PheromoneMatrix(self.num_nodes, rho, strategy.initial_pheromone())

        # One independent stream per ant
        if seed is not None:
            ant_seeds = [seed + i for i in range(num_ants)]
        else:
            ant_seeds = np.random.SeedSequence().spawn(num_ants)
        self.ants = [Ant(self.num_nodes, seed=s) for s in ant_seeds]

        self.best_tour = None
        self.best_length = None
        self.best_length_history = []
        self.snapshot_pheromones = snapshot_pheromones
        self.pheromone_history = []

    def construct_solutions(self):
        q0 = self.strategy.exploitation_probability()
        # Sequential: the ACS local update mutates shared pheromone after each ant.
        # construct_tour resets each ant before building.
        for ant in self.ants:
            ant.construct_tour(self.cost_matrix, self.pheromones.matrix, self.heuristic,
                               self.alpha, self.beta, q0)
            self.strategy.after_ant(self.pheromones, ant)

    def update_best(self):
        improved = False
        for ant in self.ants:
            if self.best_length is None or ant.tour_length < self.best_length:
                self.best_length = ant.tour_length
                self.best_tour = ant.tour.copy()
                improved = True
        return improved

    def run(self, iterations=100):
        if iterations < 0:
            raise ConfigurationError(f"iterations must be >= 0, got {iterations}")
        for _ in range(iterations):
            self.total_iterations += 1
            self.construct_solutions()
            if self.update_best():
                logger.info("Iteration %d: new best length %.3f", self.total_iterations, self.best_length)
            self.strategy.update(self.pheromones, self.ants, self.best_tour, self.best_length, self.q)

            self.best_length_history.append(self.best_length)
            if self.snapshot_pheromones:
                self.pheromone_history.append(self.pheromones.matrix.copy())
            logger.debug("Iteration %d: Best length %.3f", self.total_iterations, self.best_length)
        return self.result()

    def result(self):
        return SolveResult(
            best_tour=None if self.best_tour is None else list(self.best_tour),
            best_length=self.best_length,
            iterations=self.total_iterations,
            history=list(self.best_length_history),
        )


def _run(graph, strategy, alpha, beta, rho, q, m, iterations, seed):
    validate_common(alpha, beta, rho, q, m, iterations)
    colony = Colony(graph, strategy, alpha=alpha, beta=beta, rho=rho, q=q, num_ants=m, seed=seed)
    return colony.run(iterations)


def solve_as(graph, alpha, beta, rho, q, m, iterations, seed=None):
    """Ant System: every ant deposits q / L on its tour."""
    res = _run(graph, AntSystem(), alpha, beta, rho, q, m, iterations, seed)
    return res.best_length, res.best_tour


def solve_mmas(graph, alpha, beta, rho, q, m, tau_max, tau_min, iterations, seed=None):
    """Max-Min Ant System: global-best deposit, trails clamped to [tau_min, tau_max]."""
    res = _run(graph, MaxMinAntSystem(tau_min=tau_min, tau_max=tau_max), alpha, beta, rho, q, m, iterations, seed)
    return res.best_length, res.best_tour


def solve_acs(graph, alpha, beta, rho, q, m, tau0, phi, q0, iterations, seed=None):
    """Ant Colony System: global-best deposit plus a local update after every ant."""
    res = _run(graph, AntColonySystem(tau0=tau0, phi=phi, q0=q0), alpha, beta, rho, q, m, iterations, seed)
    return res.best_length, res.best_tour


def solve(graph, variant="as", iterations=100, seed=None, alpha=1.0, beta=5.0, rho=0.1, q=1.0,
          num_ants=10, **variant_params):
    strategy = make_strategy(variant, **variant_params)
    return _run(graph, strategy, alpha, beta, rho, q, num_ants, iterations, seed)

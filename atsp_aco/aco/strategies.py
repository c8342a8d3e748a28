"""
Pheromone update strategies.

Each strategy decides how the colony seeds its matrices, how ants pick
between exploitation and exploration, and how pheromone is evaporated and
reinforced once a generation finishes. Ant System and Ant Colony System
rely on rho < 1 and ongoing deposits to keep trails positive; only
Max-Min Ant System clamps.
"""
from dataclasses import dataclass

from atsp_aco.aco.params import ConfigurationError, validate_acs, validate_mmas


class PheromoneStrategy:
    name = None

    def initial_pheromone(self):
        return 1.0

    def heuristic_scale(self):
        return 1.0

    def exploitation_probability(self):
        return 0.0

    def after_ant(self, pheromones, ant):
        pass

    def update(self, pheromones, ants, best_tour, best_length, q):
        raise NotImplementedError


@dataclass
class AntSystem(PheromoneStrategy):
    name = "as"

    def update(self, pheromones, ants, best_tour, best_length, q):
        pheromones.evaporate()
        for ant in ants:
            pheromones.deposit(ant.tour, q / ant.tour_length)


@dataclass
class MaxMinAntSystem(PheromoneStrategy):
    tau_min: float = 0.01
    tau_max: float = 1.0
    name = "mmas"

    def __post_init__(self):
        validate_mmas(self.tau_min, self.tau_max)

    def initial_pheromone(self):
        return self.tau_max

    def heuristic_scale(self):
        return self.tau_max

    def update(self, pheromones, ants, best_tour, best_length, q):
        pheromones.evaporate()
        # Deposit only along the global best
        pheromones.deposit(best_tour, q / best_length)
        pheromones.clip(self.tau_min, self.tau_max)


@dataclass
class AntColonySystem(PheromoneStrategy):
    tau0: float = 0.1
    phi: float = 0.1
    q0: float = 0.9
    name = "acs"

    def __post_init__(self):
        validate_acs(self.tau0, self.phi, self.q0)

    def initial_pheromone(self):
        return self.tau0

    def heuristic_scale(self):
        return self.tau0

    def exploitation_probability(self):
        return self.q0

    def after_ant(self, pheromones, ant):
        pheromones.local_update(ant.tour, self.phi, self.tau0)

    def update(self, pheromones, ants, best_tour, best_length, q):
        pheromones.evaporate()
        pheromones.deposit(best_tour, q / best_length)


STRATEGIES = {
    "as": AntSystem,
    "mmas": MaxMinAntSystem,
    "acs": AntColonySystem,
}


def make_strategy(name, **params):
    try:
        cls = STRATEGIES[name]
    except KeyError:
        raise ConfigurationError(f"unknown variant {name!r}, expected one of {sorted(STRATEGIES)}") from None
    try:
        return cls(**params)
    except TypeError as e:
        raise ConfigurationError(f"bad parameters for {name}: {e}") from e

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


class ConfigurationError(ValueError):
    """Raised when a graph or parameter set is rejected before solving."""


@dataclass
class ColonyParams:
    '''
    Shared ACO parameters.

    Attributes:
        alpha: pheromone exponent
        beta: desirability exponent (conventionally alpha < beta)
        rho: evaporation rate, 0 < rho < 1
        q: deposit scale
        num_ants: ant population size (m)
        iterations: number of generations
        seed: base seed; ant i draws from seed + i
        variant: "as", "mmas" or "acs"
        variant_params: tau_min/tau_max for mmas, tau0/phi/q0 for acs
    '''
    alpha: float = 1.0
    beta: float = 5.0
    rho: float = 0.1
    q: float = 1.0
    num_ants: int = 10
    iterations: int = 100
    seed: int | None = None
    variant: str = "as"
    variant_params: dict = field(default_factory=dict)

    def __post_init__(self):
        validate_common(self.alpha, self.beta, self.rho, self.q, self.num_ants, self.iterations)

    @classmethod
    def from_config(cls, cfg, variant=None):
        variant = variant or cfg.get("variant", "as")
        if variant not in ("as", "mmas", "acs"):
            raise ConfigurationError(f"unknown variant {variant!r}")
        seed = cfg.get("seed")
        try:
            kwargs = dict(
                alpha=float(cfg.get("alpha", 1.0)),
                beta=float(cfg.get("beta", 5.0)),
                rho=float(cfg.get("rho", 0.1)),
                q=float(cfg.get("q", 1.0)),
                num_ants=int(cfg.get("num_ants", 10)),
                iterations=int(cfg.get("iterations", 100)),
                seed=None if seed is None else int(seed),
                variant_params=dict(cfg.get(variant) or {}),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"bad config value: {e}") from e
        return cls(variant=variant, **kwargs)


def validate_graph(graph):
    """Checks the cost matrix and returns it as a float array."""
    try:
        matrix = np.asarray(graph, dtype=float)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"graph is not a numeric matrix: {e}") from e

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ConfigurationError(f"graph must be square, got shape {matrix.shape}")
    n = matrix.shape[0]
    if n < 2:
        raise ConfigurationError("graph needs at least 2 nodes")

    off_diag = matrix[~np.eye(n, dtype=bool)]
    if not np.isfinite(off_diag).all():
        raise ConfigurationError("graph contains non-finite edge costs")
    if (off_diag < 0).any():
        raise ConfigurationError("graph contains negative edge costs")
    # zero-cost edges would give infinite desirability
    if (off_diag == 0).any():
        raise ConfigurationError("graph contains zero-cost edges between distinct nodes")
    return matrix


def validate_common(alpha, beta, rho, q, num_ants, iterations=0):
    if num_ants < 1:
        raise ConfigurationError(f"need at least one ant, got {num_ants}")
    if iterations < 0:
        raise ConfigurationError(f"iterations must be >= 0, got {iterations}")
    if not 0 < rho < 1:
        raise ConfigurationError(f"rho must be in (0, 1), got {rho}")
    if q <= 0:
        raise ConfigurationError(f"q must be positive, got {q}")
    if alpha < 0 or beta < 0:
        raise ConfigurationError(f"alpha and beta must be non-negative, got {alpha}, {beta}")


def validate_mmas(tau_min, tau_max):
    if tau_min <= 0:
        raise ConfigurationError(f"tau_min must be positive, got {tau_min}")
    if tau_min > tau_max:
        raise ConfigurationError(f"tau_min ({tau_min}) exceeds tau_max ({tau_max})")


def validate_acs(tau0, phi, q0):
    if tau0 <= 0:
        raise ConfigurationError(f"tau0 must be positive, got {tau0}")
    if not 0 < phi <= 1:
        raise ConfigurationError(f"phi must be in (0, 1], got {phi}")
    if not 0 <= q0 <= 1:
        raise ConfigurationError(f"q0 must be in [0, 1], got {q0}")

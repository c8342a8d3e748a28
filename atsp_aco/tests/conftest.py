import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def cycle_graph():
    """4-node directed cycle 0->1->2->3->0 at cost 1, everything else 100."""
    g = np.full((4, 4), 100.0)
    for i in range(4):
        g[i, (i + 1) % 4] = 1.0
        g[i, i] = 0.0
    return g


@pytest.fixture
def random_graph():
    rng = np.random.default_rng(123)
    g = rng.uniform(1.0, 50.0, size=(8, 8))
    np.fill_diagonal(g, 0.0)
    return g


@pytest.fixture
def tour_length():
    """Closed-tour cost computed independently of Ant."""
    def _length(cost_matrix, tour):
        cost_matrix = np.asarray(cost_matrix, dtype=float)
        tour_np = np.array(tour, dtype=int)
        return float(cost_matrix[tour_np, np.roll(tour_np, -1)].sum())
    return _length

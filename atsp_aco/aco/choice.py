import numpy as np


def random_choice(weights, total, rng):
    """
    Roulette wheel selection over unnormalized weights.
    Returns the smallest index whose prefix sum exceeds u ~ U[0, total).
    """
    if total <= 0:
        raise ValueError("random_choice needs a positive weight sum")

    weights = np.asarray(weights, dtype=float)
    u = total * rng.random()
    cum_weights = np.cumsum(weights)
    idx = int(np.searchsorted(cum_weights, u, side="right"))

    # Round-off can push u past the last prefix sum
    if idx >= len(weights) or weights[idx] <= 0:
        positive = np.flatnonzero(weights > 0)
        if len(positive) == 0:
            raise ValueError("random_choice needs at least one positive weight")
        idx = int(positive[positive <= idx][-1]) if (positive <= idx).any() else int(positive[0])
    return idx

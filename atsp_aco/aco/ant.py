import numpy as np
from atsp_aco.aco.choice import random_choice


class Ant:
    def __init__(self, num_nodes, seed=None):
        self.num_nodes = num_nodes
        self.tour = []
        self.visited = np.zeros(num_nodes, dtype=bool)
        self.tour_length = 0.0
        self.rng = np.random.default_rng(seed)

    @property
    def current_node(self):
        return self.tour[-1] if self.tour else None

    def reset(self):
        self.tour = []
        self.visited.fill(False)
        self.tour_length = 0.0

    def visit(self, node, cost_matrix=None):
        if self.tour and cost_matrix is not None:
            self.tour_length += float(cost_matrix[self.tour[-1], node])
        self.tour.append(int(node))
        self.visited[node] = True

    def is_complete(self):
        return len(self.tour) == self.num_nodes

    def choose_next_node(self, pheromone_matrix, heuristic_matrix, alpha, beta, q0=0.0):
        current = self.current_node
        candidates = np.flatnonzero(~self.visited)

        # Vectorized access
        tau = pheromone_matrix[current, candidates]
        eta = heuristic_matrix[current, candidates]
        with np.errstate(over="ignore", invalid="ignore"):
            scores = (tau ** alpha) * (eta ** beta)
        scores = np.nan_to_num(scores, nan=0.0, posinf=np.inf)

        # Overflowed scores dominate every finite one
        top = np.isposinf(scores)
        if top.any():
            return int(self.rng.choice(candidates[top]))

        with np.errstate(over="ignore"):
            total = scores.sum()
        if total <= 0:
            # underflow, fall back to uniform
            return int(self.rng.choice(candidates))
        if not np.isfinite(total):
            # finite scores whose sum overflows
            scores = scores / scores.max()
            total = scores.sum()

        # Exploitation: greedy pick with probability q0
        if q0 > 0 and self.rng.random() < q0:
            return int(candidates[np.argmax(scores)])

        return int(candidates[random_choice(scores, total, self.rng)])

    def construct_tour(self, cost_matrix, pheromone_matrix, heuristic_matrix, alpha, beta, q0=0.0):
        self.reset()
        self.visit(int(self.rng.integers(self.num_nodes)))

        while not self.is_complete():
            next_node = self.choose_next_node(pheromone_matrix, heuristic_matrix, alpha, beta, q0)
            self.visit(next_node, cost_matrix)

        # close the tour
        self.tour_length += float(cost_matrix[self.tour[-1], self.tour[0]])
        return self

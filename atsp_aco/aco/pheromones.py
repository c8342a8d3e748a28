import numpy as np


def tour_edges(tour):
    tour_arr = np.asarray(tour, dtype=int)
    # closing edge included via roll
    return tour_arr, np.roll(tour_arr, -1)


class PheromoneMatrix:
    def __init__(self, num_nodes, rho, initial=1.0):
        self.num_nodes = num_nodes
        self.rho = rho  # evaporation rate
        self.matrix = np.full((num_nodes, num_nodes), float(initial))

    def evaporate(self):
        self.matrix *= (1 - self.rho)

    def deposit(self, tour, amount):
        edges_a, edges_b = tour_edges(tour)
        # a tour visits each node once, so no edge repeats and fancy-index += is safe
        self.matrix[edges_a, edges_b] += amount

    def clip(self, tau_min, tau_max):
        np.clip(self.matrix, tau_min, tau_max, out=self.matrix)

    def local_update(self, tour, phi, tau0):
        edges_a, edges_b = tour_edges(tour)
        self.matrix[edges_a, edges_b] = (1 - phi) * self.matrix[edges_a, edges_b] + phi * tau0

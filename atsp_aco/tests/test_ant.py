import numpy as np
import pytest

from atsp_aco.aco.ant import Ant


def _matrices(graph, initial=1.0):
    n = len(graph)
    pheromone = np.full((n, n), initial)
    heuristic = np.zeros((n, n))
    mask = ~np.eye(n, dtype=bool)
    heuristic[mask] = 1.0 / graph[mask]
    return pheromone, heuristic


def test_construct_tour_is_a_permutation(random_graph):
    pheromone, heuristic = _matrices(random_graph)
    ant = Ant(len(random_graph), seed=5)
    for _ in range(20):
        ant.construct_tour(random_graph, pheromone, heuristic, alpha=1.0, beta=2.0)
        assert sorted(ant.tour) == list(range(len(random_graph)))
        assert ant.is_complete()


def test_tour_length_includes_closing_edge(random_graph, tour_length):
    pheromone, heuristic = _matrices(random_graph)
    ant = Ant(len(random_graph), seed=11)
    ant.construct_tour(random_graph, pheromone, heuristic, alpha=1.0, beta=2.0)
    assert ant.tour_length == pytest.approx(tour_length(random_graph, ant.tour))


def test_reset_clears_state_in_place(random_graph):
    pheromone, heuristic = _matrices(random_graph)
    ant = Ant(len(random_graph), seed=1)
    visited = ant.visited
    ant.construct_tour(random_graph, pheromone, heuristic, alpha=1.0, beta=2.0)
    ant.reset()
    assert ant.tour == []
    assert ant.tour_length == 0.0
    assert not ant.visited.any()
    assert ant.visited is visited


def test_greedy_choice_when_q0_is_one(cycle_graph):
    pheromone, heuristic = _matrices(cycle_graph)
    ant = Ant(4, seed=0)
    ant.visit(0)
    assert ant.choose_next_node(pheromone, heuristic, alpha=1.0, beta=1.0, q0=1.0) == 1


def test_all_zero_scores_fall_back_to_uniform():
    n = 4
    pheromone = np.zeros((n, n))
    heuristic = np.ones((n, n))
    ant = Ant(n, seed=3)
    ant.visit(0)
    picks = {ant.choose_next_node(pheromone, heuristic, alpha=1.0, beta=1.0) for _ in range(200)}
    assert picks == {1, 2, 3}


def test_same_seed_same_tour(random_graph):
    pheromone, heuristic = _matrices(random_graph)
    a = Ant(len(random_graph), seed=99).construct_tour(random_graph, pheromone, heuristic, 1.0, 2.0)
    b = Ant(len(random_graph), seed=99).construct_tour(random_graph, pheromone, heuristic, 1.0, 2.0)
    assert a.tour == b.tour
    assert a.tour_length == b.tour_length


@pytest.mark.parametrize("q0", [0.0, 1.0])
def test_overflowing_score_wins_the_choice(q0):
    # 1e3 ** 120 overflows to inf; that node must still be preferred
    n = 6
    pheromone = np.ones((n, n))
    heuristic = np.ones((n, n))
    heuristic[0, 3] = 1e3
    picks = set()
    for seed in range(50):
        ant = Ant(n, seed=seed)
        ant.visit(0)
        picks.add(ant.choose_next_node(pheromone, heuristic, alpha=1.0, beta=120.0, q0=q0))
    assert picks == {3}


def test_overflowing_sum_keeps_roulette_bias():
    # each score is finite but their sum is not
    n = 5
    pheromone = np.ones((n, n))
    heuristic = np.full((n, n), 1e-3)
    heuristic[0, 1] = heuristic[0, 2] = 1e154
    picks = set()
    for seed in range(50):
        ant = Ant(n, seed=seed)
        ant.visit(0)
        picks.add(ant.choose_next_node(pheromone, heuristic, alpha=1.0, beta=2.0))
    assert picks == {1, 2}


def test_reused_ant_starts_each_tour_fresh(random_graph, tour_length):
    pheromone, heuristic = _matrices(random_graph)
    ant = Ant(len(random_graph), seed=8)
    for _ in range(3):
        ant.construct_tour(random_graph, pheromone, heuristic, alpha=1.0, beta=2.0)
        assert len(ant.tour) == len(random_graph)
        assert ant.tour_length == pytest.approx(tour_length(random_graph, ant.tour))

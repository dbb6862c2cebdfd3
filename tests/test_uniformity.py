"""Statistical checks that the random-walk generators sample spanning trees uniformly."""
from collections import Counter

import pytest

from maze.algorithms import aldous_broder, binary_tree, wilsons
from maze_rng import MazeRNG
from maze_test_utils import make_grid, tree_key

# Number of spanning trees of the 3x3 lattice graph
SPANNING_TREES_3X3 = 192


def _sample(generator, width, height, runs, seed):
    rng = MazeRNG(seed)
    counts = Counter()
    for _ in range(runs):
        grid = make_grid(width, height)
        generator(grid, rng)
        counts[tree_key(grid)] += 1
    return counts


def _chi_square(counts, categories, runs):
    expected = runs / categories
    observed = list(counts.values()) + [0] * (categories - len(counts))
    return sum((o - expected) ** 2 / expected for o in observed)


@pytest.mark.parametrize("generator", [aldous_broder, wilsons])
def test_two_by_two_trees_equally_likely(generator):
    runs = 2000
    counts = _sample(generator, 2, 2, runs, seed=17)
    assert len(counts) == 4
    # each tree expects 500 with a standard deviation of about 19
    assert all(400 < c < 600 for c in counts.values())


@pytest.mark.parametrize("generator", [aldous_broder, wilsons])
def test_three_by_three_distribution_is_close_to_uniform(generator):
    runs = SPANNING_TREES_3X3 * 30
    counts = _sample(generator, 3, 3, runs, seed=2718)
    assert len(counts) == SPANNING_TREES_3X3
    # 191 degrees of freedom: mean 191, standard deviation about 19.5
    assert _chi_square(counts, SPANNING_TREES_3X3, runs) < 320
    assert max(counts.values()) < 30 * 2.5


def test_binary_tree_is_biased():
    counts = _sample(binary_tree, 3, 3, 2000, seed=5)
    # only the four cells off the northern row and eastern column get a choice
    assert len(counts) == 16

from __future__ import annotations

"""Seeded random source for maze generation.

Every algorithm receives a :class:`MazeRNG` explicitly instead of reaching for
module-level random state, so a maze is reproducible from its seed:

* ``initial_seed`` always holds the seed actually used, including the one drawn
  when the caller passes ``None``.
* ``get_state`` / ``set_state`` round-trip the numpy bit generator state.
"""

import random
from typing import Any, Dict, List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class MazeRNG:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.initial_seed = seed if seed is not None else random.randint(0, 2**32 - 1)
        self.rng = np.random.default_rng(self.initial_seed)

    def get_int(self, a: int, b: int) -> int:
        """Return an integer in the inclusive range ``[a, b]``."""
        if a > b:
            raise ValueError("a <= b")
        return int(self.rng.integers(a, b + 1))

    def get_float(self, a: float = 0.0, b: float = 1.0) -> float:
        if a > b:
            raise ValueError("a <= b")
        return a + (b - a) * float(self.rng.random())

    def get_bool(self, probability: float = 0.5) -> bool:
        """Return ``True`` with the given probability."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability out of range")
        return self.get_float() < probability

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of *seq*."""
        if not seq:
            raise ValueError("cannot choose from an empty sequence")
        return seq[self.get_int(0, len(seq) - 1)]

    def shuffle(self, seq: List[Any]) -> None:
        """Shuffle a list in place."""
        self.rng.shuffle(seq)

    def get_state(self) -> Dict[str, Any]:
        return {
            "random_state": self.rng.bit_generator.state,
            "initial_seed": self.initial_seed,
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        if "random_state" in state:
            self.rng.bit_generator.state = state["random_state"]
        if "initial_seed" in state:
            self.initial_seed = state["initial_seed"]


__all__ = ["MazeRNG"]

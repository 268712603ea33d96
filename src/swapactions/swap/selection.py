"""Token selection policies for random swap actions."""

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence


class SelectionPolicy(ABC):
    """Picks one candidate out of a non-empty sequence."""

    @abstractmethod
    def choose(self, candidates: Sequence[str]) -> str:
        pass


class RandomChoice(SelectionPolicy):
    """Uniform random pick. Pass a seeded Random for reproducible picks."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def choose(self, candidates: Sequence[str]) -> str:
        if not candidates:
            raise ValueError("No candidates to choose from")
        return self._rng.choice(list(candidates))


class FixedChoice(SelectionPolicy):
    """Always picks the same candidate (by value, or by index if value is None)."""

    def __init__(self, value: Optional[str] = None, index: int = 0):
        self.value = value
        self.index = index

    def choose(self, candidates: Sequence[str]) -> str:
        if not candidates:
            raise ValueError("No candidates to choose from")
        if self.value is not None:
            if self.value not in candidates:
                raise ValueError(f"{self.value} is not one of {list(candidates)}")
            return self.value
        return candidates[self.index % len(candidates)]

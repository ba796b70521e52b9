import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


class DecisionSource(ABC):
    """
    The only non-deterministic input of the generators: coin flips and uniform picks.
    Passed into every generator so tests can seed or script it.
    """

    @abstractmethod
    def flip(self) -> bool:
        """Fair coin. True is heads."""

    @abstractmethod
    def pick(self, count: int) -> int:
        """Uniform index in [0, count)."""

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.pick(len(items))]


class RandomDecisions(DecisionSource):
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def flip(self) -> bool:
        return self.rng.random() < 0.5

    def pick(self, count: int) -> int:
        return self.rng.randrange(count)


class ScriptedDecisions(DecisionSource):
    """Replays fixed answers in order. Raises once a script runs dry."""

    def __init__(self, flips: Iterable[bool] = (), picks: Iterable[int] = ()):
        self._flips = iter(flips)
        self._picks = iter(picks)

    def flip(self) -> bool:
        try:
            return next(self._flips)
        except StopIteration:
            raise RuntimeError("Scripted coin flips exhausted") from None

    def pick(self, count: int) -> int:
        try:
            value = next(self._picks)
        except StopIteration:
            raise RuntimeError("Scripted picks exhausted") from None
        if not 0 <= value < count:
            raise ValueError(f"Scripted pick {value} outside [0, {count})")
        return value

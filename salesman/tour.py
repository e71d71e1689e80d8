from __future__ import annotations
import numbers
import random
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidInput
from .tsp import TSPInstance


class Tour:
    """A closed tour over every city of one instance.

    The order is a permutation of ``0..N-1``; the cost includes the edge from
    the last city back to the first. Cost is computed lazily and then kept in
    step with :meth:`swap`, which only touches the (at most four) edges
    adjacent to the swapped positions.
    """

    def __init__(self, instance: TSPInstance, order: Iterable[int]):
        order = list(order)
        for k in order:
            if isinstance(k, bool) or not isinstance(k, numbers.Integral):
                raise InvalidInput(f"city ids must be integers, got {k!r}")
        order = [int(k) for k in order]
        n = instance.n_cities()
        if len(order) != n or sorted(order) != list(range(n)):
            raise InvalidInput(f"tour must be a permutation of 0..{n - 1}, got {order!r}")
        self.instance = instance
        self._D = instance.matrix
        self._order: List[int] = order
        self._cost: Optional[float] = None

    @classmethod
    def random(cls, instance: TSPInstance, rng: random.Random) -> "Tour":
        order = list(range(instance.n_cities()))
        rng.shuffle(order)
        return cls(instance, order)

    @property
    def order(self) -> Tuple[int, ...]:
        return tuple(self._order)

    @property
    def cost(self) -> float:
        if self._cost is None:
            self._cost = self.instance.tour_length(self._order)
        return self._cost

    def refresh_cost(self) -> float:
        """Recompute the cost from scratch, dropping accumulated rounding."""
        self._cost = None
        return self.cost

    def swap_delta(self, i: int, j: int) -> float:
        """Cost change of swapping the cities at positions i and j."""
        n = len(self._order)
        if i == j:
            return 0.0
        order, D = self._order, self._D
        edges = {(i - 1) % n, i, (j - 1) % n, j}

        def city_at(k):
            if k == i:
                return order[j]
            if k == j:
                return order[i]
            return order[k]

        before = 0.0
        after = 0.0
        for k in edges:
            nxt = (k + 1) % n
            before += D[order[k]][order[nxt]]
            after += D[city_at(k)][city_at(nxt)]
        return after - before

    def swap(self, i: int, j: int) -> float:
        """Swap positions i and j in place and return the cost delta."""
        delta = self.swap_delta(i, j)
        self._order[i], self._order[j] = self._order[j], self._order[i]
        if self._cost is not None:
            self._cost += delta
        return delta

    def copy(self) -> "Tour":
        other = Tour.__new__(Tour)
        other.instance = self.instance
        other._D = self._D
        other._order = list(self._order)
        other._cost = self._cost
        return other

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __getitem__(self, k: int) -> int:
        return self._order[k]

    def __repr__(self) -> str:
        return f"Tour(order={self._order!r}, cost={self.cost:.4f})"

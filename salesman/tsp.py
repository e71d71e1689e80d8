from __future__ import annotations
import math
import numbers
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidInput


@dataclass(frozen=True)
class City:
    id: int
    x: float
    y: float

    def __post_init__(self):
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidInput(f"city {self.id}: coordinate {value!r} is not a number")
            if not math.isfinite(value):
                raise InvalidInput(f"city {self.id}: coordinate {value!r} is not finite")


def euclidean(a: City, b: City) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


@dataclass
class TSPInstance:
    """A read-only set of cities plus their symmetric distance table.

    The table is computed once at construction and stored as nested tuples,
    so solvers can index ``matrix[i][j]`` in their inner loops.
    """
    coords: List[Tuple[float, float]]
    name: str = "euclidean_tsp"
    cities: Tuple[City, ...] = field(init=False, repr=False)
    matrix: Tuple[Tuple[float, ...], ...] = field(init=False, repr=False)

    def __post_init__(self):
        if self.coords is None or len(self.coords) == 0:
            raise InvalidInput("an instance needs at least one city")
        cities = []
        for idx, pair in enumerate(self.coords):
            try:
                x, y = pair
            except (TypeError, ValueError):
                raise InvalidInput(f"city {idx}: expected an (x, y) pair, got {pair!r}") from None
            cities.append(City(idx, x, y))
        self.coords = [(c.x, c.y) for c in cities]
        self.cities = tuple(cities)

        n = len(cities)
        D = [[0.0] * n for _ in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                d = euclidean(cities[i], cities[j])
                if not math.isfinite(d):
                    raise InvalidInput(f"distance between cities {i} and {j} overflows")
                D[i][j] = D[j][i] = d
        self.matrix = tuple(tuple(row) for row in D)

    @classmethod
    def from_coords(cls, coords: Sequence[Tuple[float, float]], name: str = "euclidean_tsp") -> "TSPInstance":
        return cls(coords=list(coords), name=name)

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 1.0, name: str = "random_euclidean"):
        if n < 1:
            raise InvalidInput(f"n must be >= 1, got {n}")
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return TSPInstance(coords=coords, name=name)

    def n_cities(self) -> int:
        return len(self.cities)

    def distance(self, i: int, j: int) -> float:
        return self.matrix[i][j]

    def distance_matrix(self) -> List[List[float]]:
        return [list(row) for row in self.matrix]

    def tour_length(self, tour: Sequence[int]) -> float:
        n = len(tour)
        D = self.matrix
        dist = 0.0
        for k in range(n):
            i, j = tour[k], tour[(k + 1) % n]
            dist += D[i][j]
        return dist

import math


def independent_cost(instance, tour):
    n = len(tour)
    total = 0.0
    for k in range(n):
        (x1, y1), (x2, y2) = instance.coords[tour[k]], instance.coords[tour[(k + 1) % n]]
        total += math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)
    return total


def is_permutation(tour, n):
    return len(tour) == n and set(tour) == set(range(n))

"""Graph algorithms: garden colouring, flood fill and finding the town judge."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

FLOWER_TYPES = (1, 2, 3, 4)


def _check_member(value: int, n: int, what: str) -> None:
    if not 1 <= value <= n:
        raise ValueError(f"{what} {value} is not between 1 and {n}")


def garden_no_adj(n: int, paths: Iterable[Sequence[int]]) -> list[int]:
    """Give each of n gardens a flower type 1-4 so that joined gardens differ.

    Gardens are numbered from 1 in paths. Types are chosen greedily, lowest
    first, visiting gardens depth-first along the paths. Raises ValueError if
    a garden is left with no free type.
    """
    if n < 0:
        raise ValueError("the number of gardens must not be negative")
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for a, b in paths:
        _check_member(a, n, "garden")
        _check_member(b, n, "garden")
        neighbours[a - 1].append(b - 1)
        neighbours[b - 1].append(a - 1)

    flowers = [0] * n
    for start in range(n):
        stack = [start]
        while stack:
            garden = stack.pop()
            if flowers[garden]:
                continue
            used = {flowers[other] for other in neighbours[garden]}
            choice = next((kind for kind in FLOWER_TYPES if kind not in used), None)
            if choice is None:
                raise ValueError(f"no flower type is left for garden {garden + 1}")
            flowers[garden] = choice
            stack.extend(reversed(neighbours[garden]))
    return flowers


def _inside(image: Sequence[Sequence[Any]], r: int, c: int) -> bool:
    return 0 <= r < len(image) and 0 <= c < len(image[r])


def flood_fill(
    image: list[list[Any]], sr: int, sc: int, new_color: Any
) -> list[list[Any]]:
    """Recolour, in place, the 4-connected region of the colour at (sr, sc)."""
    if not _inside(image, sr, sc):
        raise IndexError(f"pixel ({sr}, {sc}) is outside the image")
    old_color = image[sr][sc]
    if old_color == new_color:
        return image
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        if not _inside(image, r, c) or image[r][c] != old_color:
            continue
        image[r][c] = new_color
        stack.extend(((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)))
    return image


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """The person, numbered 1 to n, trusted by n - 1 others and trusting nobody.

    Returns -1 if there is no such person.
    """
    trusts_someone: set[int] = set()
    trusted_by: Counter[int] = Counter()
    for truster, trustee in trust:
        _check_member(truster, n, "person")
        _check_member(trustee, n, "person")
        trusts_someone.add(truster)
        trusted_by[trustee] += 1
    for person in range(1, n + 1):
        votes = 0 if person in trusts_someone else trusted_by[person]
        if votes == n - 1:
            return person
    return -1
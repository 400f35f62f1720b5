import itertools

import pytest

from algokit.graphs import find_judge, flood_fill, garden_no_adj


def _assert_proper(n, paths, flowers):
    assert len(flowers) == n
    assert all(kind in (1, 2, 3, 4) for kind in flowers)
    for a, b in paths:
        assert flowers[a - 1] != flowers[b - 1]


@pytest.mark.parametrize("n", [3, 4, 5, 8])
def test_garden_cycle(n):
    paths = [[i, i % n + 1] for i in range(1, n + 1)]
    _assert_proper(n, paths, garden_no_adj(n, paths))


def test_garden_complete_four():
    paths = [list(pair) for pair in itertools.combinations(range(1, 5), 2)]
    flowers = garden_no_adj(4, paths)
    _assert_proper(4, paths, flowers)
    assert sorted(flowers) == [1, 2, 3, 4]


def test_garden_cube_graph():
    paths = [
        [1, 2], [2, 3], [3, 4], [4, 1],
        [5, 6], [6, 7], [7, 8], [8, 5],
        [1, 5], [2, 6], [3, 7], [4, 8],
    ]
    _assert_proper(8, paths, garden_no_adj(8, paths))


def test_garden_without_paths_uses_first_type():
    assert garden_no_adj(3, []) == [1, 1, 1]


def test_garden_complete_five_has_no_colouring():
    paths = [list(pair) for pair in itertools.combinations(range(1, 6), 2)]
    with pytest.raises(ValueError):
        garden_no_adj(5, paths)


@pytest.mark.parametrize("path", [[0, 1], [1, 4]])
def test_garden_number_out_of_range(path):
    with pytest.raises(ValueError):
        garden_no_adj(3, [path])


def test_flood_fill_recolours_connected_region():
    image = [[1, 1, 2], [1, 2, 2], [1, 1, 2]]
    result = flood_fill(image, 0, 0, 9)
    assert result is image
    assert all(
        cell in (9, 2) for row in result for cell in row
    )
    assert sum(row.count(2) for row in result) == 4


def test_flood_fill_does_not_cross_diagonals():
    assert flood_fill([[1, 0], [0, 1]], 0, 0, 9) == [[9, 0], [0, 1]]


def test_flood_fill_same_colour_leaves_image():
    image = [[3, 3], [3, 4]]
    assert flood_fill(image, 0, 0, 3) == [[3, 3], [3, 4]]


def test_flood_fill_ragged_rows():
    image = [[5], [5, 5, 5], [5, 5]]
    assert flood_fill(image, 1, 2, 7) == [[7], [7, 7, 7], [7, 7]]


@pytest.mark.parametrize("sr,sc", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_flood_fill_start_outside(sr, sc):
    with pytest.raises(IndexError):
        flood_fill([[1, 1], [1, 1]], sr, sc, 2)


@pytest.mark.parametrize("judge", [1, 3, 5])
def test_find_judge_star(judge):
    trust = [[person, judge] for person in range(1, 6) if person != judge]
    assert find_judge(5, trust) == judge


def test_judge_who_trusts_someone_is_no_judge():
    trust = [[1, 3], [2, 3], [3, 1]]
    assert find_judge(3, trust) == -1


def test_judge_missing_a_vote():
    assert find_judge(4, [[1, 4], [2, 4]]) == -1


def test_single_person_is_judge():
    assert find_judge(1, []) == 1


def test_find_judge_person_out_of_range():
    with pytest.raises(ValueError):
        find_judge(2, [[1, 3]])
import pytest

from dsakit.graphs import (
    DisjointSet,
    accounts_merge,
    ladder_length,
    make_connected,
    network_delay_time,
    remove_stones,
)


def test_disjoint_set_starts_separate():
    ds = DisjointSet(4)
    assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_union_by_rank_joins_sets():
    ds = DisjointSet(5)
    ds.union_by_rank(0, 1)
    ds.union_by_rank(3, 4)
    ds.union_by_rank(1, 4)
    assert ds.find(0) == ds.find(3)
    assert ds.find(2) == 2
    assert ds.find(2) != ds.find(0)


def test_union_by_size_joins_sets():
    ds = DisjointSet(6)
    ds.union_by_size(0, 1)
    ds.union_by_size(1, 2)
    ds.union_by_size(4, 5)
    assert ds.find(0) == ds.find(2)
    assert ds.find(4) == ds.find(5)
    assert ds.find(0) != ds.find(5)


def test_union_is_idempotent():
    ds = DisjointSet(3)
    ds.union_by_rank(0, 1)
    root = ds.find(0)
    ds.union_by_rank(1, 0)
    assert ds.find(1) == root


def test_find_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(3).find(3)


def test_ladder_example():
    words = ["hot", "dot", "dog", "lot", "log", "cog"]
    assert ladder_length("hit", "cog", words) == 5


def test_ladder_end_missing():
    words = ["hot", "dot", "dog", "lot", "log"]
    assert ladder_length("hit", "cog", words) == 0


def test_ladder_same_word():
    assert ladder_length("abc", "abc", []) == 1


def test_ladder_single_step():
    assert ladder_length("a", "c", ["a", "b", "c"]) == 2


def test_accounts_merge_example():
    accounts = [
        ["John", "johnsmith@example.com", "john_newyork@example.com"],
        ["John", "johnsmith@example.com", "john00@example.com"],
        ["Mary", "mary@example.com"],
        ["John", "johnnybravo@example.com"],
    ]
    merged = accounts_merge(accounts)
    assert sorted(merged) == sorted(
        [
            ["John", "john00@example.com", "john_newyork@example.com", "johnsmith@example.com"],
            ["Mary", "mary@example.com"],
            ["John", "johnnybravo@example.com"],
        ]
    )


def test_accounts_merge_invariants():
    accounts = [
        ["Ann", "c@example.com", "a@example.com"],
        ["Ann", "b@example.com"],
        ["Ann", "a@example.com", "b@example.com"],
        ["Bob", "z@example.com"],
    ]
    merged = accounts_merge(accounts)
    all_emails = [email for entry in merged for email in entry[1:]]
    assert sorted(all_emails) == sorted({e for acc in accounts for e in acc[1:]})
    assert len(all_emails) == len(set(all_emails))
    for entry in merged:
        assert entry[1:] == sorted(entry[1:])
    assert len(merged) == 2


def test_network_delay_example():
    assert network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2) == 2


def test_network_delay_unreachable():
    assert network_delay_time([[1, 2, 1]], 2, 2) == -1


def test_network_delay_single_node():
    assert network_delay_time([], 1, 1) == 0


def test_network_delay_prefers_shorter_route():
    direct = network_delay_time([[1, 2, 10]], 2, 1)
    with_detour = network_delay_time([[1, 2, 10], [1, 3, 1], [3, 2, 1]], 3, 1)
    assert with_detour < direct
    assert direct == 10


def test_network_delay_bad_source():
    with pytest.raises(ValueError):
        network_delay_time([], 3, 4)


def test_remove_stones_example():
    stones = [[0, 0], [0, 1], [1, 0], [1, 2], [2, 1], [2, 2]]
    assert remove_stones(stones) == 5


def test_remove_stones_single_and_empty():
    assert remove_stones([[0, 0]]) == 0
    assert remove_stones([]) == 0


def test_remove_stones_same_row():
    stones = [[3, col] for col in range(7)]
    assert remove_stones(stones) == len(stones) - 1


def test_remove_stones_no_shared_lines():
    stones = [[i, i] for i in range(5)]
    assert remove_stones(stones) == 0


def test_make_connected_example():
    assert make_connected(4, [[0, 1], [0, 2], [1, 2]]) == 1


def test_make_connected_too_few_cables():
    assert make_connected(6, [[0, 1], [0, 2], [0, 3], [1, 2]]) == -1


def test_make_connected_already_connected():
    assert make_connected(3, [[0, 1], [1, 2]]) == 0


def test_make_connected_isolated_nodes_need_cables():
    n = 5
    connections = [[0, 1], [1, 2], [2, 0], [3, 4], [3, 4], [0, 2]]
    assert make_connected(n, connections) == 1
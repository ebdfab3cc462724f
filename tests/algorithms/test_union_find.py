import pytest

from graphsuite.algorithms.union_find import UnionFind


def test_singletons():
    uf = UnionFind(range(4))
    assert len(uf) == 4
    assert uf.set_count == 4
    assert all(uf.find(i) == i for i in range(4))
    assert uf.set_size(2) == 1


def test_union_and_connected():
    uf = UnionFind("abcde")
    assert uf.union_sets("a", "b")
    assert uf.union_sets("c", "d")
    assert uf.union_sets("b", "d")
    assert not uf.union_sets("a", "c")
    assert uf.connected("a", "d")
    assert not uf.connected("a", "e")
    assert uf.set_count == 2
    assert uf.set_size("c") == 4
    assert uf.set_size("e") == 1


def test_smaller_set_goes_under_larger():
    uf = UnionFind(range(4))
    uf.union_sets(0, 1)
    uf.union_sets(0, 2)
    big_root = uf.find(0)
    uf.union_sets(3, 0)
    assert uf.find(3) == big_root


def test_path_compression_points_to_root():
    uf = UnionFind(range(6))
    for i in range(5):
        uf.union_sets(i + 1, i)
    root = uf.find(5)
    for i in range(6):
        assert uf._parent[i] == root  # pylint: disable=protected-access


def test_add_is_idempotent():
    uf = UnionFind([1])
    uf.add(2)
    uf.union_sets(1, 2)
    uf.add(2)
    assert uf.set_count == 1
    assert 2 in uf
    assert 3 not in uf


def test_unknown_item_raises_key_error():
    uf = UnionFind([1])
    with pytest.raises(KeyError):
        uf.find(9)
    with pytest.raises(KeyError):
        uf.union_sets(1, 9)


def test_find_is_idempotent_after_unions():
    uf = UnionFind(range(8))
    for a, b in [(0, 1), (2, 3), (1, 3), (5, 6)]:
        uf.union_sets(a, b)
        assert uf.find(a) == uf.find(b)
    for item in range(8):
        assert uf.find(item) == uf.find(uf.find(item))
    assert uf.set_count == 4

import doctest
from typing import List

import prefixtree.set
from prefixtree import PrefixSet


def test_doctests():
    failed, _ = doctest.testmod(prefixtree.set)
    assert failed == 0


def test_simple(subtests):
    prefix_set = PrefixSet()

    with subtests.test("blank object"):
        assert len(prefix_set) == 0
        assert prefix_set.is_empty()
        assert not prefix_set.contains("foo")

    with subtests.test("insert"):
        assert prefix_set.insert("foo")
        assert len(prefix_set) == 1
        assert not prefix_set.is_empty()
        assert prefix_set.contains("foo")
        assert not prefix_set.contains("fo")

    with subtests.test("insert again"):
        assert not prefix_set.insert("foo")
        assert len(prefix_set) == 1

    with subtests.test("clear"):
        prefix_set.clear()
        assert prefix_set.is_empty()
        assert "foo" not in prefix_set


def test_insert_reports_new_keys(words: List[str]):
    prefix_set = PrefixSet()
    inserted = set()

    for word in words:
        assert prefix_set.insert(word) is (word not in inserted)
        inserted.add(word)

    assert len(prefix_set) == len(inserted)
    for word in inserted:
        assert word in prefix_set

    assert set(prefix_set) == inserted


def test_iteration_order():
    prefix_set = PrefixSet(["foo", "bar", "fobar", "quux"])
    assert list(prefix_set) == ["foo", "fobar", "bar", "quux"]
    assert list(prefix_set.iter()) == list(prefix_set)
    assert len(prefix_set.iter()) == 4


def test_bulk_construction():
    keys = [b"foo", b"bar", b"foo"]
    prefix_set = PrefixSet.from_iterable(keys)

    assert len(prefix_set) == 2
    assert prefix_set == PrefixSet(keys)
    assert prefix_set != PrefixSet([b"foo"])
    assert prefix_set != {b"foo", b"bar"}


def test_add_update():
    prefix_set = PrefixSet()
    prefix_set.add("foo")
    prefix_set.add("foo")
    prefix_set.update(["bar", "baz"])

    assert len(prefix_set) == 3
    assert prefix_set.node_count() == 5
    assert prefix_set.depth() == 2


def test_empty_key():
    prefix_set = PrefixSet()
    assert prefix_set.insert("")
    assert "" in prefix_set
    assert list(prefix_set) == [""]


def test_repr():
    assert repr(PrefixSet(["foo", "bar"])) == "PrefixSet({'foo', 'bar'})"

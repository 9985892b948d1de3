import copy
import itertools
import pickle

import pytest

from gpartition import Grouping, group_by, groupings


def test_grouping_is_keyed_tuple():
    g = Grouping("k", [1, 2, 3])
    assert g.key == "k"
    assert g == (1, 2, 3)
    assert len(g) == 3
    assert list(g) == [1, 2, 3]
    assert repr(g) == "Grouping('k', (1, 2, 3))"


def test_grouping_empty():
    g = Grouping(None)
    assert g.key is None
    assert g == ()


@pytest.mark.parametrize("clone", (copy.copy, copy.deepcopy,
                                   lambda g: pickle.loads(pickle.dumps(g))))
def test_grouping_copy_keeps_key(clone):
    g = Grouping(("a", 1), ["x", "y"])
    g2 = clone(g)
    assert type(g2) is Grouping
    assert g2.key == ("a", 1)
    assert g2 == ("x", "y")


def test_group_by_first_appearance_order():
    words = ("ralph", "at", "randomly", "an", "estuary", "rankled")
    res = group_by(words, lambda w: w[0])
    assert [g.key for g in res] == ["r", "a", "e"]
    assert res[0] == ("ralph", "randomly", "rankled")
    assert res[1] == ("at", "an")
    assert res[2] == ("estuary",)


def test_group_by_empty():
    assert group_by([], lambda x: x) == []


def test_group_by_not_iterable():
    with pytest.raises(TypeError):
        group_by(5, lambda x: x)


def test_groupings_from_itertools_groupby():
    res = groupings(itertools.groupby("aabccc"))
    assert [g.key for g in res] == ["a", "b", "c"]
    assert [len(g) for g in res] == [2, 1, 3]


def test_groupings_from_dict():
    res = groupings({1: "xy", 2: ""}.items())
    assert res[0].key == 1 and res[0] == ("x", "y")
    assert res[1].key == 2 and res[1] == ()

import dataclasses

import pytest

from metaset.sets import MetaSet, exclude, include


def test_include_is_finite():
    assert include([1, 2]).is_finite() is True


def test_exclude_is_not_finite():
    assert exclude([1, 2]).is_finite() is False


def test_items_are_deduplicated_into_frozenset():
    result = include([1, 2, 2, 1])
    assert result.items == frozenset({1, 2})
    assert isinstance(result.items, frozenset)


def test_constructor_converts_iterables():
    assert MetaSet([3, 4]).items == frozenset({3, 4})


def test_membership_of_include():
    result = include(["a", "b"])
    assert "a" in result
    assert "z" not in result


def test_membership_of_exclude():
    result = exclude(["a", "b"])
    assert "a" not in result
    assert "z" in result


def test_equality_ignores_order():
    assert include([1, 2, 3]) == include([3, 2, 1])


def test_include_and_exclude_of_same_items_differ():
    items = [1, 2]
    assert include(items).items == exclude(items).items
    assert (include(items) == exclude(items)) is False


def test_metasets_are_hashable():
    assert len({include([1]), include([1]), exclude([1])}) == 2


def test_metaset_is_immutable():
    result = include([1])
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.excluded = True
    assert result.is_finite() is True
    assert result == include([1])
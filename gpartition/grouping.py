from typing import Generic, Iterable

from gpartition.gptypes import E, GroupKeyfunc, HashableT, K, T


class Grouping(tuple, Generic[K, E]):
    """
    Immutable keyed group: a tuple of elements that also carries the key
    they were grouped under. Compares equal to a plain tuple of the same
    elements; the key does not take part in equality.
    """

    key: K

    def __new__(cls, key: K, elements: Iterable[E] = ()):
        self = super().__new__(cls, elements)
        self.key = key
        return self

    def __repr__(self) -> str:
        return f"Grouping({self.key!r}, {tuple(self)!r})"

    def __reduce__(self):
        return type(self), (self.key, tuple(self))


def group_by(
    elements: Iterable[T], key: GroupKeyfunc
) -> list[Grouping[HashableT, T]]:
    try:
        elements = iter(elements)
    except TypeError:
        raise TypeError("Elements must be iterable")
    groups: dict[HashableT, list[T]] = {}
    for element in elements:
        groups.setdefault(key(element), []).append(element)
    # dicts keep insertion order, so groups come out by first appearance
    return [Grouping(k, v) for k, v in groups.items()]


def groupings(
    pairs: Iterable[tuple[K, Iterable[E]]]
) -> list[Grouping[K, E]]:
    """Wrap (key, elements) pairs, e.g. dict.items(), as Groupings."""
    try:
        pairs = iter(pairs)
    except TypeError:
        raise TypeError("Pairs must be iterable")
    return [Grouping(k, v) for k, v in pairs]

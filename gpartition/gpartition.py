from typing import Any, Callable, Iterable, Sequence, overload

from gpartition.gpartition_core import MAX_KEYS, _partition_impl
from gpartition.gptypes import Comparer, E, K, KeyedGroup, R, ProjectionKeyfunc

Bucket = Iterable
Rest = Sequence[KeyedGroup[K, E]]


@overload
def partition(
    source: Iterable[KeyedGroup[K, E]],
    keys: tuple[K],
    result_selector: Callable[[Bucket[E], Rest], R],
    comparer: Comparer | None = None
) -> R: ...


@overload
def partition(
    source: Iterable[KeyedGroup[K, E]],
    keys: tuple[K, K],
    result_selector: Callable[[Bucket[E], Bucket[E], Rest], R],
    comparer: Comparer | None = None
) -> R: ...


@overload
def partition(
    source: Iterable[KeyedGroup[K, E]],
    keys: tuple[K, K, K],
    result_selector: Callable[[Bucket[E], Bucket[E], Bucket[E], Rest], R],
    comparer: Comparer | None = None
) -> R: ...


def partition(source, keys, result_selector, comparer=None):
    """
    Partition keyed groups into the groups matching up to three keys and
    the groups matching none of them.

    ``result_selector`` is called with one bucket per requested key, in
    the order the keys were given, followed by the list of remaining
    groups in the order they were encountered. ``keys`` is always a
    sequence, so a single key is passed as ``(key,)``. A bucket is the matching
    group itself, or ``()`` when no group matched its key. Its return
    value is returned as is.

    ``comparer`` is a two-argument equality predicate over keys; natural
    equality is used when it is omitted.
    """
    if isinstance(keys, (str, bytes)):
        raise TypeError("keys must be a sequence of keys, not a single key")
    try:
        keys = tuple(keys)
    except TypeError:
        raise TypeError("keys must be a sequence of 1 to 3 keys")
    count = len(keys)
    if not 0 < count <= MAX_KEYS:
        raise ValueError(f"expected 1 to {MAX_KEYS} keys, got {count}")
    key1, key2, key3 = keys + (None,) * (MAX_KEYS - count)
    return _partition_impl(
        source, count, key1, key2, key3, comparer,
        _drop_unused(result_selector, MAX_KEYS - count)
    )


def partition_bool(
    source: Iterable[KeyedGroup[bool, E]],
    result_selector: Callable[[Bucket[E], Bucket[E]], R]
) -> R:
    """Partition boolean-keyed groups into ``result_selector(true, false)``."""
    return _partition_impl(
        source, 2, True, False, None, None,
        _drop_unused(result_selector, 1, keep_rest=False)
    )


def partition_optional_bool(
    source: Iterable[KeyedGroup[bool | None, E]],
    result_selector: Callable[[Bucket[E], Bucket[E], Bucket[E]], R]
) -> R:
    """
    Partition groups keyed by True, False or None into
    ``result_selector(true, false, none)``.
    """
    return _partition_impl(
        source, 3, True, False, None, None,
        _drop_unused(result_selector, 0, keep_rest=False)
    )


def comparer_from_key(func: ProjectionKeyfunc) -> Comparer:
    """Build a comparer that treats keys as equal when func(a) == func(b)."""
    if not callable(func):
        raise TypeError("key function must be callable")

    def compare(a: Any, b: Any) -> bool:
        return func(a) == func(b)

    return compare


def _casefold(key: Any) -> Any:
    return key.casefold() if isinstance(key, str) else key


casefold_comparer: Comparer = comparer_from_key(_casefold)


def _drop_unused(
    result_selector: Callable[..., R] | None,
    n_unused: int,
    keep_rest: bool = True
) -> Callable[..., R] | None:
    # None passes through so the core reports the missing selector
    if result_selector is None or not callable(result_selector):
        return result_selector
    if n_unused == 0 and keep_rest:
        return result_selector
    n_used = MAX_KEYS - n_unused

    def select(*args):
        buckets = args[:n_used]
        if keep_rest:
            return result_selector(*buckets, args[-1])
        return result_selector(*buckets)

    return select

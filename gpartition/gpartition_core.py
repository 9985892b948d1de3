import logging
import operator
from typing import Any, Callable, Iterable

from gpartition.gptypes import Comparer, K, KeyedGroup, R

logger = logging.getLogger(__name__)

MAX_KEYS = 3

default_comparer: Comparer = operator.eq


def _check_args(
    source: Iterable[KeyedGroup],
    comparer: Comparer | None,
    result_selector: Callable[..., Any] | None
):
    if source is None:
        raise TypeError("source must not be None")
    if result_selector is None:
        raise TypeError("result_selector must not be None")
    if not callable(result_selector):
        raise TypeError("result_selector must be callable")
    if comparer is not None and not callable(comparer):
        raise TypeError("comparer must be callable")
    try:
        return iter(source)
    except TypeError:
        raise TypeError("source must be iterable")


def _partition_impl(
    source: Iterable[KeyedGroup[K, Any]],
    count: int,
    key1: K,
    key2: K,
    key3: K,
    comparer: Comparer | None,
    result_selector: Callable[..., R]
) -> R:
    """
    Single pass shared by every public partition form. Always works on
    three key slots; ``count`` says how many of them the caller asked for
    and the rest are never compared. ``result_selector`` always receives
    three buckets plus the remainder.

    A group goes to the first requested key it equals, in key order. If
    several groups match the same key, the last one seen owns the bucket
    and the earlier ones are dropped.
    """
    assert 0 < count <= MAX_KEYS

    groups = _check_args(source, comparer, result_selector)
    eq = comparer if comparer is not None else default_comparer

    etc: list[KeyedGroup[K, Any]] | None = None
    buckets: list[Iterable[Any]] = [(), (), ()]
    seen = 0

    for e in groups:
        seen += 1
        k = e.key
        i = (
            0 if count > 0 and eq(k, key1)
            else 1 if count > 1 and eq(k, key2)
            else 2 if count > 2 and eq(k, key3)
            else -1
        )
        if i < 0:
            if etc is None:
                etc = []
            etc.append(e)
        else:
            buckets[i] = e

    rest = etc if etc is not None else ()
    logger.debug(
        "partitioned %d group(s) over %d key(s): %d matched, %d in remainder",
        seen, count, seen - len(rest), len(rest)
    )
    return result_selector(buckets[0], buckets[1], buckets[2], rest)

from typing import Any, Callable, Hashable, Iterator, Protocol, TypeVar, TypeAlias

T = TypeVar('T')
K = TypeVar('K')
E = TypeVar('E', covariant=True)
R = TypeVar('R')

HashableT = TypeVar('HashableT', bound=Hashable)


class KeyedGroup(Protocol[K, E]):
    key: K

    def __iter__(self) -> Iterator[E]:
        pass


Comparer: TypeAlias = Callable[[K, K], bool]
GroupKeyfunc: TypeAlias = Callable[[T], HashableT]
ProjectionKeyfunc: TypeAlias = Callable[[K], Any]

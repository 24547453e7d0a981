"""Positional diff engine.

Pairs up the elements of two iterables index by index and classifies every
pair as an :class:`~algorithms.utils.Edit`. There is no realignment: an
insertion on one side turns every later position into a ``Change``.

    >>> list(iter_diff([0, 1, 2, 3], [0, 2, 2]))
    [Keep, Change(2), Keep, Remove]
"""
from typing import TypeVar, Generic, Iterable, Iterator, Callable, Optional
import operator

from .utils import Edit, EditKind

T = TypeVar('T')
U = TypeVar('U')

Equality = Callable[[T, U], bool]

_EXHAUSTED = object()


class DiffIter(Iterator[Edit], Generic[T, U]):
    """Lazy iterator over the per-position differences of two iterators.

    The engine owns both iterators; nothing else should advance them while
    it is in use. Every ``next()`` pulls exactly one element from each side,
    even after one side has run out. Once both sides are exhausted the engine
    stays finished and never pulls again. It is single-pass and cannot be
    restarted: build a new one from fresh inputs to diff again.

    ``eq(left, right)`` decides Keep versus Change and may compare values of
    different types. It defaults to ``left == right``.
    """

    def __init__(self, lhs: Iterable[T], rhs: Iterable[U], eq: Optional[Equality] = None):
        if eq is not None and not callable(eq):
            raise TypeError(f"eq must be callable, got {type(eq).__name__}")
        self._lhs: Iterator[T] = iter(lhs)
        self._rhs: Iterator[U] = iter(rhs)
        self._eq: Equality = eq if eq is not None else operator.eq
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def __iter__(self) -> 'DiffIter[T, U]':
        return self

    def __next__(self) -> Edit:
        if self._finished:
            raise StopIteration
        left = next(self._lhs, _EXHAUSTED)
        right = next(self._rhs, _EXHAUSTED)
        if left is _EXHAUSTED:
            if right is _EXHAUSTED:
                self._finished = True
                raise StopIteration
            return Edit(EditKind.ADD, right)
        if right is _EXHAUSTED:
            return Edit(EditKind.REMOVE)
        if self._eq(left, right):
            return Edit(EditKind.KEEP)
        return Edit(EditKind.CHANGE, right)

    def __repr__(self) -> str:
        state = "finished" if self._finished else "active"
        return f"<DiffIter {state}>"


def iter_diff(lhs: Iterable[T], rhs: Iterable[U], eq: Optional[Equality] = None) -> DiffIter[T, U]:
    """Return a lazy iterator of the differences between ``lhs`` and ``rhs``.

    Any iterable works on either side. Both are converted with ``iter()``
    here, so passing an iterator hands it over to the engine.
    """
    return DiffIter(lhs, rhs, eq)

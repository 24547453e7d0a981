import logging
from dataclasses import dataclass
from typing import TypeVar, List, Tuple, Optional, Iterable, Callable, Any

from .positional import DiffIter, iter_diff
from .utils import DiffSummary, EditKind, EditList, TokenType, get_tokenizer

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


def normalized_eq(ignore_case: bool = False, ignore_whitespace: bool = False) -> Callable[[Any, Any], bool]:
    """Build an equality that tolerates case and surrounding whitespace.

    Only string pairs are normalized; anything else compares with ``==``.
    """
    def normalize(text: str) -> str:
        if ignore_whitespace:
            text = text.strip()
        if ignore_case:
            text = text.casefold()
        return text

    def eq(left: Any, right: Any) -> bool:
        if isinstance(left, str) and isinstance(right, str):
            return normalize(left) == normalize(right)
        return left == right

    return eq


@dataclass
class DifferConfig:
    ignore_case: bool = False
    ignore_whitespace: bool = False
    token_type: TokenType = TokenType.LINE

    @property
    def is_strict(self) -> bool:
        return not (self.ignore_case or self.ignore_whitespace)


class PositionalDiffer:
    def __init__(self, config: Optional[DifferConfig] = None):
        self.config = config or DifferConfig()
        if self.config.is_strict:
            self.eq = None
        else:
            self.eq = normalized_eq(self.config.ignore_case, self.config.ignore_whitespace)
        self.tokenizer = get_tokenizer(self.config.token_type)

    def diff(self, lhs: Iterable[T], rhs: Iterable[U]) -> DiffIter[T, U]:
        return iter_diff(lhs, rhs, self.eq)

    def diff_strings(self, left: str, right: str) -> DiffIter[str, str]:
        return self.diff(self.tokenizer(left), self.tokenizer(right))

    def summarize(self, lhs: Iterable[T], rhs: Iterable[U]) -> DiffSummary:
        summary = DiffSummary.from_edits(self.diff(lhs, rhs))
        logger.debug(
            "Compared %d positions: %d kept, %d changed, %d removed, %d added",
            summary.positions, summary.kept, summary.changed, summary.removed, summary.added
        )
        return summary

    def first_difference(self, lhs: Iterable[T], rhs: Iterable[U]) -> Optional[int]:
        """Index of the first position that is not a Keep, or None.

        Stops pulling as soon as one is found, so it terminates on infinite
        inputs that differ somewhere.
        """
        for index, edit in enumerate(self.diff(lhs, rhs)):
            if edit.kind != EditKind.KEEP:
                logger.debug("First difference at position %d: %r", index, edit)
                return index
        return None

    def is_identical(self, lhs: Iterable[T], rhs: Iterable[U]) -> bool:
        return self.first_difference(lhs, rhs) is None


class BatchDiffer:
    def __init__(self, differ: Optional[PositionalDiffer] = None):
        self.differ = differ or PositionalDiffer()

    def diff_multiple(self, pairs: Iterable[Tuple[Iterable[T], Iterable[U]]]) -> List[EditList]:
        results = []
        for lhs, rhs in pairs:
            results.append(list(self.differ.diff(lhs, rhs)))
        logger.debug("Diffed %d pairs", len(results))
        return results

    def diff_all_against_base(self, base: Iterable[T], targets: Iterable[Iterable[U]]) -> List[EditList]:
        # The base is replayed for every target, so a one-shot iterator is materialized first.
        base = list(base)
        results = []
        for target in targets:
            results.append(list(self.differ.diff(base, target)))
        return results

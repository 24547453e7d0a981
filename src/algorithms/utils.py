from typing import TypeVar, List, Tuple, NamedTuple, Optional, Callable, Iterable, Dict
from enum import Enum
from dataclasses import dataclass
import re

T = TypeVar('T')


class EditKind(str, Enum):
    CHANGE = 'change'
    REMOVE = 'remove'
    KEEP = 'keep'
    ADD = 'add'

    @property
    def rank(self) -> int:
        return _KIND_RANK[self]

    @property
    def carries_value(self) -> bool:
        return self in (EditKind.CHANGE, EditKind.ADD)


_KIND_RANK = {kind: index for index, kind in enumerate(EditKind)}


class Edit(NamedTuple):
    """The outcome of comparing one position of two sequences.

    ``value`` holds the right-hand element for ``CHANGE`` and ``ADD`` and is
    ``None`` for ``KEEP`` and ``REMOVE``. Edits order by kind in declaration
    order first, then by the carried value.
    """
    kind: EditKind
    value: object = None

    def __repr__(self) -> str:
        name = self.kind.value.capitalize()
        if self.kind.carries_value:
            return f"{name}({self.value!r})"
        return name

    def _key(self) -> Tuple[int, object]:
        return (self.kind.rank, self.value)

    def __lt__(self, other):
        if not isinstance(other, Edit):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Edit):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Edit):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Edit):
            return NotImplemented
        return self._key() >= other._key()


EditList = List[Edit]


def make_change(value: T) -> Edit:
    return Edit(EditKind.CHANGE, value)


def make_remove() -> Edit:
    return Edit(EditKind.REMOVE)


def make_keep() -> Edit:
    return Edit(EditKind.KEEP)


def make_add(value: T) -> Edit:
    return Edit(EditKind.ADD, value)


@dataclass
class DiffSummary:
    left_length: int
    right_length: int
    positions: int
    kept: int
    changed: int
    removed: int
    added: int
    similarity_ratio: float

    @property
    def is_identical(self) -> bool:
        return self.kept == self.positions

    @classmethod
    def from_edits(cls, edits: Iterable[Edit]) -> 'DiffSummary':
        counts = count_edits(edits)
        positions = counts['total']
        # Keep and Change consume one element from each side.
        overlap = counts['keeps'] + counts['changes']
        return cls(
            left_length=overlap + counts['removes'],
            right_length=overlap + counts['adds'],
            positions=positions,
            kept=counts['keeps'],
            changed=counts['changes'],
            removed=counts['removes'],
            added=counts['adds'],
            similarity_ratio=(counts['keeps'] / positions) if positions > 0 else 1.0
        )


class TokenType(str, Enum):
    LINE = 'line'
    WORD = 'word'
    CHAR = 'char'


def count_edits(edits: Iterable[Edit]) -> Dict[str, int]:
    counts = {
        'keeps': 0,
        'changes': 0,
        'removes': 0,
        'adds': 0,
        'total': 0
    }
    keys = {
        EditKind.KEEP: 'keeps',
        EditKind.CHANGE: 'changes',
        EditKind.REMOVE: 'removes',
        EditKind.ADD: 'adds',
    }
    for edit in edits:
        counts[keys[edit.kind]] += 1
        counts['total'] += 1
    return counts


def tokenize_lines(text: str) -> List[str]:
    if not text:
        return []
    return text.split('\n')


def tokenize_words(text: str) -> List[str]:
    if not text:
        return []
    return re.findall(r'\S+', text)


def tokenize_chars(text: str) -> List[str]:
    return list(text)


def get_tokenizer(token_type: TokenType) -> Callable[[str], List[str]]:
    tokenizers = {
        TokenType.LINE: tokenize_lines,
        TokenType.WORD: tokenize_words,
        TokenType.CHAR: tokenize_chars
    }
    try:
        return tokenizers[TokenType(token_type)]
    except ValueError:
        raise ValueError(f"Unknown token type: {token_type}") from None


def group_consecutive_edits(edits: Iterable[Edit]) -> List[Tuple[EditKind, List[Edit]]]:
    groups: List[Tuple[EditKind, List[Edit]]] = []
    for edit in edits:
        if groups and groups[-1][0] == edit.kind:
            groups[-1][1].append(edit)
        else:
            groups.append((edit.kind, [edit]))
    return groups


def split_into_hunks(edits: List[Edit], context: int = 3) -> List[List[Tuple[int, Edit]]]:
    """Window the edits around every non-Keep position.

    Each hunk is a list of ``(index, edit)`` pairs; windows that overlap or
    touch are merged.
    """
    if context < 0:
        raise ValueError(f"Context must be non-negative, got {context}")
    change_indices = [i for i, edit in enumerate(edits) if edit.kind != EditKind.KEEP]
    if not change_indices:
        return []
    last = len(edits) - 1
    ranges = []
    start = max(0, change_indices[0] - context)
    end = min(last, change_indices[0] + context)
    for idx in change_indices[1:]:
        potential_start = max(0, idx - context)
        if potential_start <= end + 1:
            end = min(last, idx + context)
        else:
            ranges.append((start, end))
            start = potential_start
            end = min(last, idx + context)
    ranges.append((start, end))
    return [[(i, edits[i]) for i in range(s, e + 1)] for s, e in ranges]


def calculate_positions(edits: Iterable[Edit]) -> List[Tuple[Optional[int], Optional[int]]]:
    result: List[Tuple[Optional[int], Optional[int]]] = []
    for position, edit in enumerate(edits, start=1):
        if edit.kind == EditKind.REMOVE:
            result.append((position, None))
        elif edit.kind == EditKind.ADD:
            result.append((None, position))
        else:
            result.append((position, position))
    return result

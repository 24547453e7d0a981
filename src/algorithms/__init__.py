from algorithms.utils import (
    Edit, EditKind, EditList, DiffSummary, TokenType,
    make_change, make_remove, make_keep, make_add,
    count_edits, group_consecutive_edits, split_into_hunks, calculate_positions,
    tokenize_lines, tokenize_words, tokenize_chars, get_tokenizer
)
from algorithms.positional import DiffIter, iter_diff
from algorithms.differ import DifferConfig, PositionalDiffer, BatchDiffer, normalized_eq


__all__ = [
    "Edit", "EditKind", "EditList", "DiffSummary", "TokenType",
    "make_change", "make_remove", "make_keep", "make_add",
    "count_edits", "group_consecutive_edits", "split_into_hunks", "calculate_positions",
    "tokenize_lines", "tokenize_words", "tokenize_chars", "get_tokenizer",
    "DiffIter", "iter_diff",
    "DifferConfig", "PositionalDiffer", "BatchDiffer", "normalized_eq",
]

from helpers.naive_diff import (
    NaiveOpType,
    NaiveEdit,
    NaiveDiff,
    DiffVerifier,
    DiffStats,
    naive_diff,
    naive_tuples,
    verify_diff,
    get_diff_stats,
)


__all__ = [
    "NaiveOpType",
    "NaiveEdit",
    "NaiveDiff",
    "DiffVerifier",
    "DiffStats",
    "naive_diff",
    "naive_tuples",
    "verify_diff",
    "get_diff_stats",
]

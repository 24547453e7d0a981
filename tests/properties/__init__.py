from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    SimilarSequenceGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    DiffTestCase,
    PullCountingIterator,
    ResurrectingIterator,
    InfiniteSequenceGenerator,
    generate_random_sequences,
    generate_similar_sequences,
    generate_test_cases
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "DiffTestCase",
    "PullCountingIterator",
    "ResurrectingIterator",
    "InfiniteSequenceGenerator",
    "generate_random_sequences",
    "generate_similar_sequences",
    "generate_test_cases"
]

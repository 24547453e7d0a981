import unittest
import sys
import os
from itertools import islice
from typing import List, Tuple

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from algorithms.utils import EditKind, Edit, make_add
from algorithms.positional import iter_diff

from helpers.naive_diff import NaiveDiff, naive_tuples, verify_diff, DiffVerifier

from properties.generators import (
    GeneratorConfig,
    SequenceGenerator,
    SimilarSequenceGenerator,
    TestCaseGenerator,
    GeneratorMode,
    PullCountingIterator,
    ResurrectingIterator,
    InfiniteSequenceGenerator,
    generate_random_sequences,
    generate_similar_sequences,
    generate_test_cases
)


def _kinds(edits: List[Edit]) -> List[EditKind]:
    return [e.kind for e in edits]


class TestDiffProperties(unittest.TestCase):
    def setUp(self):
        self.config = GeneratorConfig(seed=42, max_length=20)
        self.test_gen = TestCaseGenerator(self.config)

    def test_length_is_max_of_inputs(self):
        for case in generate_test_cases(40, seed=7):
            edits = list(iter_diff(case.old, case.new))
            self.assertEqual(len(edits), max(len(case.old), len(case.new)), case.name)

    def test_matches_naive_reference(self):
        cases = self.test_gen.generate_batch(30) + self.test_gen.generate_batch(0, GeneratorMode.EDGE_CASE)
        for case in cases:
            edits = list(iter_diff(case.old, case.new))
            self.assertTrue(verify_diff(case.old, case.new, edits), case.name)

    def test_identical_inputs_are_all_keep(self):
        gen = SequenceGenerator(GeneratorConfig(seed=3))
        for _ in range(20):
            seq = gen.generate_char_list()
            self.assertTrue(all(e.kind == EditKind.KEEP for e in iter_diff(seq, seq.copy())))

    def test_empty_left_is_all_add_in_order(self):
        gen = SequenceGenerator(GeneratorConfig(seed=4))
        for _ in range(10):
            seq = gen.generate_word_list()
            self.assertEqual(list(iter_diff([], seq)), [make_add(x) for x in seq])

    def test_empty_right_is_all_remove(self):
        gen = SequenceGenerator(GeneratorConfig(seed=5))
        for _ in range(10):
            seq = gen.generate_int_list()
            edits = list(iter_diff(seq, []))
            self.assertEqual(len(edits), len(seq))
            self.assertTrue(all(e == Edit(EditKind.REMOVE) for e in edits))

    def test_change_carries_right_hand_value(self):
        verifier = DiffVerifier()
        for old, new in generate_random_sequences(30, seed=11):
            edits = list(iter_diff(old, new))
            self.assertTrue(verifier.verify_right_values(new, edits))

    def test_trailing_excess_is_pure(self):
        for old, new in generate_similar_sequences(20, seed=12):
            kinds = _kinds(list(iter_diff(old, new)))
            overlap = min(len(old), len(new))
            self.assertTrue(all(k in (EditKind.KEEP, EditKind.CHANGE) for k in kinds[:overlap]))
            tail = set(kinds[overlap:])
            if len(old) > len(new):
                self.assertEqual(tail, {EditKind.REMOVE})
            elif len(new) > len(old):
                self.assertEqual(tail, {EditKind.ADD})
            else:
                self.assertEqual(tail, set())


class TestDeterminism(unittest.TestCase):
    def test_fresh_engines_agree(self):
        for old, new in generate_random_sequences(15, seed=21):
            first = list(iter_diff(old, new))
            for _ in range(3):
                self.assertEqual(list(iter_diff(old, new)), first)

    def test_consumed_engine_stays_empty(self):
        engine = iter_diff("abc", "abd")
        self.assertEqual(len(list(engine)), 3)
        self.assertEqual(list(engine), [])
        self.assertEqual(list(engine), [])


class TestSymmetryProperties(unittest.TestCase):
    def setUp(self):
        self.seq_gen = SequenceGenerator(GeneratorConfig(seed=789, max_length=20))

    def _count(self, edits: List[Edit]) -> Tuple[int, int, int, int]:
        kinds = _kinds(edits)
        return (kinds.count(EditKind.KEEP), kinds.count(EditKind.CHANGE),
                kinds.count(EditKind.REMOVE), kinds.count(EditKind.ADD))

    def test_swap_sequences_swaps_remove_and_add(self):
        for _ in range(30):
            old = self.seq_gen.generate_char_list()
            new = self.seq_gen.generate_char_list()
            keep, change, remove, add = self._count(list(iter_diff(old, new)))
            r_keep, r_change, r_remove, r_add = self._count(list(iter_diff(new, old)))
            self.assertEqual((keep, change), (r_keep, r_change))
            self.assertEqual((remove, add), (r_add, r_remove))


class TestLaziness(unittest.TestCase):
    def test_each_step_pulls_both_sides_once(self):
        left = PullCountingIterator([1, 2, 3, 4])
        right = PullCountingIterator([1, 5])
        engine = iter_diff(left, right)
        for step in range(1, 5):
            next(engine)
            self.assertEqual((left.pulls, right.pulls), (step, step))
        # Right ran out at step 3 and is still pulled every step.
        self.assertEqual(right.exhausted_pulls, 2)

    def test_no_pull_after_termination(self):
        left = PullCountingIterator("ab")
        right = PullCountingIterator("a")
        engine = iter_diff(left, right)
        self.assertEqual(len(list(engine)), 2)
        pulls = (left.pulls, right.pulls)
        with self.assertRaises(StopIteration):
            next(engine)
        self.assertEqual((left.pulls, right.pulls), pulls)

    def test_resurrecting_input_is_not_pulled_after_finish(self):
        left = ResurrectingIterator(["a"], ["late"])
        engine = iter_diff(left, [])
        self.assertEqual(list(engine), [Edit(EditKind.REMOVE)])
        with self.assertRaises(StopIteration):
            next(engine)
        self.assertEqual(next(left), "late")

    def test_infinite_inputs_are_consumed_on_demand(self):
        left = InfiniteSequenceGenerator(prefix=["a", "b"], fill="x")
        right = InfiniteSequenceGenerator(prefix=["a", "c"], fill="x")
        edits = list(islice(iter_diff(left, right), 5))
        self.assertEqual(_kinds(edits), [EditKind.KEEP, EditKind.CHANGE,
                                         EditKind.KEEP, EditKind.KEEP, EditKind.KEEP])

    def test_finite_against_infinite_adds_forever(self):
        right = InfiniteSequenceGenerator(fill=0)
        edits = list(islice(iter_diff([0, 1], right), 6))
        self.assertEqual(edits[2:], [make_add(0)] * 4)


class TestHeterogeneousEquality(unittest.TestCase):
    def test_custom_relation_matches_reference(self):
        gen = SequenceGenerator(GeneratorConfig(seed=99, max_length=15))
        eq = lambda left, right: left == str(right)
        for _ in range(20):
            old = [str(x) for x in gen.generate_int_list()]
            new = gen.generate_int_list()
            edits = list(iter_diff(old, new, eq))
            self.assertEqual([(e.kind.value, e.value) for e in edits], NaiveDiff(eq).as_tuples(old, new))

    def test_default_relation_differs_from_custom(self):
        old, new = ["1", "2"], [1, 2]
        self.assertEqual(_kinds(list(iter_diff(old, new))), [EditKind.CHANGE, EditKind.CHANGE])
        self.assertEqual(_kinds(list(iter_diff(old, new, lambda a, b: int(a) == b))),
                         [EditKind.KEEP, EditKind.KEEP])
        self.assertEqual(naive_tuples(old, new), [("change", 1), ("change", 2)])


if __name__ == '__main__':
    unittest.main(verbosity=2)


import math
import random
import unittest

from unionfind._unionfind_errors import (EmptyStructureError,
                                         IndexOutOfRangeError)
from unionfind.pathcompression import WeightedQuickUnionWithPathCompression
from unionfind.protocols import UnionFind, find_all_sets
from unionfind.quickfind import QuickFind
from unionfind.quickunion import QuickUnion
from unionfind.weightedquickunion import WeightedQuickUnion

VARIANTS = (
    QuickFind,
    QuickUnion,
    WeightedQuickUnion,
    WeightedQuickUnionWithPathCompression
)
WEIGHTED_VARIANTS = (
    WeightedQuickUnion,
    WeightedQuickUnionWithPathCompression
)


def _random_unions(n: int, total: int, seed: int) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(total)]


def _partition(union_find: UnionFind) -> set[frozenset[int]]:
    return set(find_all_sets(union_find).values())


def _state(union_find: UnionFind) -> list[list[int]]:
    if isinstance(union_find, QuickFind):
        return [union_find.component_ids.tolist()]
    state = [union_find.parents.tolist()]
    if isinstance(union_find, WEIGHTED_VARIANTS):
        state.append(union_find.ranks.tolist())
    return state


class TestUnionFindProperties(unittest.TestCase):
    def test_empty(self):
        for variant in VARIANTS:
            with self.subTest(variant=variant.__name__):
                union_find = variant(0)
                self.assertEqual(union_find.count(), 0)
                with self.assertRaises(EmptyStructureError):
                    union_find.find(0)
                with self.assertRaises(EmptyStructureError):
                    union_find.is_connected(42, 0)
                with self.assertRaises(EmptyStructureError):
                    union_find.union(0, 0)

    def test_out_of_range_leaves_state_unchanged(self):
        n = 6
        for variant in VARIANTS:
            with self.subTest(variant=variant.__name__):
                union_find = variant(n)
                union_find.union(0, 1)
                union_find.union(2, 1)
                before = _state(union_find)
                for bad in (n, -1):
                    with self.assertRaises(IndexOutOfRangeError):
                        union_find.find(bad)
                    with self.assertRaises(IndexOutOfRangeError):
                        union_find.is_connected(0, bad)
                    with self.assertRaises(IndexOutOfRangeError):
                        union_find.is_connected(bad, 0)
                    with self.assertRaises(IndexOutOfRangeError):
                        union_find.union(0, bad)
                    with self.assertRaises(IndexOutOfRangeError):
                        union_find.union(bad, 0)
                    self.assertEqual(_state(union_find), before)

    def test_scenario_union(self):
        for variant in VARIANTS:
            with self.subTest(variant=variant.__name__):
                union_find = variant(7)
                union_find.union(0, 1)
                self.assertTrue(union_find.is_connected(0, 1))
                self.assertFalse(union_find.is_connected(0, 2))

    def test_scenario_transitive(self):
        for variant in VARIANTS:
            with self.subTest(variant=variant.__name__):
                union_find = variant(10)
                union_find.union(0, 9)
                union_find.union(8, 9)
                self.assertTrue(union_find.is_connected(0, 8))
                self.assertTrue(union_find.is_connected(8, 9))

    def test_equivalence_relation(self):
        n = 16
        unions = _random_unions(n, 10, seed=1)
        for variant in VARIANTS:
            with self.subTest(variant=variant.__name__):
                union_find = variant(n)
                for p, q in unions:
                    union_find.union(p, q)
                for p in range(n):
                    self.assertTrue(union_find.is_connected(p, p))
                    for q in range(n):
                        connected = union_find.is_connected(p, q)
                        self.assertEqual(connected,
                                         union_find.is_connected(q, p))
                        self.assertEqual(connected,
                                         union_find.find(p)
                                         == union_find.find(q))
                        if not connected:
                            continue
                        for r in range(n):
                            if union_find.is_connected(q, r):
                                self.assertTrue(union_find.is_connected(p, r))

    def test_union_idempotent(self):
        n = 20
        unions = _random_unions(n, 12, seed=2)
        for variant in VARIANTS:
            with self.subTest(variant=variant.__name__):
                once = variant(n)
                twice = variant(n)
                for p, q in unions:
                    once.union(p, q)
                    twice.union(p, q)
                    twice.union(p, q)
                self.assertEqual(_partition(once), _partition(twice))

    def test_partition_independent_of_order_and_variant(self):
        n = 30
        unions = _random_unions(n, 20, seed=3)
        reference = QuickFind(n)
        for p, q in unions:
            reference.union(p, q)
        expected = _partition(reference)
        rng = random.Random(4)
        for variant in VARIANTS:
            for _ in range(3):
                shuffled = [(q, p) if rng.random() < 0.5 else (p, q)
                            for p, q in unions]
                rng.shuffle(shuffled)
                with self.subTest(variant=variant.__name__):
                    union_find = variant(n)
                    for p, q in shuffled:
                        union_find.union(p, q)
                    self.assertEqual(_partition(union_find), expected)

    def test_rank_bounds_height(self):
        n = 64
        bound = math.floor(math.log2(n))
        for seed in range(5):
            unions = _random_unions(n, 80, seed=seed)
            for variant in WEIGHTED_VARIANTS:
                with self.subTest(variant=variant.__name__, seed=seed):
                    union_find = variant(n)
                    for index, (p, q) in enumerate(unions):
                        union_find.union(p, q)
                        if index % 3 == 0:
                            union_find.is_connected(q, p)
                    heights: dict[int, int] = {}
                    for element in range(n):
                        path = union_find.find_path(element)
                        root = path[-1]
                        heights[root] = max(heights.get(root, 0),
                                            len(path) - 1)
                    for root, height in heights.items():
                        rank = int(union_find.ranks[root])
                        self.assertGreaterEqual(rank, height)
                        self.assertLessEqual(rank, bound)

    def test_rank_never_decreases(self):
        n = 32
        unions = _random_unions(n, 40, seed=5)
        for variant in WEIGHTED_VARIANTS:
            with self.subTest(variant=variant.__name__):
                union_find = variant(n)
                previous = union_find.ranks.copy()
                for p, q in unions:
                    union_find.union(p, q)
                    union_find.find(p)
                    current = union_find.ranks.copy()
                    self.assertTrue((current >= previous).all())
                    previous = current

    def test_no_cycles(self):
        n = 25
        unions = _random_unions(n, 40, seed=6)
        for variant in VARIANTS[1:]:
            with self.subTest(variant=variant.__name__):
                union_find = variant(n)
                for p, q in unions:
                    union_find.union(p, q)
                for element in range(n):
                    path = union_find.find_path(element)
                    self.assertEqual(len(path), len(set(path)))
                    self.assertEqual(union_find.parents[path[-1]], path[-1])

"""
tests/persistent_list/ds/test_list_stress.py
ESTRÉS: Listas masivas. Ninguna operación debe provocar RecursionError.
"""
import operator
import sys
import time
import unittest
from persistent_list.ds.list import ConsList


class TestConsListStress(unittest.TestCase):

    N = 100_000

    def setUp(self):
        # Mucho más largo que el límite de recursión de Python
        self.assertGreater(self.N, sys.getrecursionlimit())
        self.data = list(range(self.N))

        start = time.time()
        self.massive = ConsList.from_python(self.data)
        duration = time.time() - start
        print(f"\n[PERF] Crear ConsList({self.N}): {duration:.4f}s")

    def test_inspection(self):
        self.assertEqual(len(self.massive), self.N)
        self.assertEqual(self.massive.first(), 0)
        self.assertEqual(self.massive.last(), self.N - 1)

    def test_transformations(self):
        self.assertEqual(len(self.massive.init()), self.N - 1)
        self.assertEqual(self.massive.map(lambda x: x + 1).last(), self.N)
        self.assertEqual(len(self.massive.filter(lambda x: x % 2 == 0)), self.N // 2)
        self.assertEqual(self.massive.find(lambda x: x == self.N - 1), self.N - 1)

    def test_folds(self):
        expected = sum(self.data)
        self.assertEqual(self.massive.foldl(0, operator.add), expected)
        self.assertEqual(self.massive.foldr(0, operator.add), expected)

    def test_equality_and_hash(self):
        other = ConsList.from_python(self.data)
        self.assertEqual(self.massive, other)
        self.assertEqual(hash(self.massive), hash(other))

    def test_prepend_chain(self):
        """Construcción incremental por la cabeza."""
        lst = ConsList.empty()
        for i in range(self.N):
            lst = lst.prepend(i)
        self.assertEqual(lst.first(), self.N - 1)
        self.assertEqual(lst.last(), 0)
        self.assertEqual(lst.to_python(), list(reversed(self.data)))


if __name__ == '__main__':
    unittest.main()

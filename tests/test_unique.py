import math
import unittest
from gf2lfsr import unique


class Identifiers(unittest.TestCase):

    def test_combinadic(self):
        combinadic = unique.combinadic
        self.assertEqual(combinadic(5, 2, 0), 0b00011)
        self.assertEqual(combinadic(5, 2, 1), 0b00101)
        self.assertEqual(combinadic(5, 2, 9), 0b11000)
        self.assertEqual(combinadic(4, 0, 0), 0)
        self.assertEqual(combinadic(4, 4, 0), 0b1111)
        for n in range(7):
            for k in range(n + 1):
                C = [combinadic(n, k, m) for m in range(math.comb(n, k))]
                self.assertEqual(C, sorted(C))
                self.assertEqual(set(C), {c for c in range(1 << n) if bin(c).count('1') == k})
        self.assertRaises(ValueError, combinadic, 5, 2, 10)
        self.assertRaises(ValueError, combinadic, 5, 2, -1)
        self.assertRaises(ValueError, combinadic, 5, 6, 0)

    def test_identifiers(self):
        for n, k in ((6, 3), (10, 4), (16, 2), (12, 11)):
            ids = list(unique.UniqueIdentifiers(n, k))
            self.assertEqual(len(ids), math.comb(n, k) - 1)
            self.assertEqual(len(set(ids)), len(ids))
            self.assertTrue(all(bin(c).count('1') == k for c in ids))
            self.assertTrue(all(0 <= c < 1 << n for c in ids))
            self.assertNotIn(unique.combinadic(n, k, 0), ids)

    def test_start(self):
        U1 = unique.UniqueIdentifiers(8, 3)
        U2 = unique.UniqueIdentifiers(8, 3, start=5)
        self.assertEqual(list(U1), list(U1))
        self.assertEqual(set(U1), set(U2))
        self.assertNotEqual(list(U1), list(U2))

    def test_degenerate(self):
        self.assertEqual(list(unique.UniqueIdentifiers(4, 0)), [])
        self.assertEqual(list(unique.UniqueIdentifiers(4, 4)), [])
        self.assertRaises(ValueError, unique.UniqueIdentifiers, 3, 4)
        self.assertRaises(ValueError, unique.UniqueIdentifiers, 3, -1)


if __name__ == "__main__":
    unittest.main()

import math
import unittest
from gf2lfsr import gmpy


class Arithmetic(unittest.TestCase):

    def test_factor(self):
        factor = gmpy.factor
        self.assertEqual(factor(1), [])
        self.assertEqual(factor(2), [2])
        self.assertEqual(factor(44), [2, 2, 11])
        self.assertEqual(factor(63), [3, 3, 7])
        self.assertEqual(factor(1024), [2] * 10)
        self.assertEqual(factor(101**2), [101, 101])
        self.assertEqual(factor(1031 * 1033), [1031, 1033])
        self.assertEqual(factor((2**31 - 1)**2), [2**31 - 1] * 2)
        self.assertEqual(factor(2**64 + 1), [274177, 67280421310721])
        self.assertEqual(factor(1000003 * 1000033 * 1000037), [1000003, 1000033, 1000037])
        self.assertRaises(ValueError, factor, 0)
        self.assertRaises(ValueError, factor, -6)

    def test_mersenne_factors(self):
        mf = gmpy.mersenne_factors
        self.assertEqual(mf(1), [])
        self.assertEqual(mf(2), [3])
        self.assertEqual(mf(4), [3, 5])
        self.assertEqual(mf(6), [3, 3, 7])
        self.assertEqual(mf(11), [23, 89])
        self.assertEqual(mf(31), [2**31 - 1])
        self.assertEqual(mf(32), [3, 5, 17, 257, 65537])
        self.assertEqual(mf(127), [2**127 - 1])
        for n in range(1, 65):
            self.assertEqual(math.prod(mf(n)), 2**n - 1)
            self.assertEqual(mf(n), sorted(mf(n)))
            self.assertTrue(all(gmpy.is_prime(p) for p in mf(n)))
        self.assertRaises(ValueError, mf, 0)


if __name__ == "__main__":
    unittest.main()

import unittest
from gfpoly import gmpy


class Arithmetic(unittest.TestCase):

    def test_basic(self):
        self.assertFalse(gmpy.is_prime(1))
        self.assertTrue(gmpy.is_prime(2))
        self.assertTrue(gmpy.is_prime(101))
        self.assertFalse(gmpy.is_prime(561))
        self.assertTrue(gmpy.is_prime(2**16+1))

        self.assertEqual(gmpy.next_prime(1), 2)
        self.assertEqual(gmpy.next_prime(2), 3)
        self.assertEqual(gmpy.next_prime(256), 257)

    def test_inverse(self):
        self.assertEqual(gmpy.inverse(3, 257), 86)
        self.assertEqual(gmpy.inverse(1, 2), 1)
        self.assertEqual(gmpy.inverse(2, 3), 2)
        self.assertEqual(gmpy.inverse(-1, 7), 6)
        self.assertEqual(gmpy.inverse(10, 7), 5)
        for p in (2, 3, 5, 101, 65537):
            for a in range(1, min(p, 200)):
                b = gmpy.inverse(a, p)
                self.assertTrue(0 <= b < p)
                self.assertEqual(a * b % p, 1)
        self.assertIsInstance(gmpy.inverse(5, 11), int)

    def test_inverse_errors(self):
        self.assertRaises(gmpy.NonInvertibleElement, gmpy.inverse, 0, 7)
        self.assertRaises(gmpy.NonInvertibleElement, gmpy.inverse, 14, 7)
        self.assertRaises(gmpy.NonInvertibleElement, gmpy.inverse, 2, 4)
        self.assertRaises(ZeroDivisionError, gmpy.inverse, 0, 7)
        self.assertRaises(ValueError, gmpy.inverse, 3, 0)
        self.assertRaises(ValueError, gmpy.inverse, 3, -7)

    def test_pow_int(self):
        self.assertEqual(gmpy.pow_int(2, 0), 1)
        self.assertEqual(gmpy.pow_int(0, 0), 1)
        self.assertEqual(gmpy.pow_int(2, 10), 1024)
        self.assertEqual(gmpy.pow_int(3, 5), 243)
        self.assertEqual(gmpy.pow_int(101, 20), 101**20)  # beyond 64 bits
        self.assertIsInstance(gmpy.pow_int(7, 3), int)
        self.assertRaises(ValueError, gmpy.pow_int, 2, -1)

    def test_prime_divisors(self):
        self.assertEqual(gmpy.prime_divisors(1), [])
        self.assertEqual(gmpy.prime_divisors(2), [2])
        self.assertEqual(gmpy.prime_divisors(4), [2])
        self.assertEqual(gmpy.prime_divisors(6), [2, 3])
        self.assertEqual(gmpy.prime_divisors(12), [2, 3])
        self.assertEqual(gmpy.prime_divisors(97), [97])
        self.assertEqual(gmpy.prime_divisors(360), [2, 3, 5])
        self.assertEqual(gmpy.prime_divisors(2 * 3 * 5 * 7 * 11 * 13), [2, 3, 5, 7, 11, 13])
        self.assertEqual(gmpy.prime_divisors(49), [7])
        self.assertEqual(gmpy.prime_divisors(2**10 * 1009), [2, 1009])
        self.assertRaises(ValueError, gmpy.prime_divisors, 0)
        self.assertRaises(ValueError, gmpy.prime_divisors, -6)


if __name__ == "__main__":
    unittest.main()

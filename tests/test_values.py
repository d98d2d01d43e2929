import math
import unittest

from lox.tree_walker.values import is_truthy, is_equal, is_number, as_value, stringify, divide

class TruthinessTests(unittest.TestCase):
	
	def test_falsy(self):
		self.assertFalse(is_truthy(None))
		self.assertFalse(is_truthy(False))
	
	def test_everything_else_is_truthy(self):
		for x in [True, 0.0, -1.0, "", "false"]:
			with self.subTest(x):
				self.assertTrue(is_truthy(x))

class EqualityTests(unittest.TestCase):
	
	def test_nil(self):
		self.assertTrue(is_equal(None, None))
		self.assertFalse(is_equal(None, False))
		self.assertFalse(is_equal(0.0, None))
	
	def test_kinds_must_match(self):
		self.assertFalse(is_equal(1.0, "1"))
		self.assertFalse(is_equal(True, 1.0))
		self.assertFalse(is_equal(0.0, False))
	
	def test_numbers_compare_like_doubles(self):
		self.assertTrue(is_equal(math.nan, math.nan))
		self.assertFalse(is_equal(0.0, -0.0))
		self.assertTrue(is_equal(-0.0, -0.0))
		self.assertFalse(is_equal(math.nan, 1.0))
	
	def test_same_kind(self):
		self.assertTrue(is_equal(3.0, 3.0))
		self.assertTrue(is_equal("abc", "abc"))
		self.assertTrue(is_equal(False, False))
		self.assertFalse(is_equal("abc", "abd"))

class NumberTests(unittest.TestCase):
	
	def test_bool_is_not_a_number(self):
		self.assertFalse(is_number(True))
		self.assertTrue(is_number(2.5))
		self.assertFalse(is_number(2))
	
	def test_division_by_zero(self):
		self.assertEqual(math.inf, divide(1.0, 0.0))
		self.assertEqual(-math.inf, divide(-1.0, 0.0))
		self.assertEqual(-math.inf, divide(1.0, -0.0))
		self.assertTrue(math.isnan(divide(0.0, 0.0)))
		self.assertEqual(2.5, divide(5.0, 2.0))

class HostValueTests(unittest.TestCase):
	
	def test_integers_become_doubles(self):
		self.assertEqual(3.0, as_value(3))
		self.assertIsInstance(as_value(3), float)
		self.assertEqual(math.inf, as_value(10**400))
		self.assertEqual(-math.inf, as_value(-10**400))
	
	def test_other_kinds_pass_through(self):
		for x in [None, True, False, 2.5, "s"]:
			with self.subTest(x):
				self.assertIs(x, as_value(x))

class StringifyTests(unittest.TestCase):
	
	def test_examples(self):
		for value, text in [
			(None, "nil"),
			(True, "true"),
			(False, "false"),
			(4.0, "4"),
			(4.5, "4.5"),
			(-3.0, "-3"),
			(7, "7"),
			(0.1, "0.1"),
			("hello", "hello"),
			("", ""),
			(math.inf, "Infinity"),
			(-math.inf, "-Infinity"),
			(math.nan, "NaN"),
		]:
			with self.subTest(text):
				self.assertEqual(text, stringify(value))


if __name__ == '__main__':
	unittest.main()

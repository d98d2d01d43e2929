import unittest

from lox.ontology import Token
from lox.environment import Environment
from lox.errors import UndefinedVariable

def _tok(name, line=1): return Token(name, line)

class EnvironmentTests(unittest.TestCase):
	
	def test_define_then_get(self):
		env = Environment()
		env.define("a", 1.0)
		self.assertEqual(1.0, env.get(_tok("a")))
	
	def test_nil_is_a_perfectly_good_binding(self):
		env = Environment()
		env.define("a", None)
		self.assertIsNone(env.get(_tok("a")))
		self.assertTrue(env.holds("a"))
	
	def test_redefinition_overwrites(self):
		env = Environment()
		env.define("a", 1.0)
		env.define("a", "two")
		self.assertEqual("two", env.get(_tok("a")))
	
	def test_get_walks_the_chain(self):
		outer = Environment()
		outer.define("a", True)
		inner = Environment(Environment(outer))
		self.assertIs(True, inner.get(_tok("a")))
	
	def test_shadowing_leaves_outer_alone(self):
		outer = Environment()
		outer.define("a", 1.0)
		inner = Environment(outer)
		inner.define("a", 2.0)
		self.assertEqual(2.0, inner.get(_tok("a")))
		self.assertEqual(1.0, outer.get(_tok("a")))
		self.assertFalse(outer.holds("b"))
	
	def test_assign_reaches_nearest_binding(self):
		outer = Environment()
		outer.define("a", 1.0)
		middle = Environment(outer)
		middle.define("a", 2.0)
		inner = Environment(middle)
		inner.assign(_tok("a"), 3.0)
		self.assertEqual(3.0, middle.get(_tok("a")))
		self.assertEqual(1.0, outer.get(_tok("a")))
		self.assertFalse(inner.holds("a"))
	
	def test_undefined_lookup(self):
		env = Environment(Environment())
		with self.assertRaises(UndefinedVariable) as cm:
			env.get(_tok("nope", 7))
		self.assertEqual("nope", cm.exception.name)
		self.assertEqual(7, cm.exception.token.line)
		self.assertEqual("Undefined variable 'nope'.", cm.exception.message)
	
	def test_assign_never_creates(self):
		outer = Environment()
		inner = Environment(outer)
		with self.assertRaises(UndefinedVariable):
			inner.assign(_tok("x"), 1.0)
		self.assertFalse(inner.holds("x"))
		self.assertFalse(outer.holds("x"))


if __name__ == '__main__':
	unittest.main()

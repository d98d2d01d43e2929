"""
Direct interpretation of the syntax tree.

One Interpreter holds one chain of environments. Expressions evaluate
bottom-up to plain values; statements run for their effects.
A few kinds of node exist in the tree without meaning anything yet:
those evaluate to nil, or do nothing, as the case may be.
"""
import sys
import operator
from contextlib import contextmanager
from typing import Iterable, Optional, TextIO
from boozetools.support.foundation import Visitor
from .. import syntax
from ..ontology import Token
from ..environment import Environment
from ..errors import LoxRuntimeError, OperandTypeError
from ..diagnostics import Report
from .values import VALUE, as_value, is_number, is_truthy, is_equal, divide, stringify

NUMERIC_BINARY = {
	">"  : operator.gt,
	">=" : operator.ge,
	"<"  : operator.lt,
	"<=" : operator.le,
	"-"  : operator.sub,
	"*"  : operator.mul,
	"/"  : divide,
}

def _check_number_operand(op:Token, x:VALUE):
	if not is_number(x): raise OperandTypeError(op, "Operand must be a number.")

def _check_number_operands(op:Token, a:VALUE, b:VALUE):
	if not (is_number(a) and is_number(b)): raise OperandTypeError(op, "Operands must be numbers.")

def _plus(op:Token, a:VALUE, b:VALUE) -> VALUE:
	if is_number(a) and is_number(b): return a + b
	if isinstance(a, str) and isinstance(b, str): return a + b
	raise OperandTypeError(op, "Operands must be two numbers or two strings.")

class Interpreter(Visitor):
	environment: Environment

	def __init__(self, report:Optional[Report]=None, stdout:Optional[TextIO]=None):
		self._report = report or Report(verbose=0)
		self._stdout = stdout
		self.globals = self.environment = Environment()

	def reset(self):
		""" Forget every binding. The next run starts with an empty global scope. """
		self.globals = self.environment = Environment()

	def interpret(self, statements:Iterable[syntax.Stmt]) -> bool:
		"""
		Run a program. The first run-time error stops it cold and goes to the report.
		Answers whether the program ran to completion.
		"""
		try:
			for statement in statements:
				self.execute(statement)
		except LoxRuntimeError as ex:
			self._report.info("Runtime error at", repr(ex.token))
			self._report.runtime_error(ex)
			return False
		return True

	def evaluate(self, expr:syntax.Expr) -> VALUE:
		return self.visit(expr)

	def execute(self, stmt:syntax.Stmt):
		self.visit(stmt)

	def execute_block(self, statements:Iterable[syntax.Stmt], environment:Environment):
		with self._scope(environment):
			for statement in statements:
				self.execute(statement)

	@contextmanager
	def _scope(self, environment:Environment):
		previous = self.environment
		self.environment = environment
		try: yield environment
		finally: self.environment = previous

	###########################################################################

	@staticmethod
	def visit_Literal(expr:syntax.Literal):
		return as_value(expr.value)

	def visit_Grouping(self, expr:syntax.Grouping):
		return self.evaluate(expr.expression)

	def visit_Unary(self, expr:syntax.Unary):
		right = self.evaluate(expr.right)
		op = expr.operator
		if op.text == "!": return not is_truthy(right)
		if op.text == "-":
			_check_number_operand(op, right)
			return -right
		raise ValueError("Unknown unary operator %r" % op.text)

	def visit_Binary(self, expr:syntax.Binary):
		left = self.evaluate(expr.left)
		right = self.evaluate(expr.right)
		op = expr.operator
		if op.text in NUMERIC_BINARY:
			_check_number_operands(op, left, right)
			return NUMERIC_BINARY[op.text](left, right)
		if op.text == "+": return _plus(op, left, right)
		if op.text == "==": return is_equal(left, right)
		if op.text == "!=": return not is_equal(left, right)
		raise ValueError("Unknown binary operator %r" % op.text)

	def visit_Variable(self, expr:syntax.Variable):
		return self.environment.get(expr.name)

	def visit_Assign(self, expr:syntax.Assign):
		value = self.evaluate(expr.value)
		self.environment.assign(expr.name, value)
		return value

	# Not yet given meaning: these evaluate to nil without touching their parts.
	@staticmethod
	def visit_Logical(expr:syntax.Logical): return None
	@staticmethod
	def visit_Call(expr:syntax.Call): return None
	@staticmethod
	def visit_Get(expr:syntax.Get): return None
	@staticmethod
	def visit_Set(expr:syntax.Set): return None
	@staticmethod
	def visit_This(expr:syntax.This): return None
	@staticmethod
	def visit_Super(expr:syntax.Super): return None

	###########################################################################

	def visit_Expression(self, stmt:syntax.Expression):
		self.evaluate(stmt.expression)

	def visit_Print(self, stmt:syntax.Print):
		value = self.evaluate(stmt.expression)
		print(stringify(value), file=self._stdout or sys.stdout)

	def visit_Var(self, stmt:syntax.Var):
		value = None
		if stmt.initializer is not None:
			value = self.evaluate(stmt.initializer)
		self.environment.define(stmt.name.text, value)

	def visit_Block(self, stmt:syntax.Block):
		self.execute_block(stmt.statements, Environment(self.environment))

	# Likewise inert, for now.
	@staticmethod
	def visit_If(stmt:syntax.If): pass
	@staticmethod
	def visit_While(stmt:syntax.While): pass
	@staticmethod
	def visit_Function(stmt:syntax.Function): pass
	@staticmethod
	def visit_Return(stmt:syntax.Return): pass
	@staticmethod
	def visit_Class(stmt:syntax.Class): pass

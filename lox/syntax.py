"""
The set of parse-nodes in simple form.
The parser builds these bottom-up; the evaluator only ever reads them.
Several kinds exist only so that the node taxonomy is complete:
the evaluator accepts them but gives them no meaning yet.
"""
from typing import Any, Optional, Sequence
from .ontology import Token, Phrase, Expr, Stmt

###############################################################################
#  Expressions

class Literal(Expr):
	def __init__(self, value:Any, token:Optional[Token]=None):
		self.value = value
		self._token = token
	def token(self): return self._token
	def __repr__(self): return "<Literal %r>" % (self.value,)

class Grouping(Expr):
	def __init__(self, expression:Expr):
		self.expression = expression
	def token(self): return self.expression.token()

class Unary(Expr):
	def __init__(self, operator:Token, right:Expr):
		self.operator, self.right = operator, right
	def token(self): return self.operator
	def __repr__(self): return "(%s %r)" % (self.operator.text, self.right)

class Binary(Expr):
	def __init__(self, left:Expr, operator:Token, right:Expr):
		self.left, self.operator, self.right = left, operator, right
	def token(self): return self.operator
	def __repr__(self): return "(%r %s %r)" % (self.left, self.operator.text, self.right)

class Variable(Expr):
	def __init__(self, name:Token):
		self.name = name
	def token(self): return self.name
	def __repr__(self): return "<ref:%s>" % self.name.text

class Assign(Expr):
	def __init__(self, name:Token, value:Expr):
		self.name, self.value = name, value
	def token(self): return self.name

class Logical(Expr):
	def __init__(self, left:Expr, operator:Token, right:Expr):
		self.left, self.operator, self.right = left, operator, right
	def token(self): return self.operator

class Call(Expr):
	def __init__(self, callee:Expr, paren:Token, arguments:Sequence[Expr]=()):
		self.callee, self.paren, self.arguments = callee, paren, arguments
	def token(self): return self.paren

class Get(Expr):
	def __init__(self, subject:Expr, name:Token):
		self.subject, self.name = subject, name
	def token(self): return self.name

class Set(Expr):
	def __init__(self, subject:Expr, name:Token, value:Expr):
		self.subject, self.name, self.value = subject, name, value
	def token(self): return self.name

class This(Expr):
	def __init__(self, keyword:Token):
		self.keyword = keyword
	def token(self): return self.keyword

class Super(Expr):
	def __init__(self, keyword:Token, method:Token):
		self.keyword, self.method = keyword, method
	def token(self): return self.keyword

###############################################################################
#  Statements

class Expression(Stmt):
	def __init__(self, expression:Expr):
		self.expression = expression
	def token(self): return self.expression.token()

class Print(Stmt):
	def __init__(self, expression:Expr):
		self.expression = expression
	def token(self): return self.expression.token()

class Var(Stmt):
	def __init__(self, name:Token, initializer:Optional[Expr]=None):
		self.name, self.initializer = name, initializer
	def token(self): return self.name
	def __repr__(self): return "<var %s>" % self.name.text

class Block(Stmt):
	def __init__(self, statements:Sequence[Stmt]):
		self.statements = statements

class If(Stmt):
	def __init__(self, condition:Expr, then_branch:Stmt, else_branch:Optional[Stmt]=None):
		self.condition = condition
		self.then_branch, self.else_branch = then_branch, else_branch

class While(Stmt):
	def __init__(self, condition:Expr, body:Stmt):
		self.condition, self.body = condition, body

class Function(Stmt):
	def __init__(self, name:Token, params:Sequence[Token], body:Sequence[Stmt]):
		self.name, self.params, self.body = name, params, body
	def token(self): return self.name

class Return(Stmt):
	def __init__(self, keyword:Token, value:Optional[Expr]=None):
		self.keyword, self.value = keyword, value
	def token(self): return self.keyword

class Class(Stmt):
	def __init__(self, name:Token, superclass:Optional[Variable], methods:Sequence[Function]=()):
		self.name, self.superclass, self.methods = name, superclass, methods
	def token(self): return self.name

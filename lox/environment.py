"""
Simplest possible environment concept.

This is the canonical list-structured search: one dictionary per
lexical scope, each with a link to the scope that encloses it.
The evaluator owns the chain and pushes and pops scopes in strict
stack order, so nothing here needs to worry about sharing.
"""
from typing import Any, Optional
from .ontology import Token
from .errors import UndefinedVariable

class Environment:
	enclosing: Optional["Environment"]

	def __init__(self, enclosing:Optional["Environment"]=None):
		self._bindings: dict[str, Any] = {}
		self.enclosing = enclosing

	def __repr__(self):
		depth, env = 0, self.enclosing
		while env is not None: depth, env = depth+1, env.enclosing
		return "<Environment depth=%d %r>" % (depth, sorted(self._bindings))

	def holds(self, name:str) -> bool:
		""" Only this scope; does not consult the enclosing ones. """
		return name in self._bindings

	def define(self, name:str, value:Any):
		""" Later definitions of the same name in the same scope simply win. """
		self._bindings[name] = value

	def get(self, name:Token) -> Any:
		env = self
		while env is not None:
			try: return env._bindings[name.text]
			except KeyError: env = env.enclosing
		raise UndefinedVariable(name)

	def assign(self, name:Token, value:Any):
		""" Never creates a binding: assigning to an unknown name is an error. """
		env = self
		while env is not None:
			if name.text in env._bindings:
				env._bindings[name.text] = value
				return
			env = env.enclosing
		raise UndefinedVariable(name)

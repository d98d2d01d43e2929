"""
The run-time error taxonomy. Parse errors belong to the parser, not here.
"""
from .ontology import Token

class LoxRuntimeError(Exception):
	""" Something went wrong while running the program. Fatal to the current run. """
	def __init__(self, token:Token, message:str):
		super().__init__(token, message)
		self.token = token
		self.message = message
	
	def __str__(self): return self.message

class OperandTypeError(LoxRuntimeError):
	""" An operator got an operand of the wrong kind. """

class UndefinedVariable(LoxRuntimeError):
	def __init__(self, name:Token):
		super().__init__(name, "Undefined variable '%s'." % name.text)
		self.name = name.text

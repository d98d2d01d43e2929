"""
The most-fundamental classes in the syntax class hierarchy.
They live apart from the concrete node types so that the error
module and the environment can mention tokens without importing
the whole of the syntax module.
"""
from typing import NamedTuple, Optional

class Token(NamedTuple):
	""" The occurrence of a lexeme somewhere in the source text. """
	text: str
	line: int = 0
	start: Optional[int] = None  # Character offset, when the parser knows it.
	
	def __repr__(self): return "<%s@%d>" % (self.text, self.line)
	
	def slice(self) -> Optional[slice]:
		if self.start is None: return None
		return slice(self.start, self.start + len(self.text))

class Phrase:
	""" Anything the parser might hand over as part of a tree. """
	def token(self) -> Optional[Token]:
		""" Return the token that best locates this phrase, if any """
		return None

class Expr(Phrase): pass

class Stmt(Phrase): pass

"""
Where errors go to be explained.

The interpreter hands each run-time error to a Report, which files it
as a Pic: an introduction, some annotated bits of source, and a footer.
Nothing reaches the console until someone asks the report to complain.
"""
import sys
from pathlib import Path
from typing import Any, Optional
from boozetools.support.failureprone import SourceText, illustration

from .ontology import Token
from .errors import LoxRuntimeError

class TooManyIssues(Exception):
	pass

class Report:
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, source:Optional[str]=None, path:Optional[Path]=None, max_issues:Optional[int]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._source = None if source is None else SourceText(source, filename=str(path or "<input>"))
		self._max_issues = max_issues
		self.had_runtime_error = False

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if self._max_issues is not None and len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()
		self.had_runtime_error = False

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def runtime_error(self, error:LoxRuntimeError):
		""" The evaluator calls this when a program dies of a run-time error. """
		self.had_runtime_error = True
		annotation = Annotation(error.token, self._source)
		footer = ["[line %d]" % error.token.line]
		self.issue(Pic(error.message, [annotation], footer))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def as_text(self) -> list[str]:
		return [i.as_text() for i in self._issues]

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

class Annotation:
	caption: str
	def __init__(self, token:Token, source:Optional[SourceText]=None, caption:str=""):
		self.token = token
		self.source = source
		self.caption = caption

	def illustrate(self) -> Optional[str]:
		""" Picture of the offending line, if the source text is on hand """
		span = self.token.slice()
		if self.source is None or span is None:
			return None
		row, col = self.source.find_row_col(span.start)
		single_line = self.source.line_of_text(row)
		width = max(span.stop - span.start, 1)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro]
		for ann in self._anns:
			picture = ann.illustrate()
			if picture is not None: lines.append(picture)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

"""
The run-time value model, and the handful of rules every operator leans on.
Lox values play themselves: nil is None, and then there are bool, float, and str.
"""
import math
from typing import Optional, Union

VALUE = Optional[Union[bool, float, str]]

def is_number(x) -> bool:
	return isinstance(x, float)

def as_value(x) -> VALUE:
	""" Host integers become doubles; too big for a double means infinity. """
	if isinstance(x, int) and not isinstance(x, bool):
		try: return float(x)
		except OverflowError: return math.copysign(math.inf, x)
	return x

def is_truthy(x:VALUE) -> bool:
	if x is None: return False
	if isinstance(x, bool): return x
	return True

def is_equal(a:VALUE, b:VALUE) -> bool:
	""" Total and kind-aware: never raises, and never equates values of different kinds. """
	if a is None: return b is None
	if b is None: return False
	if is_number(a): return is_number(b) and _same_double(a, b)
	return type(a) is type(b) and a == b

def _same_double(a:float, b:float) -> bool:
	# NaN equals itself, and zero differs from negative zero.
	if math.isnan(a) or math.isnan(b): return math.isnan(a) and math.isnan(b)
	return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)

def divide(a:float, b:float) -> float:
	""" IEEE-754 division, which Python only does for non-zero divisors. """
	try: return a / b
	except ZeroDivisionError:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)

def stringify(x:VALUE) -> str:
	if x is None: return "nil"
	if isinstance(x, bool): return "true" if x else "false"
	if is_number(x): return _number_text(x)
	return str(x)

def _number_text(x:float) -> str:
	if math.isnan(x): return "NaN"
	if math.isinf(x): return "Infinity" if x > 0 else "-Infinity"
	text = repr(x)
	if text.endswith(".0"): text = text[:-2]
	return text

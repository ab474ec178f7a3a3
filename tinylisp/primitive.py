"""
Build the primitive operator namespace.

Each operator is a reduction over a list of already-evaluated operands.
To add an operator, write its reduction and give it a line in OPS.
"""
from types import MappingProxyType
from typing import Callable, Optional, Sequence
from .syntax import EXPRESSION

class EvaluationError(Exception):
	""" Something went wrong while evaluating. The culprit is the expression to blame, if known. """
	culprit: Optional[EXPRESSION]
	def __init__(self, message:str, culprit:EXPRESSION=None):
		super().__init__(message)
		self.message, self.culprit = message, culprit
		self._context = None
	def blame(self, form:EXPRESSION):
		""" The enclosing form, for errors raised without a culprit of their own. """
		if self.culprit is None: self.culprit = self._context = form
	def __str__(self):
		# The message already names any culprit given at construction.
		if self._context is None: return self.message
		return "%s in %s" % (self.message, self._context)

class ArityError(EvaluationError): pass
class DivisionByZero(EvaluationError): pass

REDUCTION = Callable[[Sequence[float]], float]

class Primitive:
	""" The run-time value of an operator name. Apply it to a sequence of floats. """
	def __init__(self, glyph:str, reduction:REDUCTION):
		self.glyph, self._reduction = glyph, reduction
	def __call__(self, operands:Sequence[float]) -> float:
		return self._reduction(operands)
	def __str__(self): return self.glyph
	def __repr__(self): return "<Primitive %s>" % self.glyph

def _add(operands):
	total = 0.0
	for x in operands: total += x
	return total

def _subtract(operands):
	# A single operand comes back unchanged: there is no implied negation.
	if not operands: raise ArityError("Subtraction needs at least one operand")
	result = operands[0]
	for x in operands[1:]: result -= x
	return result

def _multiply(operands):
	product = 1.0
	for x in operands: product *= x
	return product

def _divide(operands):
	if not operands: raise ArityError("Division needs at least one operand")
	result = operands[0]
	for x in operands[1:]:
		if x == 0: raise DivisionByZero("Division by zero")
		result /= x
	return result

OPS : MappingProxyType = MappingProxyType({
	glyph: Primitive(glyph, fn) for glyph, fn in [
		('+', _add),
		('-', _subtract),
		('*', _multiply),
		('/', _divide),
	]
})

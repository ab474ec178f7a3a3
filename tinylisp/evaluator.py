"""
Direct interpretation of expression trees.

Numbers play themselves. Symbols name primitives. A non-empty list applies
the operator at its head to the values of the rest, strictly and left-to-right.
Nothing persists between calls, and the tree is never modified.
"""
from typing import Optional, Union
from boozetools.support.foundation import Visitor
from . import syntax
from .primitive import OPS, Primitive, EvaluationError
from .diagnostics import Report

VALUE = Union[syntax.Number, Primitive, None]

class UnboundSymbol(EvaluationError):
	def __init__(self, symbol:syntax.Symbol):
		super().__init__("Unbound symbol %r" % symbol.name, symbol)

class UnknownOperator(EvaluationError):
	def __init__(self, head:syntax.EXPRESSION):
		super().__init__("Unknown operator: %s" % head, head)
		self.name = str(head)

class TypeMismatch(EvaluationError):
	def __init__(self, operand:syntax.EXPRESSION, got:VALUE):
		what = "nothing" if got is None else "the operator %s" % got
		super().__init__("Expected a number, but got %s" % what, operand)

class Evaluator(Visitor):
	"""
	Give it a verbose report, and it will trace each reduction on stderr.
	Otherwise, it does not care about the report.
	"""
	def __init__(self, report:Optional[Report]=None):
		self._report = report

	def evaluate(self, expr:syntax.EXPRESSION) -> VALUE:
		return self.visit(expr)

	def visit_Number(self, expr:syntax.Number) -> syntax.Number:
		return expr

	def visit_Symbol(self, expr:syntax.Symbol) -> Primitive:
		try: return OPS[expr.name]
		except KeyError: raise UnboundSymbol(expr) from None

	def visit_List(self, expr:syntax.List) -> VALUE:
		if not expr.items:
			return None
		head, *operands = expr.items
		operator = self._operator(head)
		values = [self._operand(x) for x in operands]
		try: result = syntax.Number(operator(values))
		except EvaluationError as ex:
			ex.blame(expr)
			raise
		if self._report is not None:
			self._report.info("%s => %s" % (expr, result))
		return result

	def _operator(self, head:syntax.EXPRESSION) -> Primitive:
		if isinstance(head, syntax.Symbol):
			try: return OPS[head.name]
			except KeyError: raise UnknownOperator(head) from None
		it = self.visit(head)
		if isinstance(it, Primitive): return it
		raise UnknownOperator(head)

	def _operand(self, expr:syntax.EXPRESSION) -> float:
		it = self.visit(expr)
		if isinstance(it, syntax.Number): return it.value
		raise TypeMismatch(expr, it)

_plain = Evaluator()

def evaluate(expr:syntax.EXPRESSION) -> VALUE:
	""" Reduce an expression to its value: a Number, a Primitive, or None for the empty list. """
	return _plain.evaluate(expr)

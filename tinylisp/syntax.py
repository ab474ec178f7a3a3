"""
The three kinds of expression node the reader produces.
Nothing else counts as an expression; the evaluator's Visitor covers exactly these.

The reader sets the span (a slice of the source text) so diagnostics can point at things.
Spans take no part in equality, so a node read from text equals one built by hand.
"""
from typing import Optional, Sequence, Union

class Expression:
	""" One parsed unit of the input language. """
	span: Optional[slice] = None

class Number(Expression):
	def __init__(self, value, span:slice=None):
		self.value, self.span = float(value), span
	def __eq__(self, other): return type(other) is Number and other.value == self.value
	def __hash__(self): return hash(self.value)
	def __str__(self): return "%f" % self.value
	def __repr__(self): return "<Number %r>" % self.value

class Symbol(Expression):
	def __init__(self, name:str, span:slice=None):
		assert isinstance(name, str) and name, name
		self.name, self.span = name, span
	def __eq__(self, other): return type(other) is Symbol and other.name == self.name
	def __hash__(self): return hash(self.name)
	def __str__(self): return self.name
	def __repr__(self): return "<Symbol %s>" % self.name

class List(Expression):
	items: tuple[Expression, ...]
	def __init__(self, items:Sequence[Expression]=(), span:slice=None):
		self.items, self.span = tuple(items), span
	def __eq__(self, other): return type(other) is List and other.items == self.items
	def __hash__(self): return hash(self.items)
	def __str__(self): return "(" + " ".join(map(str, self.items)) + ")"
	def __repr__(self): return "<List %s>" % self

EXPRESSION = Union[Number, Symbol, List]

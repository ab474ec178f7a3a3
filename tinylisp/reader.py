"""
Turn text into expression trees.

The scanning is simple enough to do by hand: one character of lookahead
(two, for the minus sign) decides between a list, a number, and a symbol.
"""
from typing import Iterator
from boozetools.parsing.interface import ParseError
from .syntax import EXPRESSION, Number, Symbol, List

class ReadError(ParseError):
	""" Reading failed at offset `spot` of the text. """
	def __init__(self, message:str, spot:int):
		super().__init__(message, spot)
		self.message, self.spot = message, spot
	def __str__(self): return "%s at offset %d" % (self.message, self.spot)

class UnexpectedEndOfInput(ReadError):
	def __init__(self, spot:int):
		super().__init__("Unexpected end of input", spot)

class MalformedNumber(ReadError):
	def __init__(self, lexeme:str, spot:int):
		super().__init__("Malformed number %r" % lexeme, spot)
		self.lexeme = lexeme

class UnexpectedCloseParen(ReadError):
	def __init__(self, spot:int):
		super().__init__("Unexpected ')'", spot)

class TrailingText(ReadError):
	def __init__(self, spot:int):
		super().__init__("Expected only one expression, but more text follows", spot)

DELIMITERS = frozenset("()")

class Reader:
	""" A text and a scan position within it. Each call to `expression` consumes one expression. """

	def __init__(self, text:str, index:int=0):
		if not 0 <= index <= len(text):
			raise ValueError("Cursor %d is outside the text, which has length %d" % (index, len(text)))
		self.text, self.index = text, index

	def at_end(self) -> bool:
		return self.index >= len(self.text)

	def skip_whitespace(self):
		text = self.text
		while self.index < len(text) and text[self.index].isspace():
			self.index += 1

	def expression(self) -> EXPRESSION:
		self.skip_whitespace()
		if self.at_end():
			raise UnexpectedEndOfInput(self.index)
		c = self.text[self.index]
		if c == '(': return self._list()
		if c == ')': raise UnexpectedCloseParen(self.index)
		if self._looks_numeric(): return self._number()
		return self._symbol()

	def _list(self) -> List:
		start = self.index
		self.index += 1
		items = []
		while True:
			self.skip_whitespace()
			if self.at_end():
				raise UnexpectedEndOfInput(self.index)
			if self.text[self.index] == ')':
				self.index += 1
				return List(items, slice(start, self.index))
			items.append(self.expression())

	def _looks_numeric(self) -> bool:
		text, i = self.text, self.index
		if text[i] == '-': i += 1
		return i < len(text) and text[i].isdecimal()

	def _number(self) -> Number:
		text, start = self.text, self.index
		if text[self.index] == '-': self.index += 1
		while self.index < len(text) and (text[self.index].isdecimal() or text[self.index] == '.'):
			self.index += 1
		lexeme = text[start:self.index]
		try: value = float(lexeme)
		except ValueError: raise MalformedNumber(lexeme, start) from None
		return Number(value, slice(start, self.index))

	def _symbol(self) -> Symbol:
		text, start = self.text, self.index
		while self.index < len(text) and not (text[self.index].isspace() or text[self.index] in DELIMITERS):
			self.index += 1
		return Symbol(text[start:self.index], slice(start, self.index))

def parse_expression(text:str, cursor:int=0) -> tuple[EXPRESSION, int]:
	""" Read one expression starting at the cursor. Return it along with the cursor just past it. """
	reader = Reader(text, cursor)
	return reader.expression(), reader.index

def read(text:str) -> EXPRESSION:
	""" The text must hold exactly one expression, give or take whitespace. """
	reader = Reader(text)
	expr = reader.expression()
	reader.skip_whitespace()
	if not reader.at_end():
		raise TrailingText(reader.index)
	return expr

def read_all(text:str) -> Iterator[EXPRESSION]:
	reader = Reader(text)
	reader.skip_whitespace()
	while not reader.at_end():
		yield reader.expression()
		reader.skip_whitespace()

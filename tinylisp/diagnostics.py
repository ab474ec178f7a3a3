import sys, random
from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'The parentheses have defeated me.',
		'I have no idea what the right answer is.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues on their way to the console. Also the place verbose chatter goes. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
		self._text = ""
		self._source = None
		self._label = None

	def ok(self): return not self._issues
	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def set_source(self, text:str, label:str):
		""" Subsequent issues refer to this text. """
		self._text = text
		self._source = SourceText(text, filename=label)
		self._label = label

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message="There should be no issues."):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the driver calls when the reader or evaluator fails:

	def read_failed(self, ex):
		""" ex is a reader.ReadError """
		intro = "Could not read %s: %s." % (self._label, ex.message)
		self.issue(Pic(intro, self._annotate(slice(ex.spot, ex.spot+1), "here")))

	def evaluation_failed(self, ex):
		""" ex is a primitive.EvaluationError """
		intro = "Could not evaluate %s: %s." % (self._label, ex.message)
		culprit = ex.culprit
		if culprit is None:
			self.issue(Pic(intro, []))
		elif culprit.span is None:
			self.issue(Pic(intro, [], ["The trouble is with "+str(culprit)]))
		else:
			self.issue(Pic(intro, self._annotate(culprit.span, "this one")))

	def nested_too_deeply(self, verb:str, span:slice):
		intro = "Could not %s %s: It is nested too deeply." % (verb, self._label)
		self.issue(Pic(intro, self._annotate(span, "starting here"), ["Python ran out of stack."]))

	def _annotate(self, span:slice, caption:str) -> list["Annotation"]:
		if self._source is None: return []
		limit = len(self._text.rstrip())
		if not limit: return []
		start = min(span.start, limit-1)
		end_of_line = self._text.find("\n", start)
		if end_of_line >= 0: limit = min(limit, end_of_line)
		width = max(1, min(span.stop, limit) - start)
		return [Annotation(self._source, start, width, caption)]

class Annotation:
	def __init__(self, source:SourceText, start:int, width:int, caption:str=""):
		self.source = source
		self.start, self.width = start, width
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.start)
		single_line = self.source.line_of_text(row)
		return illustration(single_line, col, self.width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def intro(self) -> str: return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

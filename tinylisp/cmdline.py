"""
This is an interpreter for a tiny arithmetic Lisp.

{0}

For example:

    tinylisp program.lisp

will evaluate each expression in program.lisp and print the results.

    tinylisp -e "(+ 1 2 (* 3 4))"

evaluates just the one expression.

    tinylisp -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

DEMONSTRATION = "(+ 1 2 (* 3 4))"

parser = argparse.ArgumentParser(
	prog="tinylisp",
	description="Interpreter for a tiny arithmetic Lisp.",
)
parser.add_argument("source", nargs="?", help="a file of expressions; try examples/arithmetic.lisp for example.")
parser.add_argument('-e', "--expression", help="Evaluate this text instead of reading a file.")
parser.add_argument('-c', "--check", action="store_true", help="Read the expressions but do not actually evaluate them.")
parser.add_argument('-v', "--verbose", action="count", help="Trace each reduction on stderr.")
parser.add_argument("--demo", action="store_true", help="Evaluate the demonstration expression %s"%DEMONSTRATION)

def run(args) -> int:
	from .diagnostics import Report, TooManyIssues
	report = Report(verbose=args.verbose)
	if args.expression is not None:
		text, label = args.expression, "the expression"
	elif args.demo:
		text, label = DEMONSTRATION, "the demonstration"
	elif args.source is not None:
		path = Path.cwd() / args.source
		try: text = path.read_text(encoding="utf-8")
		except OSError as ex:
			print("Could not open %s: %s"%(path, ex.strerror), file=sys.stderr)
			return 1
		label = str(path)
	else:
		parser.error("Give a source file, an --expression, or --demo.")
	report.set_source(text, label)
	try:
		if interpret(text, report, check=args.check):
			if args.check:
				print("Looks plausible to me.", file=sys.stderr)
			return 0
	except TooManyIssues:
		pass
	report.complain_to_console()
	return 1

def interpret(text:str, report, *, check=False) -> bool:
	"""
	Read and evaluate each expression in the text, printing each result that has a value.
	Stop at the first failure, which goes to the report. Return True if all went well.
	"""
	from .reader import Reader, ReadError
	from .evaluator import Evaluator
	from .primitive import EvaluationError
	reader = Reader(text)
	evaluator = Evaluator(report)
	while True:
		try:
			reader.skip_whitespace()
			if reader.at_end(): return True
			start = reader.index
			expr = reader.expression()
		except ReadError as ex:
			report.read_failed(ex)
			return False
		except RecursionError:
			report.nested_too_deeply("read", slice(start, start+1))
			return False
		report.info("Read:", expr)
		if check: continue
		try: result = evaluator.evaluate(expr)
		except EvaluationError as ex:
			report.evaluation_failed(ex)
			return False
		except RecursionError:
			report.nested_too_deeply("evaluate", expr.span)
			return False
		if result is not None:
			print(result)

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))

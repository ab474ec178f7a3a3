from pathlib import Path
import io
import unittest
from unittest import mock

from tinylisp import cmdline

base_folder = Path(__file__).parent.parent
example_folder = base_folder/"examples"

def _run(*argv):
	""" Run the command line; return the exit status and whatever got printed. """
	args = cmdline.parser.parse_args([str(a) for a in argv])
	with mock.patch("sys.stdout", new_callable=io.StringIO) as out, mock.patch("sys.stderr", new_callable=io.StringIO) as err:
		status = cmdline.run(args)
	return status, out.getvalue(), err.getvalue()

class ExampleSmokeTests(unittest.TestCase):
	""" Run all the examples; Test for no smoke. """

	def test_arithmetic(self):
		status, out, err = _run(example_folder/"arithmetic.lisp")
		self.assertEqual(0, status, err)
		self.assertEqual(["15.000000", "5.000000", "7.000000", "10.000000", "-2.500000"], out.split())

	def test_nested(self):
		status, out, err = _run(example_folder/"nested.lisp")
		self.assertEqual(0, status, err)
		self.assertEqual(["5.000000", "102.000000"], out.split())

	def test_failure_is_explained(self):
		status, out, err = _run(example_folder/"division_by_zero.lisp")
		self.assertEqual(1, status)
		self.assertEqual("3.000000\n", out)
		self.assertIn("Division by zero", err)

	def test_demo(self):
		status, out, err = _run("--demo")
		self.assertEqual(0, status)
		self.assertEqual("15.000000\n", out)

	def test_expression(self):
		status, out, err = _run("-e", "(* 6 (- 10 3))")
		self.assertEqual(0, status)
		self.assertEqual("42.000000\n", out)

	def test_read_failure_is_explained(self):
		status, out, err = _run("-e", "(+ 1 2")
		self.assertEqual(1, status)
		self.assertEqual("", out)
		self.assertIn("Unexpected end of input", err)

	def test_check(self):
		status, out, err = _run("-c", "-e", "(/ 1 0)")
		self.assertEqual(0, status)
		self.assertEqual("", out)
		self.assertIn("Looks plausible", err)

	def test_verbose(self):
		status, out, err = _run("-v", "-e", "(+ 1 (* 2 3))")
		self.assertEqual(0, status)
		self.assertIn("(* 2.000000 3.000000) => 6.000000", err)
		self.assertEqual("7.000000\n", out)

	def test_missing_file(self):
		status, out, err = _run(example_folder/"no_such_file.lisp")
		self.assertEqual(1, status)
		self.assertIn("Could not open", err)

	def test_usage_without_arguments(self):
		with mock.patch("sys.argv", ["tinylisp"]), mock.patch("builtins.print") as fake_print:
			cmdline.main()
		self.assertIn("usage: tinylisp", fake_print.call_args.args[0])


if __name__ == '__main__':
	unittest.main()

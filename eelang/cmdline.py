"""
This runs programs in the Easily Extendable Language.

{0}

For example:

    eel program.eel

will run program.eel and show what it printed, warned, or complained about.

    eel -h

will explain all the arguments.

Mostly the language is meant to be embedded: see eelang.executive.run
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="eel",
	description="Interpreter for the Easily Extendable Language.",
)
parser.add_argument("program", help="try examples/tour.eel for example.")
parser.add_argument('-r', "--raw", action="store_true", help="Show log entries as kind,line;text instead of prose.")
parser.add_argument('-v', "--verbose", action="count", help="Trace the evaluator on stderr.")

def run(args):
	from boozetools.support.failureprone import SourceText
	from .diagnostics import Report
	from .executive import run as run_program
	from .front_end import split_source, clean
	from .ontology import Kind
	from .primitive import REGISTRY
	path = Path.cwd() / args.program
	try:
		with open(path, "r", encoding="utf-8") as fh: text = fh.read()
	except OSError as ex:
		print("Could not read %s: %s" % (path, ex.strerror), file=sys.stderr)
		return 1
	report = Report(verbose=args.verbose)
	entries = run_program(text, report=report)
	for entry in entries:
		stream = sys.stdout if entry.kind == Kind.OUTPUT else sys.stderr
		print(entry.render() if args.raw else entry.describe(), file=stream)
	lines = {line.number: line for line in clean(split_source(text), REGISTRY.skip_markers())}
	report.review(SourceText(text, filename=str(path)), lines, entries)
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))

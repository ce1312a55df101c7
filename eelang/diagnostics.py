import sys, random
from typing import Any, Mapping, Sequence
from boozetools.support.failureprone import SourceText, illustration

from .ontology import Kind, LogEntry
from .front_end import SourceLine

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Nuts', 'Rats',
	]

	resignations = [
		'The program stops here.',
		'That line did not go as planned.',
		'Nothing after this gets run.',
		'Have a look at the line below.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Carries the verbosity switch for evaluator tracing,
	and collects whatever went wrong for the console.
	"""
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		if len(self._issues) < self._max_issues:
			self._issues.append(it)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def review(self, source:SourceText, lines:Mapping[int, SourceLine], entries:Sequence[LogEntry]):
		""" One issue per error entry, pointing at the line that raised it. """
		for entry in entries:
			if entry.kind == Kind.ERROR:
				where = lines.get(entry.line)
				problem = [] if where is None else [Annotation(source, where)]
				self.issue(Pic(entry.text, problem))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

class Annotation:
	def __init__(self, source:SourceText, where:SourceLine, caption:str=""):
		self.source = source
		self.slice = slice(where.offset, where.offset + len(where.text))
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation]):
		self._intro, self._anns = intro, anns
	def as_text(self):
		lines = [self._intro]
		for ann in self._anns:
			lines.append(ann.illustrate())
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

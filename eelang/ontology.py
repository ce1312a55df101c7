"""
The most-fundamental classes: what a log entry is, what a command is,
and the one shape every evaluation step hands back to its caller.

These live apart from the evaluator so that the built-in commands
can be defined without dragging the whole engine along.
"""
from enum import IntEnum
from typing import Callable, Iterable, NamedTuple, Optional

TRUE = "true"

class Kind(IntEnum):
	OUTPUT = 0
	WARNING = 1
	ERROR = 2
	HALTED = 3

_PREFIX = {
	Kind.OUTPUT: "",
	Kind.WARNING: "WARNING: ",
	Kind.ERROR: "ERROR: ",
	Kind.HALTED: "EXECUTION HALTED: ",
}

class LogEntry(NamedTuple):
	""" Text of None means the entry is suppressed, as for a comment. """
	kind: Kind
	text: Optional[str]
	line: int = 0

	def at(self, line:int) -> "LogEntry":
		return self._replace(line=line)

	def render(self) -> str:
		return "%d,%s;%s" % (self.kind, self.line, self.text)

	def describe(self) -> str:
		return _PREFIX[self.kind] + self.text

	def __str__(self): return self.render()


class CommandResult:
	"""
	Every handler returns one of these, and so does every composed evaluation.
	A handler normally contributes at most one log entry and at most one write,
	but the composed form for an enclosing call carries any number of each.
	"""
	__slots__ = ("value", "log", "writes", "halt")

	def __init__(self, value=TRUE, log:Iterable[LogEntry]=(), writes:dict=None, halt=False):
		self.value = TRUE if value is None else value
		self.log = tuple(log)
		self.writes = dict(writes or ())
		self.halt = bool(halt)

	@staticmethod
	def emit(kind:Kind, text:str, halt=False) -> "CommandResult":
		return CommandResult(log=[LogEntry(kind, text)], halt=halt)

	@staticmethod
	def failure(text:str) -> "CommandResult":
		return CommandResult.emit(Kind.ERROR, text, halt=True)

	def __repr__(self):
		return "<CommandResult %r log=%r writes=%r halt=%r>" % (self.value, self.log, self.writes, self.halt)


def compose(subs:Iterable[CommandResult], own:CommandResult) -> CommandResult:
	"""
	Sub-evaluation logs come first, in the order produced.
	Writes accumulate left to right, so the enclosing call's own write wins.
	Halting is sticky: any participant that raised it raises it for the whole.
	"""
	log, writes, halt = [], {}, own.halt
	for sub in subs:
		log.extend(sub.log)
		writes.update(sub.writes)
		halt = halt or sub.halt
	log.extend(own.log)
	writes.update(own.writes)
	return CommandResult(own.value, log, writes, halt)


HANDLER = Callable[[list], CommandResult]

class Command(NamedTuple):
	""" An arity of None means the command takes every remaining token. """
	name: str
	arity: Optional[int]
	handler: HANDLER
	is_operator: bool = False
	is_skip: bool = False

	def apply(self, params:list[str]) -> CommandResult:
		result = self.handler(params)
		return CommandResult() if result is None else result

"""
Overall control for running a program: one line at a time, one shared environment.

Variable writes from a line become visible to the next line, never mid-line.
The first line whose composed result says halt is the last line run.
"""
from typing import Optional, Sequence
from .ontology import Kind, LogEntry
from .environment import Environment
from .space import Registry
from .diagnostics import Report
from .evaluator import Engine
from .front_end import SOURCE, split_source, clean, tokenize
from .primitive import REGISTRY

NO_OUTPUT = LogEntry(Kind.OUTPUT, "no output", 0)

def run(code:SOURCE, *, registry:Registry=None, report:Report=None, env:Environment=None) -> list[LogEntry]:
	return run_lines(split_source(code), registry=registry, report=report, env=env)

def run_lines(lines:Sequence[str], *, registry:Registry=None, report:Report=None, env:Optional[Environment]=None) -> list[LogEntry]:
	"""
	Any host-level fault while evaluating a line becomes a single error entry,
	and then the rest of the program does not run either.
	"""
	if not isinstance(lines, (list, tuple)):
		raise TypeError("expected a list of lines, got %s" % type(lines).__name__)
	if registry is None: registry = REGISTRY
	if env is None: env = Environment.fresh()
	engine = Engine(registry, report)
	log = []
	for line in clean(split_source(list(lines)), registry.skip_markers()):
		name, words = tokenize(line.text)
		try:
			result = engine.evaluate(env, name, words)
		except Exception as ex:
			log.append(LogEntry(Kind.ERROR, "%s: %s" % (type(ex).__name__, ex), line.number))
			break
		log.extend(entry.at(line.number) for entry in result.log if entry.text is not None)
		env.update(result.writes)
		if result.halt: break
	return log or [NO_OUTPUT]

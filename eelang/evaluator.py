"""
The evaluation engine.

One call handles one command name and its raw argument words. It works in four moves:
substitute variables (once, not recursively), reduce nested expressions left to right,
dispatch to the outer command's handler, and compose everything into one CommandResult.

Reduction mixes two forms on the same line:

	1 ++ 2 ** 2         infix operators, chained leftward with no precedence: (1+2)*2
	print -min 1 2      a dash-prefixed command soaks up as many words as its arity says

Consumed words become tombstones in place. A tombstone under the scan index
means the list has gaps, so the list gets compacted and the scan starts over.
Nothing ever hands a tombstone to a handler.

Sub-evaluations may raise the halt flag, but that does not stop the reduction.
The flag just rides along to the composed result, where the program runner sees it.
"""
import re
from typing import NamedTuple, Optional, Union
from .ontology import Command, CommandResult, compose
from .environment import Environment
from .space import Registry
from .diagnostics import Report

_REFERENCE = re.compile(r"(?<!\S)-([\w-]+)")

class _Tombstone:
	def __repr__(self): return "<tombstone>"

TOMBSTONE = _Tombstone()

class Literal(NamedTuple):
	text: str

class OperatorSlot(NamedTuple):
	command: Command

class SkipMarker(NamedTuple):
	command: Command

class Invocation(NamedTuple):
	command: Command

TOKEN = Union[_Tombstone, Literal, OperatorSlot, SkipMarker, Invocation]

class Abandon(Exception):
	""" A skip-marker turned up where an operator or its right operand belonged. """

def substitute(env:Environment, word:str) -> str:
	def replace(match):
		value = env.read(match.group(1))
		return match.group(0) if value is None else value
	return _REFERENCE.sub(replace, word)

def _compact(words:list) -> list:
	return [w for w in words if w is not TOMBSTONE]

class Engine:
	def __init__(self, registry:Registry, report:Optional[Report]=None):
		self._registry = registry
		self._report = report or Report(verbose=0)

	def classify(self, word) -> TOKEN:
		if word is TOMBSTONE: return TOMBSTONE
		registry = self._registry
		command = registry.skip(word)
		if command is not None: return SkipMarker(command)
		command = registry.operator(word)
		if command is not None: return OperatorSlot(command)
		if word.startswith("-"):
			command = registry.invocation(word[1:])
			if command is not None: return Invocation(command)
		return Literal(word)

	def evaluate(self, env:Environment, name:str, words:list) -> CommandResult:
		command = self._registry.lookup(name)
		if command is None:
			return CommandResult.failure('Command "%s" Not Found.' % name)
		info = self._report.info
		info("executing", name)
		words = [substitute(env, str(w)) for w in words if w is not TOMBSTONE]
		info("substituted", words)
		subs = []
		try: self._reduce(env, words, subs)
		except Abandon:
			info("abandoned", name)
			return CommandResult()
		params = _compact(words)
		info("dispatching", name, params)
		return compose(subs, command.apply(params))

	def _reduce(self, env:Environment, words:list, subs:list[CommandResult]):
		classify = self.classify
		i = 0
		while i < len(words):
			here = classify(words[i])
			if here is TOMBSTONE:
				words[:] = _compact(words)
				i = 0
				continue
			if i + 1 < len(words):
				slot = classify(words[i+1])
				if isinstance(slot, SkipMarker): raise Abandon
				if isinstance(slot, OperatorSlot) and i + 2 < len(words):
					if isinstance(classify(words[i+2]), SkipMarker): raise Abandon
					sub = self.evaluate(env, slot.command.name, [words[i], words[i+2]])
					subs.append(sub)
					words[i] = sub.value
					words[i+1] = words[i+2] = TOMBSTONE
					continue
			if isinstance(here, Invocation):
				# An operator's value may name a command, with the operator's gaps right behind it.
				words[i+1:] = _compact(words[i+1:])
				arity = here.command.arity
				end = len(words) if arity is None else min(len(words), i + 1 + arity)
				args = words[i+1:end]
				for j in range(i+1, end): words[j] = TOMBSTONE
				sub = self.evaluate(env, here.command.name, args)
				subs.append(sub)
				words[i] = sub.value
			i += 1

"""
The command registry: a name-space of command descriptors.

Prefix commands get looked up by name after the evaluator strips the dash.
Operators and skip-markers get recognized structurally, by the bare token
sitting where an operator could go. Either way it's the same table.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional
from .ontology import Command

class AlreadyExists(KeyError): pass

class Registry:
	""" Lightly enhanced dictionary: It does not like duplicate keys. """
	_commands: Mapping[str, Command]

	def __init__(self, commands:Iterable[Command]=()):
		self._commands = {}
		for c in commands: self.define(c)

	def __contains__(self, key:str) -> bool:
		return key in self._commands

	def __len__(self): return len(self._commands)

	def define(self, command:Command) -> Command:
		if command.name in self._commands:
			raise AlreadyExists(command.name)
		self._commands[command.name] = command
		return command

	def freeze(self) -> "Registry":
		frozen = Registry()
		frozen._commands = MappingProxyType(dict(self._commands))
		return frozen

	def lookup(self, key:str) -> Optional[Command]:
		return self._commands.get(key)

	def operator(self, key:str) -> Optional[Command]:
		c = self._commands.get(key)
		if c is not None and c.is_operator and not c.is_skip: return c

	def skip(self, key:str) -> Optional[Command]:
		c = self._commands.get(key)
		if c is not None and c.is_skip: return c

	def invocation(self, key:str) -> Optional[Command]:
		c = self._commands.get(key)
		if c is not None and not (c.is_operator or c.is_skip): return c

	def skip_markers(self) -> tuple[str, ...]:
		return tuple(name for name, c in self._commands.items() if c.is_skip)

	def each_command(self) -> Iterable[Command]:
		return self._commands.values()

"""
Simplest possible environment concept.

There is no scope. There is one flat mapping per program run.
Entries get overwritten but never removed.
"""
import re
from typing import Mapping, Optional

VERSION = "1.2.0"
LANG = "python"
UNBOUNDED = str(2**52)

_NAME = re.compile(r"[A-Za-z0-9_-]+")

def is_valid_name(name:str) -> bool:
	return isinstance(name, str) and _NAME.fullmatch(name) is not None

class Environment:
	def __init__(self, bindings:Mapping[str, str]=()):
		self._bindings = dict(bindings)

	@staticmethod
	def fresh() -> "Environment":
		""" The pre-seeded entries are read-only by convention only. """
		return Environment({"VERSION": VERSION, "LANG": LANG, "UNBOUNDED": UNBOUNDED})

	def __contains__(self, name:str) -> bool: return name in self._bindings

	def read(self, name:str) -> Optional[str]:
		return self._bindings.get(name)

	def write(self, name:str, value:str):
		self._bindings[name] = value
		return value

	def update(self, writes:Mapping[str, str]): self._bindings.update(writes)

	def snapshot(self) -> dict[str, str]: return dict(self._bindings)

	def __repr__(self): return "<Environment %r>" % self._bindings

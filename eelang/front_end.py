"""
Everything between raw source and the evaluator: split into lines,
throw away the blanks and the comments, and split a line into words.
"""
from typing import NamedTuple, Sequence, Union

SOURCE = Union[str, Sequence[str]]

class SourceLine(NamedTuple):
	number: int  # One-based, counting every line of the original source.
	offset: int  # Where the first non-blank character sits within the joined source.
	text: str

def split_source(code:SOURCE) -> list[str]:
	if isinstance(code, str): return code.split("\n")
	if isinstance(code, (list, tuple)):
		return ["" if line is None else str(line) for line in code]
	raise TypeError("expected a string or a list of lines, got %s" % type(code).__name__)

def clean(lines:Sequence[str], skip_markers:Sequence[str]=()) -> list[SourceLine]:
	result = []
	offset = 0
	for number, line in enumerate(lines, 1):
		trimmed = line.strip()
		if trimmed and not trimmed.startswith(tuple(skip_markers)):
			lead = len(line) - len(line.lstrip())
			result.append(SourceLine(number, offset + lead, trimmed))
		offset += len(line) + 1
	return result

def tokenize(text:str) -> tuple[str, list[str]]:
	""" Single spaces only: a double space yields an empty word, and that's fine. """
	words = text.split(" ")
	return words[0], words[1:]

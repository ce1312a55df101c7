"""
Build the primitive command registry.
Also, the coercions between text (the only type there is)
and the numbers and flags that some built-ins think in.

Every handler takes the list of text parameters and returns a CommandResult.
Fixed-arity handlers look only at the parameters they need; if too few arrive,
that's a host-level fault which the program runner turns into an error entry.
"""
import math, operator, random, re
from decimal import Decimal
from typing import Callable
from .ontology import Command, CommandResult, Kind, LogEntry, TRUE
from .environment import is_valid_name
from .space import Registry

FALSE = "false"

_NUMERAL = re.compile(r"[+-]?(?:Infinity|NaN|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

def _fractional_text(value:float) -> str:
	""" Shortest round-trip digits, positional down to 1e-6 and exponential below that. """
	text = repr(value)
	if "e" not in text: return text
	mantissa, exponent = text.split("e")
	exponent = int(exponent)
	if -7 < exponent < 21: return format(Decimal(text), "f")
	return "%se%s%d" % (mantissa, "+" if exponent > 0 else "-", abs(exponent))

def as_text(value) -> str:
	if isinstance(value, bool): return TRUE if value else FALSE
	if isinstance(value, float):
		if math.isnan(value): return "NaN"
		if math.isinf(value): return "Infinity" if value > 0 else "-Infinity"
		if value.is_integer() and abs(value) < 1e21: return str(int(value))
		return _fractional_text(value)
	return str(value)

def as_number(text:str) -> float:
	""" Malformed text raises ValueError. That is deliberate. """
	text = as_text(text).strip()
	if _NUMERAL.fullmatch(text) is None:
		raise ValueError("could not convert string to float: %r" % text)
	return float(text)

def is_numeric(text:str) -> bool:
	try: as_number(text)
	except ValueError: return False
	return True

def truthy(text:str) -> bool:
	return text not in ("", FALSE)

_registry = Registry()

def _command(name:str, arity=None, **flags):
	def decorate(fn):
		_registry.define(Command(name, arity, fn, **flags))
		return fn
	return decorate

def _value(it) -> CommandResult: return CommandResult(as_text(it))

###############################################################################

def _log_command(name:str, kind:Kind, halt:bool):
	_command(name)(lambda p: CommandResult.emit(kind, " ".join(p), halt=halt))

_log_command("print", Kind.OUTPUT, False)
_log_command("warn", Kind.WARNING, False)
_log_command("error", Kind.ERROR, True)
_log_command("stop", Kind.HALTED, True)

@_command("set")
def _set(p):
	name = p[0] if p else ""
	if not is_valid_name(name):
		return CommandResult.failure('Invalid variable name "%s".' % name)
	value = " ".join(p[1:])
	return CommandResult(value, writes={name: value})

###############################################################################

def _cbrt(x):
	if not math.isfinite(x): return x
	r = round(abs(x) ** (1/3))
	if r ** 3 == abs(x): return math.copysign(r, x)
	return math.copysign(abs(x) ** (1/3), x)

def _round(x): return math.floor(x + 0.5)

NUMERIC: dict[str, tuple[int, Callable]] = {
	"add": (2, operator.add),
	"sub": (2, operator.sub),
	"mul": (2, operator.mul),
	"div": (2, operator.truediv),
	"pow": (2, math.pow),
	"mod": (2, math.fmod),
	"min": (2, min),
	"max": (2, max),
	"sqrt": (1, math.sqrt),
	"cbrt": (1, _cbrt),
	"abs": (1, abs),
	"ceil": (1, math.ceil),
	"floor": (1, math.floor),
	"round": (1, _round),
	"cos": (1, math.cos),
	"cosh": (1, math.cosh),
	"acos": (1, math.acos),
	"acosh": (1, math.acosh),
	"sin": (1, math.sin),
	"sinh": (1, math.sinh),
	"asin": (1, math.asin),
	"asinh": (1, math.asinh),
	"tan": (1, math.tan),
	"tanh": (1, math.tanh),
	"atan": (1, math.atan),
	"atan2": (2, math.atan2),
	"atanh": (1, math.atanh),
	"log": (1, math.log),
	"log10": (1, math.log10),
	"log2": (1, math.log2),
}

def _numeric_handler(arity:int, fn:Callable):
	def handler(p):
		return _value(float(fn(*map(as_number, p[:arity]))))
	return handler

for _name, (_arity, _fn) in NUMERIC.items():
	_command(_name, _arity)(_numeric_handler(_arity, _fn))

###############################################################################

def _either_way(numeric:Callable, textual:Callable):
	""" Compare as numbers when both sides are numbers; otherwise as text. """
	def compare(a, b):
		if is_numeric(a) and is_numeric(b): return numeric(as_number(a), as_number(b))
		return textual(a, b)
	return compare

_loosely_equals = _either_way(operator.eq, operator.eq)
_greater = _either_way(operator.gt, operator.gt)
_less = _either_way(operator.lt, operator.lt)

def _and(a, b): return b if truthy(a) else a
def _or(a, b): return a if truthy(a) else b

@_command("equals", 2)
def _equals(p): return _value(p[0] == p[1])

@_command("looselyequals", 2)
def _looselyequals(p): return _value(_loosely_equals(p[0], p[1]))

@_command("greater", 2)
def _greater_cmd(p): return _value(_greater(p[0], p[1]))

@_command("less", 2)
def _less_cmd(p): return _value(_less(p[0], p[1]))

@_command("not", 1)
def _not(p): return _value(not truthy(p[0]))

_command("and", 2)(lambda p: _value(_and(p[0], p[1])))
_command("or", 2)(lambda p: _value(_or(p[0], p[1])))

@_command("number", 1)
def _number(p): return _value(as_number(p[0]))

_command("string", 1)(lambda p: _value(p[0]))

@_command("join", 2)
def _join(p): return _value(p[0] + p[1])

@_command("length", 1)
def _length(p): return _value(len(p[0]))

@_command("random", 0)
def _random(p):
	""" The one command that does not reproduce from run to run. """
	return _value(random.random())

###############################################################################

OPERATORS: dict[str, Callable[[str, str], object]] = {
	"++": lambda a, b: as_number(a) + as_number(b),
	"**": lambda a, b: as_number(a) * as_number(b),
	"^^": lambda a, b: math.pow(as_number(a), as_number(b)),
	"==": operator.eq,
	"!=": operator.ne,
	"<<": _less,
	">>": _greater,
	"&&": _and,
	"||": _or,
	"..": operator.add,
}

def _infix_handler(fn:Callable):
	def handler(p):
		a, b = p[:2]
		return _value(fn(a, b))
	return handler

for _glyph, _fn in OPERATORS.items():
	_command(_glyph, 2, is_operator=True)(_infix_handler(_fn))

SKIP_MARKERS = ("//", "/*", "--")

def _suppressed(p): return CommandResult(log=[LogEntry(Kind.OUTPUT, None)])

for _marker in SKIP_MARKERS:
	_command(_marker, is_operator=True, is_skip=True)(_suppressed)

REGISTRY = _registry.freeze()

import unittest

from eelang import evaluator
from eelang.environment import Environment
from eelang.evaluator import Engine, TOMBSTONE, Literal, OperatorSlot, SkipMarker, Invocation
from eelang.ontology import Command, CommandResult, Kind
from eelang.primitive import REGISTRY
from eelang.space import Registry

class ClassifierTests(unittest.TestCase):

	def setUp(self) -> None:
		self.engine = Engine(REGISTRY)

	def test_each_variant(self):
		classify = self.engine.classify
		self.assertIs(TOMBSTONE, classify(TOMBSTONE))
		self.assertIsInstance(classify("++"), OperatorSlot)
		self.assertIsInstance(classify("//"), SkipMarker)
		self.assertIsInstance(classify("--"), SkipMarker)
		self.assertIsInstance(classify("-add"), Invocation)
		self.assertEqual(Literal("add"), classify("add"))

	def test_dashed_non_commands_stay_literal(self):
		for word in ["-", "-5", "-nonesuch", "-++", "-//", "--add", ""]:
			with self.subTest(word):
				self.assertIsInstance(self.engine.classify(word), Literal)

class SubstitutionTests(unittest.TestCase):

	def setUp(self) -> None:
		self.env = Environment({"a": "5", "name": "Ada", "x": "-a"})

	def test_known_names_get_replaced(self):
		self.assertEqual("5", evaluator.substitute(self.env, "-a"))
		self.assertEqual("Ada,", evaluator.substitute(self.env, "-name,"))

	def test_unknown_names_stay_put(self):
		self.assertEqual("-nobody", evaluator.substitute(self.env, "-nobody"))

	def test_dash_must_start_a_word(self):
		self.assertEqual("b-a", evaluator.substitute(self.env, "b-a"))
		self.assertEqual("x 5", evaluator.substitute(self.env, "x -a"))

	def test_not_recursive(self):
		self.assertEqual("-a", evaluator.substitute(self.env, "-x"))

class EngineTests(unittest.TestCase):

	def setUp(self) -> None:
		self.engine = Engine(REGISTRY)
		self.env = Environment.fresh()

	def evaluate(self, line:str) -> CommandResult:
		words = line.split(" ")
		return self.engine.evaluate(self.env, words[0], words[1:])

	def test_operators_have_no_precedence(self):
		self.assertEqual("6", self.evaluate("string 1 ++ 2 ** 2").value)
		self.assertEqual("6", self.evaluate("print 1 ++ 2 ** 2").log[0].text)

	def test_prefix_command_runs_first(self):
		result = self.evaluate("print -min 1 2")
		self.assertEqual(1, len(result.log))
		self.assertEqual("1", result.log[0].text)

	def test_prefix_result_chains_into_operator(self):
		self.assertEqual("5", self.evaluate("print -min 1 2 ++ 4").log[0].text)

	def test_operator_value_naming_a_command_takes_the_following_words(self):
		self.assertEqual("3", self.evaluate("print - .. add 1 2").log[0].text)

	def test_nested_log_comes_first(self):
		result = self.evaluate("print -print inner")
		self.assertEqual(["inner", "true"], [e.text for e in result.log])

	def test_nested_write_is_reported_not_applied(self):
		result = self.evaluate("print -set x hello there")
		self.assertEqual({"x": "hello there"}, result.writes)
		self.assertEqual("hello there", result.log[0].text)
		self.assertIsNone(self.env.read("x"))

	def test_own_write_wins(self):
		result = self.evaluate("set x -set x inner")
		self.assertEqual({"x": "inner"}, result.writes)
		result = self.evaluate("set y -set x inner")
		self.assertEqual({"x": "inner", "y": "inner"}, result.writes)

	def test_halt_is_sticky_but_reduction_continues(self):
		result = self.evaluate("print -stop now")
		self.assertTrue(result.halt)
		self.assertEqual([Kind.HALTED, Kind.OUTPUT], [e.kind for e in result.log])
		result = self.evaluate("print -error 1 ++ 2")
		self.assertTrue(result.halt)
		self.assertEqual(["3", "true"], [e.text for e in result.log])

	def test_fixed_arity_halt_leaves_the_rest_to_reduce(self):
		registry = Registry(REGISTRY.each_command())
		registry.define(Command("halt1", 1, lambda p: CommandResult(p[0], halt=True)))
		engine = Engine(registry.freeze())
		result = engine.evaluate(self.env, "print", ["-halt1", "a", "-add", "1", "2", "++", "4"])
		self.assertTrue(result.halt)
		self.assertEqual(["a 7"], [e.text for e in result.log])

	def test_fixed_arity_takes_only_what_it_needs(self):
		self.assertEqual("3 and more", self.evaluate("print -add 1 2 and more").log[0].text)

	def test_unknown_outer_command(self):
		result = self.evaluate("shout hello")
		self.assertTrue(result.halt)
		self.assertEqual(Kind.ERROR, result.log[0].kind)
		self.assertEqual('Command "shout" Not Found.', result.log[0].text)

	def test_unknown_prefix_stays_literal(self):
		self.assertEqual("-shout hello", self.evaluate("print -shout hello").log[0].text)

	def test_skip_marker_abandons_the_call(self):
		for line in ["print hello // world", "print 1 ++ // world", "stop -add 1 2 /* 3"]:
			with self.subTest(line):
				result = self.evaluate(line)
				self.assertFalse(result.halt)
				self.assertEqual("true", result.value)
				self.assertEqual((), result.log)

	def test_skip_marker_in_nested_call_only_abandons_that_call(self):
		result = self.evaluate("print -print a -- b")
		self.assertEqual(["true"], [e.text for e in result.log])

	def test_variables_are_substituted_before_reduction(self):
		self.env.write("n", "4")
		self.assertEqual("8", self.evaluate("string -n ++ -n").value)
		self.assertEqual("version 1.2.0", self.evaluate("print version -VERSION").log[0].text)

	def test_substituted_text_can_name_a_command(self):
		self.env.write("cmd", "-add")
		self.assertEqual("3", self.evaluate("print -cmd 1 2").log[0].text)

	def test_tombstones_never_reach_a_handler(self):
		seen = []
		def spy(params):
			seen.append(list(params))
			return CommandResult(" ".join(params))
		registry = Registry([
			Command("spy", None, spy),
			Command("pair", 2, lambda p: CommandResult("-spy")),
			Command("++", 2, lambda p: CommandResult(p[0] + p[1]), is_operator=True),
		]).freeze()
		engine = Engine(registry)
		engine.evaluate(self.env, "spy", ["a", "++", "b", "-pair", "c", "d", "tail"])
		for params in seen:
			self.assertNotIn(TOMBSTONE, params)

	def test_handler_returning_nothing_means_true(self):
		registry = Registry([Command("noop", None, lambda p: None)])
		self.assertEqual("true", Engine(registry).evaluate(self.env, "noop", []).value)


if __name__ == '__main__':
	unittest.main()

import unittest

from wordsearch import generate, get_generator
from wordsearch.core.constants import Strategy, TieBreaker
from wordsearch.core.exceptions import InvalidInputError
from wordsearch.core.models import GenerationOptions
from wordsearch.engine.free import FreeGridGenerator
from wordsearch.engine.intersecting import IntersectingGridGenerator


class StrategySelectionTests(unittest.TestCase):
    def test_get_generator_by_name(self) -> None:
        self.assertIsInstance(get_generator("free"), FreeGridGenerator)
        self.assertIsInstance(get_generator(Strategy.INTERSECTING), IntersectingGridGenerator)
        self.assertIsInstance(get_generator("Intersections"), IntersectingGridGenerator)

    def test_unknown_strategy(self) -> None:
        with self.assertRaises(InvalidInputError) as ctx:
            get_generator("diagonal")
        self.assertIn("diagonal", str(ctx.exception))

    def test_generate_defaults_to_free(self) -> None:
        result = generate(["CAT"], ["A", "C", "T"], 3, 1)
        self.assertEqual(result.to_dict()["grid"], ["CAT"])

    def test_generate_keyword_overrides(self) -> None:
        result = generate(["CAT", "DOG"], [], 3, 3, strategy="intersecting", seed=1)
        again = generate(["CAT", "DOG"], [], 3, 3, GenerationOptions(strategy="intersecting", seed=1))
        self.assertEqual(result.to_dict(), again.to_dict())
        self.assertFalse(result.partial)

    def test_overrides_replace_option_fields(self) -> None:
        base = GenerationOptions(seed=5)
        result = generate(["CAT"], [], 3, 3, base, strategy="intersecting", tie_breaker="center")
        self.assertEqual(result.placements[0].to_dict(), {"word": "CAT", "row": 1, "col": 0, "dir": "H"})
        self.assertEqual(base.strategy, Strategy.FREE)


class GenerationOptionsTests(unittest.TestCase):
    def test_strings_are_parsed_into_enums(self) -> None:
        options = GenerationOptions(strategy="INTERSECTING", tie_breaker=" Center ")
        self.assertIs(options.strategy, Strategy.INTERSECTING)
        self.assertIs(options.tie_breaker, TieBreaker.CENTER)

    def test_invalid_values(self) -> None:
        with self.assertRaises(InvalidInputError):
            GenerationOptions(tie_breaker="left")
        with self.assertRaises(InvalidInputError):
            GenerationOptions(max_iterations=-1)
        with self.assertRaises(InvalidInputError):
            GenerationOptions(max_iterations=2.5)

    def test_progress_is_clamped(self) -> None:
        calls = []
        options = GenerationOptions(on_progress=calls.append)
        options.report_progress(1.2)
        options.report_progress(0.25)
        self.assertEqual(calls, [1.0, 0.25])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

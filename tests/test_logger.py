import io
import logging
import unittest

from wordsearch.utils.logger import ROOT_LOGGER, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging()

    def test_names_are_nested_under_package(self) -> None:
        self.assertEqual(get_logger().name, "wordsearch")
        self.assertEqual(get_logger("wordsearch.engine.grid").name, "wordsearch.engine.grid")
        self.assertEqual(get_logger("cli").name, "wordsearch.cli")

    def test_configure_writes_formatted_records(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        get_logger("engine.intersecting").info("Found complete grid")
        get_logger("engine.intersecting").debug("hidden")
        output = stream.getvalue()
        self.assertIn("| INFO    | wordsearch.engine.intersecting | Found complete grid", output)
        self.assertNotIn("hidden", output)

    def test_root_logger_is_left_alone(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)
        self.assertEqual(logging.getLogger().handlers, root_handlers)
        self.assertEqual(len(logging.getLogger(ROOT_LOGGER).handlers), 1)
        self.assertFalse(logging.getLogger(ROOT_LOGGER).propagate)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

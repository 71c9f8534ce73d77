import io
import logging
import unittest

from wordsmith.utils.logger import configure_logging, get_logger, resolve_level


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.addCleanup(setattr, root, "handlers", list(root.handlers))
        self.addCleanup(root.setLevel, root.level)

    def test_resolve_level_accepts_names_and_ints(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" WARNING "), logging.WARNING)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        self.assertEqual(resolve_level("chatty"), logging.INFO)

    def test_configure_logging_writes_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging("debug", stream=stream)
        self.assertEqual(len(logging.getLogger().handlers), 1)
        get_logger("wordsmith.test").debug("placed %s", "cat")
        line = stream.getvalue().strip()
        self.assertRegex(line, r"^\d\d:\d\d:\d\d \| DEBUG   \| wordsmith\.test \| placed cat$")

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        configure_logging("ERROR", stream=stream)
        get_logger().info("hidden")
        get_logger().error("shown")
        self.assertNotIn("hidden", stream.getvalue())
        self.assertIn("| wordsmith | shown", stream.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

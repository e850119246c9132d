from arx.utilities.runtime import RUNTIME, RuntimeConfiguration
from arx.core.metadata import SizeSpec, SizeType
from contextlib import redirect_stderr
import io
import logging
import unittest


class RuntimeTestCase(unittest.TestCase):
    def test_report_progress_disabled(self):
        config = RuntimeConfiguration()
        items  = [1, 2, 3]
        self.assertIs(config.report_progress(items), items)


    def test_report_progress_enabled(self):
        config = RuntimeConfiguration(show_progress=True)

        with redirect_stderr(io.StringIO()):
            self.assertEqual(list(config.report_progress([1, 2, 3], desc="Test", file=io.StringIO())), [1, 2, 3])


    def test_set_log_level(self):
        logger   = logging.getLogger('arx')
        previous = logger.level

        try:
            RUNTIME.set_log_level(logging.DEBUG)
            self.assertEqual(logger.level, logging.DEBUG)
        finally:
            logger.setLevel(previous)


    def test_size_spec(self):
        spec = SizeSpec(size_type=SizeType.RANGE, sizes=[128, 256])
        self.assertIn(128, spec)
        self.assertNotIn(192, spec)
        self.assertEqual(spec.byte_sizes, [16, 32])

        self.assertIn(64, SizeSpec(size_type=SizeType.SINGLE, sizes=64))
        self.assertIn(12345, SizeSpec(size_type=SizeType.ARBITRARY))
        self.assertNotIn(0, SizeSpec(size_type=SizeType.NA))

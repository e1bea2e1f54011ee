"""
Test cases for security limits and validation.

Tests focus on preventing resource exhaustion and validating input constraints.
"""

import unittest

import jsonpress
from jsonpress.core.position import Position
from jsonpress.security.exceptions import ErrorReporter, SecurityError
from jsonpress.security.limits import LimitValidator
from jsonpress.utils.config import ParseConfig, ParseLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality for security constraints."""

    def setUp(self):
        self.limits = ParseLimits(max_input_size=1000, max_nesting_depth=3)
        self.validator = LimitValidator(self.limits)

    def test_unlimited_validator_accepts_anything(self):
        validator = LimitValidator(ParseLimits())
        validator.validate_input_size("x" * 100_000)
        for _ in range(100_000):
            validator.enter_structure()
        self.assertEqual(validator.nesting_depth, 100_000)

    def test_input_size_validation_pass(self):
        self.validator.validate_input_size("x" * 1000)

    def test_input_size_validation_fail(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 1001)
        self.assertIn("Input size 1001 exceeds limit 1000", str(cm.exception))

    def test_nesting_depth_tracking(self):
        for _ in range(3):
            self.validator.enter_structure()
        self.assertEqual(self.validator.nesting_depth, 3)

        with self.assertRaises(SecurityError) as cm:
            self.validator.enter_structure()
        self.assertIn("Nesting depth 4 exceeds limit 3", str(cm.exception))

    def test_exit_structure_never_negative(self):
        self.validator.exit_structure()
        self.assertEqual(self.validator.nesting_depth, 0)

        self.validator.enter_structure()
        self.validator.exit_structure()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_reset(self):
        self.validator.enter_structure()
        self.validator.enter_structure()
        self.validator.reset()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_depth_error_with_reporter_has_context(self):
        reporter = ErrorReporter("[[[[1]]]]")
        validator = LimitValidator(self.limits, reporter)
        for _ in range(3):
            validator.enter_structure()
        with self.assertRaises(SecurityError) as cm:
            validator.enter_structure(Position(1, 4))
        self.assertEqual(cm.exception.position, Position(1, 4))
        self.assertIsNotNone(cm.exception.context)


class TestLimitsDuringParsing(unittest.TestCase):
    """Limits configured on ParseConfig apply to parse and format."""

    def _config(self, **limits):
        return ParseConfig(limits=ParseLimits(**limits))

    def test_nesting_within_limit(self):
        config = self._config(max_nesting_depth=3)
        jsonpress.parse("[[[1]]]", config)
        jsonpress.parse('{"a": {"b": [1]}}', config)

    def test_nesting_beyond_limit(self):
        config = self._config(max_nesting_depth=3)
        with self.assertRaises(SecurityError) as cm:
            jsonpress.parse("[[[[1]]]]", config)
        self.assertEqual(cm.exception.position, Position(1, 4))

    def test_sibling_structures_do_not_accumulate_depth(self):
        config = self._config(max_nesting_depth=2)
        jsonpress.parse("[[1], [2], [3], {}, {}]", config)

    def test_default_config_has_no_depth_limit(self):
        depth = 100_000
        tree = jsonpress.parse("[" * depth + "]" * depth)
        for _ in range(depth - 1):
            tree = tree.elements[0]
        self.assertEqual(tree.elements, ())

    def test_raised_depth_limit_beyond_recursion_limit(self):
        config = self._config(max_nesting_depth=10_000)
        text = "[" * 5000 + "]" * 5000
        self.assertEqual(jsonpress.parse(text, config).kind.value, "ArrayLiteralExpression")
        with self.assertRaises(SecurityError):
            jsonpress.parse("[" * 10_001 + "]" * 10_001, config)

    def test_default_config_has_no_size_limit(self):
        value = "x" * (10 * 1024 * 1024 + 1)
        formatted = jsonpress.format_json('["' + value + '"]')
        self.assertEqual(len(formatted), len(value) + 10)
        self.assertTrue(formatted.startswith('[\n    "xxx'))
        self.assertTrue(formatted.endswith('xxx"\n]'))

    def test_input_size_limit(self):
        config = self._config(max_input_size=10)
        with self.assertRaises(SecurityError):
            jsonpress.parse('{"key": "long value"}', config)

    def test_format_respects_limits(self):
        config = self._config(max_nesting_depth=1)
        with self.assertRaises(SecurityError):
            jsonpress.format_json("[[1]]", config=config)
        self.assertEqual(jsonpress.format_json("[1]", config=config), "[\n    1\n]")


if __name__ == '__main__':
    unittest.main()

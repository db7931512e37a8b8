"""
Tests for the configuration object and the pattern registry.
"""

import unittest

from js_outlinks.config import (
    DEFAULT_ABSOLUTE_URL_PATTERN,
    DEFAULT_FILE_INCLUDE_PATTERN,
    DEFAULT_TIME_BUDGET_MS,
    QUOTED_PATH_OUTLINK_PATTERN,
    ExtractorConfig,
)
from js_outlinks.errors import ConfigurationError
from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.utils.log import log


class TestExtractorConfig(unittest.TestCase):
    def test_defaults(self):
        config = ExtractorConfig()
        self.assertEqual(config.file_include_pattern, DEFAULT_FILE_INCLUDE_PATTERN)
        self.assertEqual(config.absolute_url_pattern, DEFAULT_ABSOLUTE_URL_PATTERN)
        self.assertIsNone(config.outlink_pattern)
        self.assertEqual(config.time_budget_ms, DEFAULT_TIME_BUDGET_MS)

    def test_from_mapping(self):
        config = ExtractorConfig.from_mapping({
            "ext.js.file.include.pattern": r".*\.jsx?",
            "ext.js.extract.outlink.pattern": r'"([^"]+)"',
            "ext.js.time.budget.ms": "1500",
            "ext.js.max.tree.depth": " 64 ",
        })
        self.assertEqual(config.file_include_pattern, r".*\.jsx?")
        self.assertEqual(config.absolute_url_pattern, DEFAULT_ABSOLUTE_URL_PATTERN)
        self.assertEqual(config.outlink_pattern, r'"([^"]+)"')
        self.assertEqual(config.time_budget_ms, 1500)
        self.assertEqual(config.max_tree_depth, 64)

    def test_blank_values_fall_back_to_defaults(self):
        config = ExtractorConfig.from_mapping({
            "ext.js.file.include.pattern": "  ",
            "ext.js.extract.outlink.pattern": "",
            "ext.js.time.budget.ms": "",
        })
        self.assertEqual(config.file_include_pattern, DEFAULT_FILE_INCLUDE_PATTERN)
        self.assertIsNone(config.outlink_pattern)
        self.assertEqual(config.time_budget_ms, DEFAULT_TIME_BUDGET_MS)

    def test_invalid_integer_rejected(self):
        for value in ("soon", "0", "-5"):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError):
                    ExtractorConfig.from_mapping({"ext.js.time.budget.ms": value})

    def test_from_env(self):
        config = ExtractorConfig.from_env({
            "JS_OUTLINKS_OUTLINK_PATTERN": r"'([^']+)'",
            "JS_OUTLINKS_TIME_BUDGET_MS": "250",
            "UNRELATED": "x",
        })
        self.assertEqual(config.outlink_pattern, r"'([^']+)'")
        self.assertEqual(config.time_budget_ms, 250)

    def test_config_is_frozen(self):
        config = ExtractorConfig()
        with self.assertRaises(AttributeError):
            config.outlink_pattern = "(x)"


class TestPatternRegistry(unittest.TestCase):
    def test_eligibility_is_a_full_match(self):
        registry = PatternRegistry.from_config(ExtractorConfig())
        self.assertTrue(registry.is_eligible("http://h/a/tree_nodes.js"))
        self.assertFalse(registry.is_eligible("http://h/a/page.html"))
        self.assertFalse(registry.is_eligible("http://h/a/tree.js.html"))

    def test_absolute_pattern_ignores_case(self):
        registry = PatternRegistry.from_config(ExtractorConfig())
        self.assertTrue(registry.is_absolute("HTTPS://example.com/x"))
        self.assertTrue(registry.is_absolute("www.example.com/x"))
        self.assertFalse(registry.is_absolute("../x/y.js"))
        self.assertFalse(registry.is_absolute("docs/http.html"))

    def test_missing_outlink_pattern_disables_extraction(self):
        with self.assertLogs(log, level="INFO") as cm:
            registry = PatternRegistry.from_config(ExtractorConfig())
        self.assertFalse(registry.enabled)
        self.assertIsNone(registry.outlink)
        self.assertTrue(any("[CONFIG]" in line for line in cm.output))

    def test_outlink_pattern_compiled_multiline(self):
        registry = PatternRegistry.from_config(
            ExtractorConfig(outlink_pattern=r"^link:(\S+)$")
        )
        self.assertTrue(registry.enabled)
        found = [m.group(1) for m in registry.outlink.finditer("link:a.js\nlink:b.js\n")]
        self.assertEqual(found, ["a.js", "b.js"])

    def test_malformed_patterns_are_fatal(self):
        for field in ("file_include_pattern", "absolute_url_pattern", "outlink_pattern"):
            with self.subTest(field=field):
                with self.assertRaises(ConfigurationError):
                    PatternRegistry.from_config(ExtractorConfig(**{field: "([unclosed"}))

    def test_outlink_pattern_needs_a_group(self):
        with self.assertRaises(ConfigurationError):
            PatternRegistry.from_config(ExtractorConfig(outlink_pattern=r"\w+\.js"))

    def test_bundled_outlink_pattern_compiles(self):
        registry = PatternRegistry.from_config(
            ExtractorConfig(outlink_pattern=QUOTED_PATH_OUTLINK_PATTERN)
        )
        found = [m.group(1) for m in registry.outlink.finditer(
            "load('menu/tree.js'); var t = \"Title\"; go(\"../docs/a.html?x=1\");"
        )]
        self.assertEqual(found, ["menu/tree.js", "../docs/a.html?x=1"])


if __name__ == "__main__":
    unittest.main()

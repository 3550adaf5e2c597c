import tempfile
import unittest
from pathlib import Path

from core.configuration import (
    DEFAULT_CONFIG_PATH,
    CalculationConfig,
    build_effective_config,
    load_configuration,
)


class TestConfiguration(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        p = self.tmp / "cfg.yaml"
        p.write_text(text, encoding="utf-8")
        return p

    def test_repo_defaults(self):
        self.assertTrue(DEFAULT_CONFIG_PATH.exists())
        cfg = load_configuration()
        self.assertAlmostEqual(3.0, cfg.max_drop_pct)
        self.assertEqual("WARNING", cfg.log_level)

    def test_custom_file(self):
        p = self._write("calculation:\n  max_drop_pct: 5\nlogging:\n  level: debug\n")
        cfg = load_configuration(p)
        self.assertAlmostEqual(5.0, cfg.max_drop_pct)
        self.assertEqual("DEBUG", cfg.log_level)

    def test_empty_file_uses_defaults(self):
        cfg = load_configuration(self._write(""))
        self.assertEqual(CalculationConfig(), cfg)

    def test_missing_explicit_file(self):
        with self.assertRaises(FileNotFoundError):
            load_configuration(self.tmp / "nope.yaml")

    def test_invalid_documents(self):
        for text in (
            "- a\n- b\n",
            "calculation: 3\n",
            "calculation:\n  max_drop_pct: abc\n",
            "calculation:\n  max_drop_pct: -1\n",
            "logging:\n  level: LOUD\n",
        ):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    load_configuration(self._write(text))

    def test_overrides(self):
        base = CalculationConfig()
        self.assertIs(base, build_effective_config(base, None))
        cfg = build_effective_config(base, {"max_drop_pct": 2.5, "log_level": None})
        self.assertAlmostEqual(2.5, cfg.max_drop_pct)
        self.assertEqual("WARNING", cfg.log_level)
        cfg = build_effective_config(base, {"log_level": "info"})
        self.assertEqual("INFO", cfg.log_level)


if __name__ == "__main__":
    unittest.main()

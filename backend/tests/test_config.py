import unittest

from microchess.config import EngineConfig, validate_depth, validate_log_level


class TestEngineConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = EngineConfig.from_env({})
        self.assertEqual((cfg.depth, cfg.hint_depth, cfg.log_level), (3, 2, "WARNING"))

    def test_from_env(self):
        cfg = EngineConfig.from_env({
            "MICROCHESS_DEPTH": "5",
            "MICROCHESS_HINT_DEPTH": "1",
            "MICROCHESS_LOG_LEVEL": "debug",
        })
        self.assertEqual(cfg.depth, 5)
        self.assertEqual(cfg.hint_depth, 1)
        self.assertEqual(cfg.log_level, "DEBUG")

    def test_blank_value_uses_default(self):
        self.assertEqual(EngineConfig.from_env({"MICROCHESS_DEPTH": "  "}).depth, 3)

    def test_bad_values(self):
        for env in ({"MICROCHESS_DEPTH": "deep"}, {"MICROCHESS_DEPTH": "9"}, {"MICROCHESS_HINT_DEPTH": "0"}):
            with self.subTest(env=env):
                with self.assertRaises(ValueError):
                    EngineConfig.from_env(env)

    def test_log_level_checked_against_logging(self):
        self.assertEqual(validate_log_level(" info "), "INFO")
        self.assertEqual(EngineConfig(log_level="error").log_level, "ERROR")
        for bad in ("loud", "", "42"):
            with self.subTest(level=bad):
                with self.assertRaises(ValueError):
                    EngineConfig(log_level=bad)
        with self.assertRaises(ValueError):
            EngineConfig.from_env({"MICROCHESS_LOG_LEVEL": "verbose"})

    def test_validate_depth(self):
        self.assertEqual(validate_depth(1), 1)
        self.assertEqual(validate_depth(6), 6)
        with self.assertRaises(ValueError):
            validate_depth("3")


if __name__ == "__main__":
    unittest.main()

import unittest

from digit_prompt.config import AppConfig, DialogConfig, MAX_DIGITS


class TestDialogConfig(unittest.TestCase):
    def test_defaults(self):
        config = DialogConfig()
        self.assertEqual(config.prefix, "? ")
        self.assertEqual(config.max_digits, 10)
        self.assertIsNone(config.bell)

    def test_max_digits_bounds(self):
        self.assertEqual(DialogConfig(max_digits=1).max_digits, 1)
        self.assertEqual(DialogConfig(max_digits=MAX_DIGITS).max_digits, MAX_DIGITS)
        for bad in (0, -1, MAX_DIGITS + 1, "5"):
            with self.assertRaises(ValueError):
                DialogConfig(max_digits=bad)


class TestAppConfig(unittest.TestCase):
    def test_from_env_defaults(self):
        config = AppConfig.from_env({})
        self.assertEqual(config.log_path, "logs/digit_prompt.log")
        self.assertEqual(config.log_level, "INFO")
        self.assertFalse(config.silent_mode)

    def test_from_env_overrides(self):
        config = AppConfig.from_env({
            "DIGIT_PROMPT_LOG_PATH": "/tmp/dp.log",
            "DIGIT_PROMPT_LOG_LEVEL": "debug",
            "DIGIT_PROMPT_SILENT": "yes",
            "UNRELATED": "ignored",
        })
        self.assertEqual(config.log_path, "/tmp/dp.log")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertTrue(config.silent_mode)

    def test_unknown_log_level_falls_back(self):
        config = AppConfig.from_env({"DIGIT_PROMPT_LOG_LEVEL": "chatty"})
        self.assertEqual(config.log_level, "INFO")

    def test_silent_mode_disables_bell(self):
        dialog = AppConfig(silent_mode=True).dialog_config()
        self.assertIsNotNone(dialog.bell)
        self.assertIsNone(dialog.bell())
        self.assertIsNone(AppConfig().dialog_config().bell)


if __name__ == '__main__':
    unittest.main()

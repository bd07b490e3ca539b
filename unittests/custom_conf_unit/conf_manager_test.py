import unittest

from custom_conf.conf_manager import ConfManager


class TestConfManager(unittest.TestCase):

    def setUp(self):
        self.conf_manager = ConfManager()

    def test_load_layers_dicts(self):
        self.conf_manager.load({"operand_a": 20, "operand_b": 10})
        self.conf_manager.load({"operand_b": 0})

        self.assertEqual(self.conf_manager.get_settings("operand_a"), 20)
        self.assertEqual(self.conf_manager.get_settings("operand_b"), 0)

    def test_get_settings_default(self):
        self.assertIsNone(self.conf_manager.get_settings("missing"))
        self.assertEqual(self.conf_manager.get_settings("missing", "fallback"), "fallback")

    def test_set_snapshot_and_clear(self):
        self.conf_manager.set_settings("log_to_file", True)

        snapshot = self.conf_manager.snapshot()
        snapshot["log_to_file"] = False
        self.assertTrue(self.conf_manager.get_settings("log_to_file"))

        self.conf_manager.clear()
        self.assertEqual(self.conf_manager.snapshot(), {})


if __name__ == "__main__":
    unittest.main()

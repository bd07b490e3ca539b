import json
import shutil
import unittest
from pathlib import Path

from utils.common.file_util import read_settings_file


class TestFileUtil(unittest.TestCase):

    scratch_dir = None

    @classmethod
    def setUpClass(cls):
        cls.scratch_dir = Path(__file__).resolve().parents[2] / "scratch_dir_files"
        cls.scratch_dir.mkdir(exist_ok=True)

    @classmethod
    def tearDownClass(cls):
        if cls.scratch_dir.exists():
            shutil.rmtree(cls.scratch_dir)

    def test_read_json(self):
        path = self.scratch_dir / "settings.json"
        path.write_text(json.dumps({"operand_a": 3}), encoding="utf-8")
        self.assertEqual(read_settings_file(path), {"operand_a": 3})
        self.assertEqual(read_settings_file(str(path)), {"operand_a": 3})

    def test_read_yaml(self):
        for name in ("settings.yaml", "settings.yml"):
            path = self.scratch_dir / name
            path.write_text("log_level: DEBUG\nlog_to_file: true\n", encoding="utf-8")
            self.assertEqual(read_settings_file(path), {"log_level": "DEBUG", "log_to_file": True})

    def test_empty_yaml_is_empty_dict(self):
        path = self.scratch_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")
        self.assertEqual(read_settings_file(path), {})

    def test_invalid_content(self):
        bad_json = self.scratch_dir / "bad.json"
        bad_json.write_text("{not json", encoding="utf-8")
        with self.assertRaises(ValueError):
            read_settings_file(bad_json)

        bad_yaml = self.scratch_dir / "bad.yaml"
        bad_yaml.write_text("key: [unclosed", encoding="utf-8")
        with self.assertRaises(ValueError):
            read_settings_file(bad_yaml)

        not_mapping = self.scratch_dir / "list.yaml"
        not_mapping.write_text("- 1\n- 2\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            read_settings_file(not_mapping)

    def test_unsupported_or_missing(self):
        text_file = self.scratch_dir / "settings.txt"
        text_file.write_text("operand_a=1", encoding="utf-8")
        with self.assertRaises(ValueError):
            read_settings_file(text_file)

        with self.assertRaises(FileNotFoundError):
            read_settings_file(self.scratch_dir / "missing.yaml")

        with self.assertRaises(TypeError):
            read_settings_file(123)

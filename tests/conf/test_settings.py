import os
import tempfile
from pathlib import Path
from unittest import TestCase

from pydantic import ValidationError

from xrplcodec.conf import DEFAULT_SETTINGS_FILEPATH, LENIENT_SETTINGS_FILEPATH
from xrplcodec.conf.get_settings import get_global_settings, get_settings_source
from xrplcodec.conf.settings import CodecSettings
from xrplcodec.conf.utils import deep_merge, dict_from_extended_yaml, dict_from_yaml, load_yaml_settings


class SettingsTest(TestCase):
    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp_dir.name)

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def _write(self, name: str, contents: str) -> str:
        filepath = self.root / name
        filepath.write_text(contents)
        return str(filepath)

    def test_default(self) -> None:
        settings = load_yaml_settings(CodecSettings, DEFAULT_SETTINGS_FILEPATH)
        self.assertEqual(settings, CodecSettings())
        self.assertEqual(settings.MAX_NESTING_DEPTH, 10)
        self.assertTrue(settings.STRICT_UNKNOWN_FIELDS)
        self.assertIsNone(settings.DEFINITIONS_FILEPATH)

    def test_lenient(self) -> None:
        settings = load_yaml_settings(CodecSettings, LENIENT_SETTINGS_FILEPATH)
        self.assertFalse(settings.STRICT_UNKNOWN_FIELDS)
        self.assertEqual(settings.MAX_NESTING_DEPTH, 10)

    def test_extends_packaged_file(self) -> None:
        filepath = self._write('custom.yml', 'extends: lenient.yml\nMAX_NESTING_DEPTH: 4\n')
        settings = load_yaml_settings(CodecSettings, filepath)
        self.assertEqual(settings.MAX_NESTING_DEPTH, 4)
        self.assertFalse(settings.STRICT_UNKNOWN_FIELDS)

    def test_extends_sibling_file(self) -> None:
        self._write('base.yml', 'MAX_NESTING_DEPTH: 3\nSTRICT_UNKNOWN_FIELDS: false\n')
        filepath = self._write('child.yml', 'extends: base.yml\nSTRICT_UNKNOWN_FIELDS: true\n')
        self.assertEqual(dict_from_extended_yaml(filepath), {'MAX_NESTING_DEPTH': 3, 'STRICT_UNKNOWN_FIELDS': True})

    def test_recursive_extends(self) -> None:
        filepath = self._write('loop.yml', 'extends: loop.yml\n')
        with self.assertRaises(ValueError):
            dict_from_extended_yaml(filepath)

    def test_empty_file(self) -> None:
        self.assertEqual(dict_from_yaml(self._write('empty.yml', '')), {})

    def test_not_a_mapping(self) -> None:
        with self.assertRaises(ValueError):
            dict_from_yaml(self._write('list.yml', '- 1\n- 2\n'))
        with self.assertRaises(ValueError):
            dict_from_yaml(str(self.root / 'missing.yml'))

    def test_invalid_values(self) -> None:
        with self.assertRaises(ValidationError):
            load_yaml_settings(CodecSettings, self._write('zero.yml', 'MAX_NESTING_DEPTH: 0\n'))
        with self.assertRaises(ValidationError):
            load_yaml_settings(CodecSettings, self._write('typo.yml', 'MAX_NESTING_DEPT: 5\n'))

    def test_settings_are_frozen(self) -> None:
        settings = CodecSettings()
        with self.assertRaises(ValidationError):
            settings.MAX_NESTING_DEPTH = 3  # type: ignore[misc]

    def test_deep_merge(self) -> None:
        base = {'a': 1, 'b': {'c': 2, 'd': 3}}
        merged = deep_merge(base, {'b': {'d': 4}, 'e': 5})
        self.assertEqual(merged, {'a': 1, 'b': {'c': 2, 'd': 4}, 'e': 5})
        # inputs are not modified
        self.assertEqual(base, {'a': 1, 'b': {'c': 2, 'd': 3}})

    def test_global_settings(self) -> None:
        settings = get_global_settings()
        self.assertIs(get_global_settings(), settings)
        self.assertEqual(get_settings_source(), os.environ['XRPLCODEC_CONFIG_YAML'])

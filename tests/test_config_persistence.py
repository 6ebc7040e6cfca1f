"""Tests for Config loading, defaults and persistence.

Verifies that:
1. A missing config file is created with defaults
2. Existing values are read with typed getters
3. Tests are isolated by default (don't touch real config)
"""

import configparser
import logging
import os

from common.config import Config


class TestConfigDefaults:
    def test_missing_file_is_created_with_defaults(self, tmp_path):
        config_path = tmp_path / "sub" / "config.ini"

        config = Config(str(config_path))

        assert config_path.exists()
        parser = configparser.ConfigParser()
        parser.read(config_path, encoding="utf-8")
        assert parser["General"]["log_level"] == "INFO"
        assert parser["General"]["log_to_file"] == "false"
        assert parser["Reader"]["default_encoding"] == "Auto"
        assert config.log_level == logging.INFO
        assert config.log_to_file is False
        assert config.default_encoding == "Auto"

    def test_tests_use_temp_config_by_default(self, tmp_path):
        config = Config()

        assert "usdxreader_test" in config.config_path


class TestConfigLoading:
    def test_existing_values_are_used(self, tmp_path):
        config_path = tmp_path / "config.ini"
        config_path.write_text(
            "[General]\nlog_level = debug\nlog_to_file = yes\n\n[Reader]\ndefault_encoding = CP1252\n",
            encoding="utf-8",
        )

        config = Config(str(config_path))

        assert config.log_level_str == "DEBUG"
        assert config.log_level == logging.DEBUG
        assert config.log_to_file is True
        assert config.default_encoding == "CP1252"

    def test_missing_keys_fall_back_to_defaults(self, tmp_path):
        config_path = tmp_path / "config.ini"
        config_path.write_text("[CustomSection]\nfoo = bar\n", encoding="utf-8")

        config = Config(str(config_path))

        assert config.default_encoding == "Auto"
        assert config.log_level == logging.INFO
        assert config.get("CustomSection", "foo") == "bar"

    def test_invalid_log_level_defaults_to_info(self, tmp_path):
        config_path = tmp_path / "config.ini"
        config_path.write_text("[General]\nlog_level = chatty\n", encoding="utf-8")

        config = Config(str(config_path))

        assert config.log_level == logging.INFO

    def test_utf8_bom_in_config_is_accepted(self, tmp_path):
        config_path = tmp_path / "config.ini"
        config_path.write_bytes(b"\xef\xbb\xbf[Reader]\ndefault_encoding = UTF8\n")

        config = Config(str(config_path))

        assert config.default_encoding == "UTF8"


class TestConfigSave:
    def test_set_and_save_preserves_unrelated_sections(self, tmp_path):
        config_path = tmp_path / "config.ini"
        config_path.write_text("[CustomSection]\ncustom_key = custom_value\n", encoding="utf-8")

        config = Config(str(config_path))
        config.set("Reader", "default_encoding", "CP1250")
        config.save()

        reloaded = Config(str(config_path))
        assert reloaded.default_encoding == "CP1250"
        assert reloaded.get("CustomSection", "custom_key") == "custom_value"

    def test_set_bool(self, tmp_path):
        config = Config(str(tmp_path / "config.ini"))

        config.set("General", "log_to_file", True)

        assert config.log_to_file is True
        assert config.get("General", "log_to_file") == "true"

    def test_get_int(self, tmp_path):
        config_path = tmp_path / "config.ini"
        config_path.write_text("[Custom]\nnumber = 12\n", encoding="utf-8")

        config = Config(str(config_path))

        assert config.get_int("Custom", "number") == 12
        assert config.get_int("Custom", "missing", fallback=3) == 3
        assert os.path.exists(config.config_path)

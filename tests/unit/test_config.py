"""Unit tests for configuration loading."""

from unittest.mock import patch

import pytest
import yaml

from tagmap.config import DEFAULT_CONFIG_FILE, TagmapConfig, load_config
from tagmap.core.errors import ConfigError


class TestLoadConfig:
    def test_defaults(self):
        config = TagmapConfig()

        assert config.tag_delimiter == ","
        assert config.batch_size == 400
        assert config.product_shape == "dot"
        assert config.tag_shape == "diamond"
        assert "vis-network@9.1.9" in config.vis_network_url

    def test_no_file_in_cwd_gives_defaults(self, tmp_path):
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            assert load_config() == TagmapConfig()

    def test_picks_up_cwd_file(self, tmp_path):
        (tmp_path / DEFAULT_CONFIG_FILE).write_text(yaml.dump({"tag_delimiter": "|"}))

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            config = load_config()

        assert config.tag_delimiter == "|"

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("page_title: London Tea\nbatch_size: 50\n")

        config = load_config(path)

        assert config.page_title == "London Tea"
        assert config.batch_size == 50

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == TagmapConfig()

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("colour: red\n")

        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("tag_delimiter: [unclosed\n")

        with pytest.raises(ConfigError, match="Failed to read config"):
            load_config(path)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_batch_size(self, tmp_path):
        path = tmp_path / "zero.yaml"
        path.write_text("batch_size: 0\n")

        with pytest.raises(ConfigError):
            load_config(path)


class TestOverrides:
    def test_override_applies(self):
        config = TagmapConfig().with_overrides(tag_delimiter=";")
        assert config.tag_delimiter == ";"

    def test_none_is_ignored(self):
        base = TagmapConfig(tag_delimiter="|")
        assert base.with_overrides(tag_delimiter=None) is base

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ConfigError):
            TagmapConfig().with_overrides(tag_delimiter="")

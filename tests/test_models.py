import os
import pytest
from unittest.mock import patch

from metapath.core.models import Config, MetaTarget


class TestConfig:
    def test_default_config(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config()
        assert config.flavour == "native"
        assert config.max_file_size == 1024 * 1024
        assert "utf-8" in config.encoding_fallbacks
        assert config.self_meta_file_name == "taggu_self.yml"
        assert config.item_meta_file_name == "taggu_item.yml"

    def test_environment_overrides(self):
        env = {"METAPATH_FLAVOUR": "windows", "METAPATH_MAX_FILE_SIZE": "2048"}
        with patch.dict(os.environ, env, clear=True):
            config = Config()
        assert config.flavour == "windows"
        assert config.max_file_size == 2048

    def test_custom_config(self):
        config = Config(flavour="posix", max_file_size=10)
        assert config.flavour == "posix"
        assert config.max_file_size == 10

    def test_invalid_flavour(self):
        with pytest.raises(ValueError, match="Unknown path flavour"):
            Config(flavour="amiga")

    def test_invalid_max_file_size(self):
        with pytest.raises(ValueError, match="max_file_size"):
            Config(max_file_size=0)

    def test_target_for_file(self):
        config = Config()
        assert config.target_for_file("taggu_self.yml") is MetaTarget.CONTAINS
        assert config.target_for_file("taggu_item.yml") is MetaTarget.SIBLINGS
        assert config.target_for_file("notes.yml") is None


class TestMetaTarget:
    def test_values(self):
        assert MetaTarget("contains") is MetaTarget.CONTAINS
        assert MetaTarget("siblings") is MetaTarget.SIBLINGS

"""
Tests for oaepkit configuration.
"""

import json
import os

import pytest
from cryptography.hazmat.primitives import hashes

from oaepkit.config import ConfigError, PaddingConfig


class TestPaddingConfig:
    """Test parameter selection and persistence."""
    
    def test_defaults(self):
        config = PaddingConfig()
        assert isinstance(config.hash_algorithm(), hashes.SHA1)
        assert isinstance(config.mgf().algorithm, hashes.SHA1)
        assert config.label == b""
    
    def test_separate_mgf_hash(self):
        config = PaddingConfig("sha256", "sha1")
        assert isinstance(config.hash_algorithm(), hashes.SHA256)
        assert isinstance(config.mgf().algorithm, hashes.SHA1)
    
    def test_invalid_hash(self):
        with pytest.raises(ConfigError):
            PaddingConfig("whirlpool")
    
    def test_save_and_load(self, tmp_path):
        path = str(tmp_path / "nested" / "config.json")
        config = PaddingConfig("sha256", "sha384", b"\x00label")
        assert config.save(path) == path
        assert PaddingConfig.load(path) == config
    
    def test_label_stored_as_hex(self, tmp_path):
        path = str(tmp_path / "config.json")
        PaddingConfig(label=b"ab").save(path)
        with open(path) as f:
            assert json.load(f)["label"] == "6162"
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            PaddingConfig.load(str(tmp_path / "missing.json"))
    
    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            PaddingConfig.load(str(path))
    
    def test_unknown_keys(self):
        with pytest.raises(ConfigError):
            PaddingConfig.from_dict({"hash": "sha1", "colour": "blue"})
    
    def test_invalid_label(self):
        with pytest.raises(ConfigError):
            PaddingConfig.from_dict({"label": "zz"})
    
    def test_not_an_object(self):
        with pytest.raises(ConfigError):
            PaddingConfig.from_dict(["sha1"])
    
    def test_default_path(self):
        assert PaddingConfig.default_path().endswith(os.path.join(".oaepkit", "config.json"))

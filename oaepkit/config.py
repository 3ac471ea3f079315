"""
Configuration management for oaepkit.

A configuration selects the hash algorithm, the MGF1 hash algorithm and
the default label used by the command-line tool. It is stored as JSON,
by default in ``~/.oaepkit/config.json``, with the label hex-encoded.
"""

import json
import os
from typing import Optional

from .crypto.hashing import DEFAULT_HASH_NAME, UnsupportedHashError, resolve_hash_algorithm
from .crypto.mgf import MGF1


class ConfigError(Exception):
    """Raised when configuration operations fail."""
    pass


class PaddingConfig:
    """
    OAEP parameter selection.
    
    The MGF1 hash defaults to the main hash algorithm when not set.
    """
    
    def __init__(self, hash_name: str = DEFAULT_HASH_NAME,
                 mgf_hash_name: Optional[str] = None, label: bytes = b""):
        """
        Initialize configuration.
        
        Args:
            hash_name: Hash algorithm name for label hashing
            mgf_hash_name: Hash algorithm name for MGF1 (None = same as hash_name)
            label: Default label / encoding parameters
            
        Raises:
            ConfigError: If a hash name is not supported
        """
        self.hash_name = hash_name
        self.mgf_hash_name = mgf_hash_name
        self.label = bytes(label)
        
        # Validate eagerly so a bad file fails at load time
        self.hash_algorithm()
        self.mgf()
    
    def hash_algorithm(self):
        try:
            return resolve_hash_algorithm(self.hash_name)
        except UnsupportedHashError as e:
            raise ConfigError(f"Invalid hash setting: {e}")
    
    def mgf(self) -> MGF1:
        try:
            return MGF1(self.mgf_hash_name or self.hash_name)
        except UnsupportedHashError as e:
            raise ConfigError(f"Invalid MGF hash setting: {e}")
    
    def to_dict(self) -> dict:
        return {
            'hash': self.hash_name,
            'mgf_hash': self.mgf_hash_name,
            'label': self.label.hex(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'PaddingConfig':
        """
        Build a configuration from a parsed JSON object.
        
        Raises:
            ConfigError: If the object has unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")
        
        unknown = set(data) - {'hash', 'mgf_hash', 'label'}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        
        try:
            label = bytes.fromhex(data.get('label') or "")
        except (TypeError, ValueError):
            raise ConfigError("Label must be a hex string")
        
        return cls(
            hash_name=data.get('hash', DEFAULT_HASH_NAME),
            mgf_hash_name=data.get('mgf_hash'),
            label=label,
        )
    
    @staticmethod
    def default_path() -> str:
        return os.path.join(os.path.expanduser("~/.oaepkit"), "config.json")
    
    @classmethod
    def load(cls, path: Optional[str] = None) -> 'PaddingConfig':
        """
        Load configuration from a JSON file.
        
        Args:
            path: File path (defaults to ``default_path()``)
            
        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if path is None:
            path = cls.default_path()
        
        if not os.path.exists(path):
            raise ConfigError(f"Configuration file not found: {path}")
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read configuration: {e}")
        
        return cls.from_dict(data)
    
    def save(self, path: Optional[str] = None) -> str:
        """
        Write configuration to a JSON file, creating its directory.
        
        Returns:
            The path written
        """
        if path is None:
            path = self.default_path()
        
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}")
        
        return path
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, PaddingConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()
    
    def __repr__(self) -> str:
        return (f"PaddingConfig(hash_name={self.hash_name!r}, "
                f"mgf_hash_name={self.mgf_hash_name!r}, label={self.label!r})")

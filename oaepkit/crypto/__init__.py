"""
Cryptographic primitives used by the OAEP encoders.

This module provides:
- Hash function capability (cryptography hashes)
- MGF1 mask generation
- Byte utilities and the default seed source
"""

from .hashing import HashFunction, resolve_hash_algorithm, UnsupportedHashError
from .mgf import MGF1, mgf1, MaskTooLong
from .utils import xor_bytes, fill_with_random, fixed_seed

__all__ = [
    'HashFunction',
    'resolve_hash_algorithm',
    'UnsupportedHashError',
    'MGF1',
    'mgf1',
    'MaskTooLong',
    'xor_bytes',
    'fill_with_random',
    'fixed_seed',
]

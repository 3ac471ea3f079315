"""
oaepkit: OAEP padding for RSA encryption.

Implements basic OAEP (PKCS #1 v2.0, RFC 2437) and EME-OAEP
(PKCS #1 v2.1, RFC 3447) encoding and decoding with pluggable hash and
mask generation functions, plus RSAES-OAEP over ``cryptography`` RSA keys.

Basic Usage:
    >>> from oaepkit import eme_oaep_encode, eme_oaep_decode
    >>> 
    >>> em = eme_oaep_encode(b"secret", b"", 256, "sha256")
    >>> len(em), em[0]
    (256, 0)
    >>> eme_oaep_decode(em, b"", 256, "sha256")
    b'secret'
"""

__version__ = "1.0.0"

from .config import ConfigError, PaddingConfig
from .crypto.hashing import HashFunction, UnsupportedHashError, resolve_hash_algorithm
from .crypto.mgf import MGF1, MaskTooLong, mgf1
from .crypto.utils import fill_with_random, fixed_seed, xor_bytes
from .padding.oaep import (
    DecodingError,
    EncodingLengthError,
    LabelTooLong,
    MessageTooLong,
    OAEPError,
    eme_oaep_decode,
    eme_oaep_encode,
    max_message_length,
    oaep_decode,
    oaep_encode,
)
from .padding.rsaes import RSAEncryptionError, rsaes_oaep_decrypt, rsaes_oaep_encrypt


__all__ = [
    # Version info
    '__version__',
    
    # Encoding
    'oaep_encode',
    'oaep_decode',
    'eme_oaep_encode',
    'eme_oaep_decode',
    'max_message_length',
    
    # Encryption
    'rsaes_oaep_encrypt',
    'rsaes_oaep_decrypt',
    
    # Primitives
    'HashFunction',
    'resolve_hash_algorithm',
    'MGF1',
    'mgf1',
    'fill_with_random',
    'fixed_seed',
    'xor_bytes',
    
    # Configuration
    'PaddingConfig',
    
    # Errors
    'OAEPError',
    'MessageTooLong',
    'EncodingLengthError',
    'LabelTooLong',
    'DecodingError',
    'MaskTooLong',
    'UnsupportedHashError',
    'RSAEncryptionError',
    'ConfigError',
]

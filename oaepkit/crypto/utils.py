"""
Byte-level utilities shared by the OAEP encoders and decoders.

This module provides the XOR primitive used for masking, the default
cryptographically secure seed source, octet/integer conversions and
a few helpers for handling sensitive buffers.
"""

import hmac
import secrets
from typing import Callable, Union


SeedFunction = Callable[[bytearray], None]


def secure_zero(data: Union[bytes, bytearray, memoryview]) -> None:
    """
    Overwrite a mutable buffer with zeros.
    
    Args:
        data: Bytearray or memoryview to zero out. Immutable bytes are
            accepted but cannot be cleared.
    """
    if isinstance(data, (bytearray, memoryview)):
        for i in range(len(data)):
            data[i] = 0
    elif isinstance(data, bytes):
        # Immutable; the caller should hold secrets in a bytearray
        pass
    else:
        raise TypeError("Data must be bytes, bytearray, or memoryview")


def fill_with_random(buffer: bytearray) -> None:
    """
    Fill a buffer in place with cryptographically secure random bytes.
    
    This is the default seed source for both OAEP encoders.
    
    Args:
        buffer: Mutable buffer to fill
    """
    buffer[:] = secrets.token_bytes(len(buffer))


def fixed_seed(seed: bytes) -> SeedFunction:
    """
    Build a deterministic seed source that always yields ``seed``.
    
    Intended for known-answer tests only; never use it to encrypt real data.
    
    Args:
        seed: Seed bytes; must match the digest size of the hash in use
        
    Returns:
        Seed function suitable for the ``seed_function`` parameter
    """
    seed = bytes(seed)

    def fill(buffer: bytearray) -> None:
        if len(buffer) != len(seed):
            raise ValueError(f"Fixed seed is {len(seed)} bytes, expected {len(buffer)}")
        buffer[:] = seed

    return fill


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte sequences in constant time.
    
    Args:
        a: First byte sequence
        b: Second byte sequence
        
    Returns:
        True if sequences are equal, False otherwise
    """
    return hmac.compare_digest(a, b)


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """
    XOR two byte sequences of equal length.
    
    Args:
        a: First byte sequence
        b: Second byte sequence
        
    Returns:
        XOR result as bytes
        
    Raises:
        ValueError: If sequences have different lengths
    """
    if len(a) != len(b):
        raise ValueError("Byte sequences must have equal length")
    
    return bytes(x ^ y for x, y in zip(a, b))


def os2ip(data: bytes) -> int:
    """Convert an octet string to a nonnegative integer (big-endian)."""
    return int.from_bytes(data, byteorder='big')


def i2osp(value: int, length: int) -> bytes:
    """
    Convert a nonnegative integer to an octet string of given length.
    
    Args:
        value: Integer to convert
        length: Number of bytes in output
        
    Returns:
        Big-endian bytes representation
        
    Raises:
        ValueError: If the integer does not fit in ``length`` octets
    """
    if value < 0 or value >= 256 ** length:
        raise ValueError("integer too large")
    return value.to_bytes(length, byteorder='big')


def parse_hex(hex_string: str) -> bytes:
    """
    Parse hexadecimal string to bytes.
    
    Args:
        hex_string: Hex string (with or without separators or line breaks)
        
    Returns:
        Parsed bytes
    """
    cleaned = "".join(hex_string.split()).replace(":", "").replace("-", "")
    return bytes.fromhex(cleaned)

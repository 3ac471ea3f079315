"""
OAEP encoding and decoding.

Implements the two encoding methods used with RSA encryption:

- Basic OAEP from PKCS #1 v2.0 (RFC 2437 section 9.1.1), producing
  EM = maskedSeed || maskedDB of an arbitrary intended length.
- EME-OAEP from PKCS #1 v2.1 (RFC 3447 section 7.1.1), producing
  EM = 0x00 || maskedSeed || maskedDB of exactly k octets, where k is
  the byte length of the RSA modulus.

Both are parametrized by a hash algorithm and a mask generation function
(MGF1 over the same hash by default) and take an injectable seed source.
"""

import logging
from typing import Callable, Optional, Tuple

from ..crypto.hashing import (
    HashAlgorithmLike,
    HashFunction,
    hash_input_limit,
    resolve_hash_algorithm,
)
from ..crypto.mgf import MGF1
from ..crypto.utils import (
    SeedFunction,
    constant_time_compare,
    fill_with_random,
    secure_zero,
    xor_bytes,
)


logger = logging.getLogger(__name__)

MaskGenerationFunction = Callable[[bytes, int], bytes]

# Octets reserved beyond the two hLen fields
SCHEME_OAEP = "oaep"  # 0x01 separator
SCHEME_EME = "eme"    # 0x01 separator and leading 0x00
_OVERHEAD = {SCHEME_OAEP: 1, SCHEME_EME: 2}

SEPARATOR = 0x01


class OAEPError(Exception):
    """Base class for OAEP padding failures."""
    pass


class MessageTooLong(OAEPError):
    """Raised when the message does not fit in the encoded block."""
    pass


class EncodingLengthError(OAEPError):
    """Raised when the intended encoded length cannot hold the padding itself."""
    pass


class LabelTooLong(OAEPError):
    """Raised when the parameters/label exceed the hash input limit."""
    pass


class DecodingError(OAEPError):
    """Raised for any malformed encoded message."""
    pass


def minimum_encoded_length(hash_algorithm: HashAlgorithmLike = None,
                           scheme: str = SCHEME_EME) -> int:
    """
    Smallest intended length that can carry an empty message.
    
    Args:
        hash_algorithm: Hash algorithm name, class or instance
        scheme: SCHEME_OAEP (2hLen + 1) or SCHEME_EME (2hLen + 2)
    """
    if scheme not in _OVERHEAD:
        raise ValueError(f"Unknown OAEP scheme: {scheme!r}")
    h_len = resolve_hash_algorithm(hash_algorithm).digest_size
    return 2 * h_len + _OVERHEAD[scheme]


def max_message_length(length: int, hash_algorithm: HashAlgorithmLike = None,
                       scheme: str = SCHEME_EME) -> int:
    """
    Largest message that fits into an encoded block of ``length`` octets.
    
    Args:
        length: Intended encoded length (emLen for OAEP, k for EME)
        hash_algorithm: Hash algorithm name, class or instance
        scheme: SCHEME_OAEP or SCHEME_EME
        
    Returns:
        Maximum message length in octets (may be 0)
        
    Raises:
        EncodingLengthError: If ``length`` is below the minimum for the scheme
    """
    minimum = minimum_encoded_length(hash_algorithm, scheme)
    if length < minimum:
        raise EncodingLengthError(
            f"intended encoded message length too short: {length} < {minimum}"
        )
    return length - minimum


def _resolve_primitives(hash_algorithm: HashAlgorithmLike,
                        mgf: Optional[MaskGenerationFunction]):
    algorithm = resolve_hash_algorithm(hash_algorithm)
    if mgf is None:
        mgf = MGF1(algorithm)
    return algorithm, mgf


def _hash_label(label: bytes, algorithm, error_class=LabelTooLong) -> bytes:
    limit = hash_input_limit(algorithm)
    if limit is not None and len(label) > limit:
        raise error_class("label too long")
    hash_function = HashFunction(algorithm)
    hash_function.update(label)
    return hash_function.digest()


def _generate_seed(seed_function: SeedFunction, h_len: int) -> bytearray:
    seed = bytearray(h_len)
    seed_function(seed)
    if len(seed) != h_len:
        raise ValueError(f"Seed function produced {len(seed)} bytes, expected {h_len}")
    return seed


def _mask(db: bytes, seed: bytes, db_mask_length: int,
          mgf: MaskGenerationFunction) -> Tuple[bytes, bytes]:
    """Apply both masking rounds and return (maskedSeed, maskedDB)."""
    db_mask = mgf(bytes(seed), db_mask_length)
    masked_db = xor_bytes(db, db_mask)
    
    seed_mask = mgf(masked_db, len(seed))
    masked_seed = xor_bytes(bytes(seed), seed_mask)
    
    return masked_seed, masked_db


def _unmask(masked_seed: bytes, masked_db: bytes,
            mgf: MaskGenerationFunction) -> Tuple[bytes, bytes]:
    """Reverse ``_mask`` and return (seed, DB)."""
    seed_mask = mgf(masked_db, len(masked_seed))
    seed = xor_bytes(masked_seed, seed_mask)
    
    db_mask = mgf(seed, len(masked_db))
    db = xor_bytes(masked_db, db_mask)
    
    return seed, db


def _split_data_block(db: bytes, expected_hash: bytes, leading_ok: bool) -> bytes:
    """
    Check DB = hash || PS || 0x01 || M and return M.
    
    Every check is evaluated before deciding, and all failures raise the
    same DecodingError.
    """
    h_len = len(expected_hash)
    hash_ok = constant_time_compare(db[:h_len], expected_hash)
    
    looking = 1
    index = 0
    invalid = 0
    for i in range(h_len, len(db)):
        is_separator = int(db[i] == SEPARATOR)
        is_zero = int(db[i] == 0x00)
        index += i * (looking & is_separator)
        invalid |= looking & (1 - is_separator) & (1 - is_zero)
        looking &= 1 - is_separator
    invalid |= looking
    
    if not (hash_ok & leading_ok & (invalid == 0)):
        raise DecodingError("decryption error")
    
    return db[index + 1:]


def oaep_encode(message: bytes, parameters: bytes, length: int,
                hash_algorithm: HashAlgorithmLike = None,
                mgf: Optional[MaskGenerationFunction] = None,
                seed_function: SeedFunction = fill_with_random) -> bytes:
    """
    Encode a message with basic OAEP (RFC 2437 section 9.1.1.1).
    
    Args:
        message: Message to be encoded (M)
        parameters: Encoding parameters (P), may be empty
        length: Intended length of the encoded message (emLen)
        hash_algorithm: Hash algorithm (default SHA-1)
        mgf: Mask generation function ``(seed, length) -> mask``
            (default MGF1 over ``hash_algorithm``)
        seed_function: Fills a bytearray with the random seed
        
    Returns:
        Encoded message EM = maskedSeed || maskedDB of exactly ``length`` octets
        
    Raises:
        EncodingLengthError: If ``length`` < 2hLen + 1
        MessageTooLong: If len(message) > length - 2hLen - 1
        LabelTooLong: If parameters exceed the hash input limit
    """
    algorithm, mgf = _resolve_primitives(hash_algorithm, mgf)
    h_len = algorithm.digest_size
    
    max_size = max_message_length(length, algorithm, SCHEME_OAEP)
    if len(message) > max_size:
        logger.debug(f"Rejecting {len(message)}-byte message, OAEP capacity is {max_size}")
        raise MessageTooLong("message too long")
    
    ps = bytes(length - len(message) - 2 * h_len - 1)
    p_hash = _hash_label(parameters, algorithm)
    db = p_hash + ps + bytes([SEPARATOR]) + bytes(message)
    
    seed = _generate_seed(seed_function, h_len)
    try:
        masked_seed, masked_db = _mask(db, seed, length - h_len, mgf)
    finally:
        secure_zero(seed)
    
    em = masked_seed + masked_db
    logger.debug(f"OAEP encoded {len(message)}-byte message into {len(em)} bytes ({algorithm.name})")
    return em


def oaep_decode(encoded: bytes, parameters: bytes,
                hash_algorithm: HashAlgorithmLike = None,
                mgf: Optional[MaskGenerationFunction] = None) -> bytes:
    """
    Decode a basic OAEP encoded message (RFC 2437 section 9.1.1.2).
    
    Args:
        encoded: Encoded message EM = maskedSeed || maskedDB
        parameters: Encoding parameters used when encoding
        hash_algorithm: Hash algorithm (default SHA-1)
        mgf: Mask generation function (default MGF1 over ``hash_algorithm``)
        
    Returns:
        Recovered message
        
    Raises:
        DecodingError: If the encoded message is malformed
    """
    algorithm, mgf = _resolve_primitives(hash_algorithm, mgf)
    h_len = algorithm.digest_size
    encoded = bytes(encoded)
    
    if len(encoded) < 2 * h_len + 1:
        logger.debug(f"Rejecting {len(encoded)}-byte OAEP block, too short for {algorithm.name}")
        raise DecodingError("decryption error")
    
    p_hash = _hash_label(parameters, algorithm, DecodingError)
    _, db = _unmask(encoded[:h_len], encoded[h_len:], mgf)
    
    return _split_data_block(db, p_hash, True)


def eme_oaep_encode(message: bytes, label: bytes, k: int,
                    hash_algorithm: HashAlgorithmLike = None,
                    mgf: Optional[MaskGenerationFunction] = None,
                    seed_function: SeedFunction = fill_with_random) -> bytes:
    """
    Encode a message with EME-OAEP (RFC 3447 section 7.1.1, step 2).
    
    Args:
        message: Message to be encrypted (M)
        label: Label associated with the message (L), may be empty
        k: Length in octets of the RSA modulus
        hash_algorithm: Hash algorithm (default SHA-1)
        mgf: Mask generation function (default MGF1 over ``hash_algorithm``)
        seed_function: Fills a bytearray with the random seed
        
    Returns:
        Encoded message EM = 0x00 || maskedSeed || maskedDB of exactly k octets
        
    Raises:
        EncodingLengthError: If k < 2hLen + 2
        MessageTooLong: If len(message) > k - 2hLen - 2
        LabelTooLong: If the label exceeds the hash input limit
    """
    algorithm, mgf = _resolve_primitives(hash_algorithm, mgf)
    h_len = algorithm.digest_size
    
    max_size = max_message_length(k, algorithm, SCHEME_EME)
    if len(message) > max_size:
        logger.debug(f"Rejecting {len(message)}-byte message, EME-OAEP capacity is {max_size}")
        raise MessageTooLong("message too long")
    
    l_hash = _hash_label(label, algorithm)
    ps = bytes(k - len(message) - 2 * h_len - 2)
    db = l_hash + ps + bytes([SEPARATOR]) + bytes(message)
    
    seed = _generate_seed(seed_function, h_len)
    try:
        masked_seed, masked_db = _mask(db, seed, k - h_len - 1, mgf)
    finally:
        secure_zero(seed)
    
    em = b"\x00" + masked_seed + masked_db
    logger.debug(f"EME-OAEP encoded {len(message)}-byte message into {len(em)} bytes ({algorithm.name})")
    return em


def eme_oaep_decode(encoded: bytes, label: bytes, k: Optional[int] = None,
                    hash_algorithm: HashAlgorithmLike = None,
                    mgf: Optional[MaskGenerationFunction] = None) -> bytes:
    """
    Decode an EME-OAEP encoded message (RFC 3447 section 7.1.2, step 3).
    
    Args:
        encoded: Encoded message EM = Y || maskedSeed || maskedDB
        label: Label associated with the message
        k: Length in octets of the RSA modulus (defaults to len(encoded))
        hash_algorithm: Hash algorithm (default SHA-1)
        mgf: Mask generation function (default MGF1 over ``hash_algorithm``)
        
    Returns:
        Recovered message
        
    Raises:
        DecodingError: If the encoded message is malformed; the cause is
            never reported
    """
    algorithm, mgf = _resolve_primitives(hash_algorithm, mgf)
    h_len = algorithm.digest_size
    encoded = bytes(encoded)
    if k is None:
        k = len(encoded)
    
    if len(encoded) != k or k < 2 * h_len + 2:
        logger.debug(f"Rejecting {len(encoded)}-byte EME-OAEP block for k={k}")
        raise DecodingError("decryption error")
    
    l_hash = _hash_label(label, algorithm, DecodingError)
    _, db = _unmask(encoded[1:h_len + 1], encoded[h_len + 1:], mgf)
    
    return _split_data_block(db, l_hash, encoded[0] == 0x00)

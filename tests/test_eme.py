"""
Tests for EME-OAEP encoding and decoding (RFC 3447).
"""

import hashlib

import pytest
from cryptography.hazmat.primitives import hashes

from oaepkit.crypto.mgf import MGF1
from oaepkit.crypto.utils import fixed_seed, xor_bytes
from oaepkit.padding.oaep import (
    DecodingError,
    EncodingLengthError,
    LabelTooLong,
    MessageTooLong,
    SCHEME_EME,
    eme_oaep_decode,
    eme_oaep_encode,
    max_message_length,
    minimum_encoded_length,
    oaep_encode,
)

from .vectors import (
    PKCS1_EM,
    PKCS1_K,
    PKCS1_MESSAGE,
    PKCS1_SEED,
    SHA256_EM,
    SHA256_K,
    SHA256_LABEL,
    SHA256_MESSAGE,
    SHA256_SEED,
)


class TestKnownAnswers:
    """Test byte-exact output against known vectors."""
    
    def test_pkcs1_vector(self):
        em = eme_oaep_encode(PKCS1_MESSAGE, b"", PKCS1_K, hashes.SHA1(),
                             seed_function=fixed_seed(PKCS1_SEED))
        assert em == PKCS1_EM
    
    def test_sha256_vector_with_label(self):
        em = eme_oaep_encode(SHA256_MESSAGE, SHA256_LABEL, SHA256_K, "sha256",
                             seed_function=fixed_seed(SHA256_SEED))
        assert em == SHA256_EM
    
    def test_matches_basic_oaep_with_one_less_octet(self):
        """EME-OAEP over k octets is 0x00 followed by basic OAEP over k - 1."""
        seed = fixed_seed(bytes(range(48)))
        eme = eme_oaep_encode(b"payload", b"L", 200, "sha384", seed_function=seed)
        basic = oaep_encode(b"payload", b"L", 199, "sha384", seed_function=seed)
        assert eme == b"\x00" + basic


class TestLengths:
    """Test length invariants and boundary rejection."""
    
    @pytest.mark.parametrize("k", [42, 64, 128, 256, 512])
    def test_output_length_and_leading_octet(self, k):
        message = b"m" * max_message_length(k, "sha1", SCHEME_EME)
        em = eme_oaep_encode(message, b"", k)
        assert len(em) == k
        assert em[0] == 0x00
    
    def test_leading_octet_always_zero(self):
        for _ in range(50):
            assert eme_oaep_encode(b"abc", b"", 128)[0] == 0x00
    
    def test_boundary_accepted(self):
        k = 128
        message = b"x" * (k - 2 * 32 - 2)
        assert len(eme_oaep_encode(message, b"", k, "sha256")) == k
    
    def test_boundary_plus_one_rejected(self):
        k = 128
        message = b"x" * (k - 2 * 32 - 1)
        with pytest.raises(MessageTooLong):
            eme_oaep_encode(message, b"", k, "sha256")
    
    def test_modulus_below_minimum(self):
        assert minimum_encoded_length("sha1", SCHEME_EME) == 42
        with pytest.raises(EncodingLengthError):
            eme_oaep_encode(b"", b"", 41)
        # 1024-bit modulus cannot carry SHA-512 OAEP
        with pytest.raises(EncodingLengthError):
            eme_oaep_encode(b"", b"", 128, "sha512")
    
    def test_zero_length_message_at_minimum(self):
        em = eme_oaep_encode(b"", b"", 42)
        assert len(em) == 42
        assert eme_oaep_decode(em, b"", 42) == b""
    
    def test_label_too_long(self, monkeypatch):
        monkeypatch.setattr("oaepkit.padding.oaep.hash_input_limit", lambda algorithm: 4)
        with pytest.raises(LabelTooLong):
            eme_oaep_encode(b"", b"12345", 128)


class TestEncoding:
    """Test structural properties of the encoded block."""
    
    def test_deterministic_with_fixed_seed(self):
        seed = fixed_seed(bytes(32))
        a = eme_oaep_encode(b"m", b"L", 128, "sha256", seed_function=seed)
        b = eme_oaep_encode(b"m", b"L", 128, "sha256", seed_function=seed)
        assert a == b
    
    def test_manual_unmasking(self):
        h_len = 32
        k = 128
        message = b"secret key material"
        label = b"purpose"
        seed = bytes(range(1, 33))
        em = eme_oaep_encode(message, label, k, "sha256", seed_function=fixed_seed(seed))
        
        mgf = MGF1("sha256")
        masked_seed, masked_db = em[1:h_len + 1], em[h_len + 1:]
        assert len(masked_db) == k - h_len - 1
        recovered_seed = xor_bytes(masked_seed, mgf(masked_db, h_len))
        assert recovered_seed == seed
        
        db = xor_bytes(masked_db, mgf(recovered_seed, k - h_len - 1))
        ps_length = k - len(message) - 2 * h_len - 2
        assert db[:h_len] == hashlib.sha256(label).digest()
        assert db[h_len:h_len + ps_length] == bytes(ps_length)
        assert db[h_len + ps_length] == 0x01
        assert db[h_len + ps_length + 1:] == message
    
    def test_mgf_mask_lengths(self):
        requests = []
        inner = MGF1("sha1")
        
        def mgf(seed, length):
            requests.append(length)
            return inner(seed, length)
        
        eme_oaep_encode(b"abc", b"", 128, mgf=mgf)
        assert requests == [128 - 20 - 1, 20]


class TestDecoding:
    """Test EME-OAEP decoding."""
    
    def test_pkcs1_vector_decodes(self):
        assert eme_oaep_decode(PKCS1_EM, b"", PKCS1_K) == PKCS1_MESSAGE
    
    def test_sha256_vector_decodes(self):
        assert eme_oaep_decode(SHA256_EM, SHA256_LABEL, None, "sha256") == SHA256_MESSAGE
    
    @pytest.mark.parametrize("message", [b"", b"\x01", b"\x00\x01\x02", b"z" * 62])
    def test_roundtrip(self, message):
        em = eme_oaep_encode(message, b"label", 128, "sha256")
        assert eme_oaep_decode(em, b"label", 128, "sha256") == message
    
    def test_label_hash_compared_in_constant_time(self, monkeypatch):
        calls = []
        
        def compare(a, b):
            calls.append((a, b))
            return a == b
        
        monkeypatch.setattr("oaepkit.padding.oaep.constant_time_compare", compare)
        assert eme_oaep_decode(PKCS1_EM, b"", PKCS1_K) == PKCS1_MESSAGE
        assert calls == [(hashlib.sha1(b"").digest(), hashlib.sha1(b"").digest())]
    
    def test_nonzero_leading_octet(self):
        em = bytearray(PKCS1_EM)
        em[0] = 0x01
        with pytest.raises(DecodingError):
            eme_oaep_decode(bytes(em), b"")
    
    def test_wrong_label(self):
        with pytest.raises(DecodingError):
            eme_oaep_decode(PKCS1_EM, b"other")
    
    def test_wrong_hash(self):
        with pytest.raises(DecodingError):
            eme_oaep_decode(SHA256_EM, SHA256_LABEL, None, "sha1")
    
    def test_tampered_masked_db(self):
        em = bytearray(PKCS1_EM)
        em[-1] ^= 0x80
        with pytest.raises(DecodingError):
            eme_oaep_decode(bytes(em), b"")
    
    def test_length_mismatch(self):
        with pytest.raises(DecodingError):
            eme_oaep_decode(PKCS1_EM, b"", PKCS1_K + 1)
    
    def test_too_short(self):
        with pytest.raises(DecodingError):
            eme_oaep_decode(bytes(41), b"")
    
    def test_missing_separator(self):
        """A data block of hash and zeros only has no separator."""
        h_len = 20
        k = 64
        seed = bytes(h_len)
        mgf = MGF1("sha1")
        db = hashlib.sha1(b"").digest() + bytes(k - 2 * h_len - 1)
        masked_db = xor_bytes(db, mgf(seed, k - h_len - 1))
        masked_seed = xor_bytes(seed, mgf(masked_db, h_len))
        with pytest.raises(DecodingError):
            eme_oaep_decode(b"\x00" + masked_seed + masked_db, b"")
    
    def test_nonzero_padding_before_separator(self):
        h_len = 20
        k = 64
        seed = bytes(h_len)
        mgf = MGF1("sha1")
        db = hashlib.sha1(b"").digest() + b"\x02" + bytes(k - 2 * h_len - 4) + b"\x01" + b"m"
        assert len(db) == k - h_len - 1
        masked_db = xor_bytes(db, mgf(seed, k - h_len - 1))
        masked_seed = xor_bytes(seed, mgf(masked_db, h_len))
        with pytest.raises(DecodingError):
            eme_oaep_decode(b"\x00" + masked_seed + masked_db, b"")

"""
Test suite for oaepkit.

- test_utils.py, test_hashing.py, test_mgf.py: primitives
- test_oaep.py: basic OAEP (RFC 2437)
- test_eme.py: EME-OAEP (RFC 3447)
- test_rsaes.py: RSAES-OAEP and interoperability with cryptography
- test_config.py, test_cli.py: configuration and command-line tool
"""

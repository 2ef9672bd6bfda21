"""
Tests for mailbox password encryption.
"""

import pytest

from connectors.encryption import PasswordCryptoError, decrypt_password, encrypt_password


class TestPasswordRoundTrip:
    @pytest.mark.parametrize(
        "password",
        ["hunter2", "", "p:a:s:s", "ünïcødé-密码", "x" * 100],
    )
    def test_decrypt_restores_plaintext(self, password, key):
        encrypted = encrypt_password(password, key)
        assert decrypt_password(encrypted, key) == password

    def test_format_is_iv_hex_colon_cipher_hex(self, key):
        iv_hex, cipher_hex = encrypt_password("secret", key).split(":")
        assert len(bytes.fromhex(iv_hex)) == 16
        assert len(bytes.fromhex(cipher_hex)) % 16 == 0

    def test_random_iv_gives_distinct_ciphertexts(self, key):
        first = encrypt_password("same", key)
        second = encrypt_password("same", key)
        assert first != second
        assert decrypt_password(first, key) == "same"
        assert decrypt_password(second, key) == "same"


class TestPasswordErrors:
    def test_missing_colon(self, key):
        with pytest.raises(PasswordCryptoError):
            decrypt_password("deadbeef", key)

    def test_non_hex_input(self, key):
        with pytest.raises(PasswordCryptoError):
            decrypt_password("zz:zz", key)

    def test_short_iv(self, key):
        with pytest.raises(PasswordCryptoError):
            decrypt_password("00ff:" + "00" * 16, key)

    def test_truncated_ciphertext(self, key):
        encrypted = encrypt_password("secret", key)
        with pytest.raises(PasswordCryptoError):
            decrypt_password(encrypted[:-2], key)

    def test_wrong_key_length(self, key):
        with pytest.raises(PasswordCryptoError):
            encrypt_password("secret", "too-short")

    def test_errors_are_value_errors(self, key):
        with pytest.raises(ValueError):
            decrypt_password("no-separator", key)

    def test_wrong_key_fails(self, key):
        encrypted = encrypt_password("hunter2", key)
        with pytest.raises(PasswordCryptoError):
            decrypt_password(encrypted, "fedcba9876543210fedcba9876543210")

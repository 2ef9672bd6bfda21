"""
Password encryption: encrypt / decrypt mailbox passwords at rest.

Uses AES-256-CBC with PKCS7 padding from the ``cryptography`` library.
The key is the UTF-8 encoding of ``config.encryption_key``
(env var: ``ENCRYPTION_KEY``) and must be exactly 32 bytes.

Stored format is ``<ivHex>:<cipherHex>`` with a fresh 16-byte IV per call.
"""

from __future__ import annotations

import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_KEY_BYTES = 32
_IV_BYTES = 16


class PasswordCryptoError(ValueError):
    """Raised for a bad key or a malformed encrypted password."""


def _cipher(key: str, iv: bytes) -> Cipher:
    raw_key = key.encode()
    if len(raw_key) != _KEY_BYTES:
        raise PasswordCryptoError(
            f"ENCRYPTION_KEY must be {_KEY_BYTES} bytes for AES-256-CBC, got {len(raw_key)}"
        )
    return Cipher(algorithms.AES(raw_key), modes.CBC(iv))


def encrypt_password(password: str, key: str) -> str:
    """Encrypt a password, returning ``ivHex:cipherHex``."""
    iv = os.urandom(_IV_BYTES)
    encryptor = _cipher(key, iv).encryptor()

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(password.encode()) + padder.finalize()
    encrypted = encryptor.update(padded) + encryptor.finalize()

    return iv.hex() + ":" + encrypted.hex()


def decrypt_password(encrypted_password: str, key: str) -> str:
    """
    Decrypt a value produced by :func:`encrypt_password`.

    Raises
    ------
    PasswordCryptoError
        If the value is malformed or was encrypted under another key.
    """
    iv_hex, sep, cipher_hex = encrypted_password.partition(":")
    if not sep:
        raise PasswordCryptoError("Encrypted password is missing the IV separator")

    try:
        iv = bytes.fromhex(iv_hex)
        ciphertext = bytes.fromhex(cipher_hex)
    except ValueError as exc:
        raise PasswordCryptoError(f"Encrypted password is not valid hex: {exc}") from exc

    if len(iv) != _IV_BYTES:
        raise PasswordCryptoError(f"IV must be {_IV_BYTES} bytes, got {len(iv)}")

    decryptor = _cipher(key, iv).decryptor()
    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode()
    except ValueError as exc:
        # Covers partial blocks, bad padding and non-UTF-8 output.
        raise PasswordCryptoError(f"Failed to decrypt password: {exc}") from exc

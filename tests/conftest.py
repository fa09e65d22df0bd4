"""Shared fixtures: signing keys and a pinned clock."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from developer_token import TokenAssets

from .helpers import FIXED_NOW


@pytest.fixture
def ec_key():
    """A fresh P-256 private key object."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def private_pem(ec_key) -> bytes:
    return ec_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture
def public_pem(ec_key) -> bytes:
    return ec_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture
def assets(private_pem) -> TokenAssets:
    return TokenAssets('ABC123', 'com.example.app', 'TEAM01', private_pem)


@pytest.fixture
def fixed_clock():
    return lambda: float(FIXED_NOW)

"""
Encode and sign a developer token.

The header and the claims are serialized as two separate JSON documents and
base64url-encoded on their own, then the dot-joined pair is signed with ES256.
The verifier expects exactly this header.claims.signature layout.
"""
import json
import time

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jwt.algorithms import get_default_algorithms
from jwt.exceptions import PyJWTError
from jwt.utils import base64url_encode

from .claims import ALGORITHM, build
from .errors import CryptoError, SerializationError


def encode_as_b64(value):
    """Compact JSON of ``value``, base64url-encoded without padding."""
    try:
        data = json.dumps(value, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e
    return base64url_encode(data.encode('utf-8')).decode('ascii')


def load_signing_key(private_key):
    """
    Load a P-256 private key from PEM bytes.

    Raises CryptoError for anything else: unreadable PEM, an encrypted key,
    a non-EC key or a key on another curve.
    """
    try:
        key = serialization.load_pem_private_key(private_key, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise CryptoError(f"could not load private key: {e}") from e
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise CryptoError(f"expected an EC private key, got {type(key).__name__}")
    if not isinstance(key.curve, ec.SECP256R1):
        raise CryptoError(f"expected a P-256 key, got curve {key.curve.name}")
    return key


def encode_and_sign(token, private_key):
    if token.header.alg != ALGORITHM or token.header.typ != 'JWT':
        raise CryptoError(f"unsupported header: typ={token.header.typ!r} alg={token.header.alg!r}")

    header_chars = encode_as_b64(token.header.to_dict())
    claims_chars = encode_as_b64(token.claims.to_dict())
    token_chars = '.'.join([header_chars, claims_chars])

    key = load_signing_key(private_key)
    algorithm = get_default_algorithms()[ALGORITHM]
    try:
        signature = algorithm.sign(token_chars.encode('ascii'), key)
    except (ValueError, TypeError, PyJWTError) as e:
        raise CryptoError(f"signing failed: {e}") from e

    return '.'.join([token_chars, base64url_encode(signature).decode('ascii')])


def generate_auth_token(assets, clock=time.time):
    """
    Mint a signed developer token for ``assets``.

    ``clock`` returns seconds since the epoch and defaults to time.time.
    Raises ClockError, SerializationError or CryptoError; never returns a
    partial token.
    """
    token = build(assets, clock)
    return encode_and_sign(token, assets.private_key)

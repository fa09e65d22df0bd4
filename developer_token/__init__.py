from .assets import TokenAssets
from .claims import ALGORITHM, ONE_HOUR, Claims, Header, Token, build
from .errors import ClockError, CryptoError, SerializationError, TokenError
from .signer import encode_and_sign, encode_as_b64, generate_auth_token, load_signing_key

__all__ = [
    'ALGORITHM',
    'ONE_HOUR',
    'Claims',
    'ClockError',
    'CryptoError',
    'Header',
    'SerializationError',
    'Token',
    'TokenAssets',
    'TokenError',
    'build',
    'encode_and_sign',
    'encode_as_b64',
    'generate_auth_token',
    'load_signing_key',
]

from dataclasses import dataclass, field


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"private_key must be str or bytes-like, not {type(value).__name__}")


@dataclass(frozen=True)
class TokenAssets:
    """
    Identifiers and PEM private key needed to mint one token.

    The key is kept as raw bytes and is not parsed here; a malformed key is
    only reported when a token is signed.
    """
    key_id: str
    service_id: str
    team_id: str
    private_key: bytes = field(repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'key_id', str(self.key_id))
        object.__setattr__(self, 'service_id', str(self.service_id))
        object.__setattr__(self, 'team_id', str(self.team_id))
        object.__setattr__(self, 'private_key', _as_bytes(self.private_key))

    @classmethod
    def from_key_file(cls, key_id, service_id, team_id, private_key_file):
        # .p8 files from the developer portal are plain PKCS#8 PEM
        with open(private_key_file, 'rb') as f:
            private_key = f.read()
        return cls(key_id, service_id, team_id, private_key)

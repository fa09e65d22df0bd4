"""
Header and claims of a developer token.

The header identifies the signing key and the team/service pair; the claims
carry the issuer, subject and a one-hour validity window starting now.
"""
import math
import time
from dataclasses import dataclass, field

from .errors import ClockError

# Token lifetime in seconds
ONE_HOUR = 3600

ALGORITHM = 'ES256'


@dataclass(frozen=True)
class Header:
    kid: str
    id: str
    typ: str = field(default='JWT', init=False)
    alg: str = field(default=ALGORITHM, init=False)

    def to_dict(self):
        return {'typ': self.typ, 'alg': self.alg, 'kid': self.kid, 'id': self.id}


@dataclass(frozen=True)
class Claims:
    iss: str
    iat: int
    exp: int
    sub: str

    def to_dict(self):
        return {'iss': self.iss, 'iat': self.iat, 'exp': self.exp, 'sub': self.sub}


@dataclass(frozen=True)
class Token:
    header: Header
    claims: Claims


def issued_at(clock=time.time):
    """
    Read the clock once and return whole seconds since the Unix epoch.

    Raises ClockError if the reading is before the epoch or not a usable
    number; the value is never clamped.
    """
    try:
        now = float(clock())
    except (OSError, OverflowError, ValueError, TypeError) as e:
        raise ClockError(f"could not read system time: {e}") from e
    if not math.isfinite(now):
        raise ClockError(f"system time is not finite: {now}")
    if now < 0:
        raise ClockError(f"system time is {-now:.3f}s before the Unix epoch")
    return int(now)


def build(assets, clock=time.time):
    iat = issued_at(clock)
    header = Header(kid=assets.key_id, id=f"{assets.team_id}.{assets.service_id}")
    claims = Claims(
        iss=assets.team_id,
        iat=iat,
        exp=iat + ONE_HOUR,
        sub=assets.service_id,
    )
    return Token(header=header, claims=claims)

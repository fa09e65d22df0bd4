"""
Mint a developer token from the command line.

Usage:
  python3 -m developer_token <key_id> <service_id> <team_id> <private_key_file> [output_file]

Missing arguments are read from the environment:
  DEVELOPER_TOKEN_KEY_ID, DEVELOPER_TOKEN_SERVICE_ID, DEVELOPER_TOKEN_TEAM_ID,
  DEVELOPER_TOKEN_PRIVATE_KEY_FILE, or DEVELOPER_TOKEN_PRIVATE_KEY holding the
  PEM itself (literal "\\n" sequences are turned into newlines).
"""
import os
import sys

from .assets import TokenAssets
from .errors import TokenError
from .signer import generate_auth_token

USAGE = "Usage: python3 -m developer_token <key_id> <service_id> <team_id> <private_key_file> [output_file]"

ENV_PREFIX = 'DEVELOPER_TOKEN_'


def _arg_or_env(argv, index, name, environ):
    if len(argv) > index and argv[index]:
        return argv[index]
    return environ.get(ENV_PREFIX + name)


def load_assets(argv, environ=None):
    """
    Build TokenAssets from positional arguments, falling back to the environment.

    Returns None when a required value is missing. Raises OSError if the key
    file cannot be read.
    """
    if environ is None:
        environ = os.environ
    key_id = _arg_or_env(argv, 1, 'KEY_ID', environ)
    service_id = _arg_or_env(argv, 2, 'SERVICE_ID', environ)
    team_id = _arg_or_env(argv, 3, 'TEAM_ID', environ)
    if not (key_id and service_id and team_id):
        return None

    private_key_file = _arg_or_env(argv, 4, 'PRIVATE_KEY_FILE', environ)
    if private_key_file:
        return TokenAssets.from_key_file(key_id, service_id, team_id, private_key_file)

    inline_key = environ.get(ENV_PREFIX + 'PRIVATE_KEY')
    if not inline_key:
        return None
    return TokenAssets(key_id, service_id, team_id, inline_key.replace("\\n", "\n"))


def main(argv=None, environ=None):
    if argv is None:
        argv = sys.argv

    try:
        assets = load_assets(argv, environ)
    except OSError as e:
        print(f"Failed reading private key file: {e}", file=sys.stderr)
        return 1
    if assets is None:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        token = generate_auth_token(assets)
    except TokenError as e:
        print(f"Failed to generate token: {e}", file=sys.stderr)
        return 1

    output_file = argv[5] if len(argv) > 5 else None
    if output_file is None:
        print(token)
        return 0

    try:
        with open(output_file, 'w') as output:
            output.write(token)
    except OSError as e:
        print(f"Failed writing token to {output_file}: {e}", file=sys.stderr)
        return 1
    print(f"Wrote token to: {output_file}")
    return 0

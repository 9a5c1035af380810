#!/usr/bin/env python
"""
CLI script to sign a Direct form or verify a callback.

Usage:
    python scripts/sign_form.py sign amount=100 redirect_uri=https://example.com/cb
    python scripts/sign_form.py verify status_code=200 timestamp=... nonce=... \
        result_code=2000 call_id=... signature=...

Credentials come from CHARGIFY_API_KEY / CHARGIFY_API_SECRET (a .env file is honored).
"""
import sys
import os
import argparse

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from chargify_direct.client import Client
from chargify_direct.direct.errors import InvalidArgument
from chargify_direct.direct.signing import generate_nonce, generate_timestamp


def parse_pairs(pairs):
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected key=value, got '{pair}'")
        params[key] = value
    return params


def main():
    parser = argparse.ArgumentParser(description='Sign Chargify Direct forms and verify callbacks')
    parser.add_argument('command', choices=['sign', 'verify'], help='Operation to run')
    parser.add_argument('params', nargs='*', help='key=value parameters')
    parser.add_argument('--html', action='store_true', help='Print hidden inputs instead of field pairs')

    args = parser.parse_args()

    try:
        params = parse_pairs(args.params)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    direct = Client.from_env().direct

    try:
        if args.command == 'sign':
            params.setdefault('timestamp', generate_timestamp())
            params.setdefault('nonce', generate_nonce())
            secure = direct.secure_parameters(params)
            if args.html:
                print(secure.to_form_inputs())
            else:
                for name, value in secure.to_form_fields():
                    print(f"{name}={value}")
        else:
            response = direct.response_parameters(params)
            print(f"Success: {response.is_success}")
            print(f"Verified: {response.is_verified}")
            if not response.is_verified:
                sys.exit(1)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == '__main__':
    main()

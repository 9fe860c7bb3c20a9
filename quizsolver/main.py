import argparse
import sys
from dataclasses import replace

from .config import config
from .core import SessionClient, TokenResolver, decipher_token
from .errors import SessionError


def build_parser():
    parser = argparse.ArgumentParser(description="Quiz session challenge solver")
    parser.add_argument("pin", nargs="?", type=int, help="Game pin to reserve a session for")
    parser.add_argument("--token", help="Captured base64 session token (offline mode)")
    parser.add_argument("--challenge", help="Captured challenge text (offline mode)")
    parser.add_argument("--attempts", type=int, help=f"Brute force attempts (default {config.attempts})")
    parser.add_argument("--timeout", type=float, help=f"Request timeout in seconds (default {config.timeout})")
    parser.add_argument("--reserve-url", help="Session reserve endpoint")
    parser.add_argument("--eval-url", help="Remote expression evaluator")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    offline = args.token is not None or args.challenge is not None
    if offline and (args.token is None or args.challenge is None):
        parser.error("--token and --challenge must be given together")
    if not offline and args.pin is None:
        parser.error("a game pin is required unless --token/--challenge are given")

    overrides = {
        "attempts": args.attempts,
        "timeout": args.timeout,
        "reserve_url": args.reserve_url,
        "eval_url": args.eval_url,
    }
    cfg = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    try:
        if offline:
            print("[*] Deciphering captured token...")
            token = decipher_token(args.token, args.challenge)
        else:
            with SessionClient(cfg) as client:
                token = TokenResolver(client, attempts=cfg.attempts).resolve_token(args.pin)
    except SessionError as e:
        print(f"[-] {e}")
        return 1

    print(f"\n[SUCCESS] Token: {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

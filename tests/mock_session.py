"""
Builds synthetic session tokens and fake HTTP collaborators for the tests.
Run directly to print a sample reserve response.
"""

import base64
import json

import requests

from quizsolver.core.connection import SessionChallenge

HEX_ALPHABET = "0123456789abcdef"

# 840 = lcm(1..8): every residue class modulo lcm(period, mask length)
# sees all sixteen hex digits, so only the true mask survives.
BLOCK = 840

# Each byte admits exactly one alphabet symbol: 0x15 -> '-', 0x16 -> '.'.
# Period 2 gives b"-." and period 3 gives b"-.-", which are not equivalent.
AMBIGUOUS_TOKEN = bytes([0x15, 0x16, 0x15])


def hex_plaintext(block=BLOCK):
    return "".join(c * block for c in HEX_ALPHABET)


def mask_token(plaintext, mask):
    data = plaintext.encode() if isinstance(plaintext, str) else plaintext
    return bytes(b ^ mask[i % len(mask)] for i, b in enumerate(data))


def token_header(plaintext, mask):
    return base64.b64encode(mask_token(plaintext, mask)).decode()


class FakeResponse:
    def __init__(self, text="", headers=None, status_code=200, content=None):
        self.text = text
        self.headers = headers or {}
        self.status_code = status_code
        self.content = text.encode() if content is None else content

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    """Stands in for requests.Session; replies are returned (or raised) in order."""
    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self):
        self.closed = True


class FakeClient:
    """Stands in for SessionClient in resolver tests."""
    def __init__(self, sessions, evaluate=None):
        self.sessions = list(sessions)
        self.fetches = 0
        self.evaluations = []
        self._evaluate = evaluate

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass

    def fetch_challenge(self, game_pin):
        self.fetches += 1
        reply = self.sessions.pop(0) if len(self.sessions) > 1 else self.sessions[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def evaluate(self, expression):
        self.evaluations.append(expression)
        if isinstance(self._evaluate, Exception):
            raise self._evaluate
        return self._evaluate(expression)


def session(plaintext, mask, challenge="unrecognised", game_pin=123456):
    return SessionChallenge(game_pin, mask_token(plaintext, mask), challenge)


def ambiguous_session(challenge="unrecognised", game_pin=123456):
    return SessionChallenge(game_pin, AMBIGUOUS_TOKEN, challenge)


if __name__ == "__main__":
    print(f"challenge = {json.dumps({'challenge': '(3 + 4) * 2'})}")
    print(f"token = {token_header(hex_plaintext(block=4), b'14')}")

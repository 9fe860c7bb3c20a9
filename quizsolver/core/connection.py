from dataclasses import dataclass

import requests

from ..config import config as default_config
from ..errors import ChallengeParseError, GameNotFound, TransportError
from ..utils.helpers import decode_session_token

NOT_FOUND_BODY = "Not found"


@dataclass(frozen=True)
class SessionChallenge:
    """One reserve response: the decoded token bytes and its challenge text."""
    game_pin: int
    token: bytes
    challenge: str


class SessionClient:
    """
    Handles the HTTP side of a session challenge: reserving a session for a
    game pin and, as a last resort, evaluating a challenge remotely.
    """
    def __init__(self, config=None, session=None):
        self.config = config or default_config
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.session.close()

    def fetch_challenge(self, game_pin):
        """
        Reserves a session and returns the token/challenge pair.
        A missing challenge field or token header is passed on empty: an empty
        challenge goes to brute force and an empty token costs one retry.
        """
        url = f"{self.config.reserve_url}{game_pin}"
        try:
            resp = self.session.get(url, timeout=self.config.timeout)
            body = resp.text
        except requests.RequestException as e:
            raise TransportError(f"reserve session {game_pin}: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            if body == NOT_FOUND_BODY:
                raise GameNotFound(game_pin) from e
            raise ChallengeParseError(f"parse session challenge: {e}") from e

        if not isinstance(data, dict):
            raise ChallengeParseError("parse session challenge: not a JSON object")
        challenge = data.get("challenge")
        if challenge is None:
            challenge = ""
        if not isinstance(challenge, str):
            raise ChallengeParseError("parse session challenge: challenge is not a string")

        token = resp.headers.get(self.config.token_header, "")
        return SessionChallenge(game_pin, decode_session_token(token), challenge)

    def evaluate(self, expression):
        """Asks the remote evaluator for the value of expression; returns the raw body."""
        try:
            resp = self.session.get(
                self.config.eval_url,
                params={"code": expression},
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"remote evaluation: {e}") from e
        return resp.content

"""
Bounded retry loop that turns a game pin into a plaintext session token.

Each attempt reserves a fresh session, so an ambiguous brute force is simply
retried with new data. After `attempts` ambiguous rounds one final round is
made with the remote evaluator allowed.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..config import config
from ..errors import (
    AmbiguousOrNoMask,
    ExhaustedRetries,
    RemoteEvaluatorFailure,
    SessionError,
    UnsupportedChallenge,
)
from ..modules import ExpressionSolver, MaskBruteForcer, xor_mask
from ..utils.helpers import decode_session_token
from .connection import SessionChallenge


class State(Enum):
    FETCH_CHALLENGE = "fetch_challenge"
    SOLVE_ATTEMPT = "solve_attempt"
    REMOTE_ATTEMPT = "remote_attempt"
    DECODE = "decode"
    SUCCESS = "success"
    FAILURE = "failure"


TERMINAL_STATES = frozenset({State.SUCCESS, State.FAILURE})


@dataclass(frozen=True)
class Attempt:
    state: State
    game_pin: int
    attempt: int = 0
    session: Optional[SessionChallenge] = None
    mask: Optional[bytes] = None
    plaintext: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def done(self) -> bool:
        return self.state in TERMINAL_STATES


def decode_token(token: bytes, mask: bytes) -> str:
    return xor_mask(token, mask).decode("utf-8", errors="replace")


def solve_mask(token: bytes, challenge: str, solver: ExpressionSolver,
               forcer: MaskBruteForcer, allow_remote: bool = False) -> bytes:
    """Expression first, brute force when the challenge shape is unknown."""
    try:
        return solver.solve(challenge, allow_remote=allow_remote)
    except UnsupportedChallenge:
        return forcer.recover(token)


def decipher_token(token_b64, challenge, solver=None, forcer=None) -> str:
    """One-shot decipher of an already captured token/challenge pair."""
    token = decode_session_token(token_b64)
    mask = solve_mask(token, challenge, solver or ExpressionSolver(), forcer or MaskBruteForcer())
    return decode_token(token, mask)


class TokenResolver:
    """
    Drives an Attempt through its states. All network traffic goes through
    `client` (fetch_challenge / evaluate), so step() can be tested offline.
    """
    def __init__(self, client, attempts: Optional[int] = None,
                 solver: Optional[ExpressionSolver] = None,
                 forcer: Optional[MaskBruteForcer] = None):
        self.client = client
        self.attempts = config.attempts if attempts is None else attempts
        self.solver = solver or ExpressionSolver(evaluator=client.evaluate)
        self.forcer = forcer or MaskBruteForcer()

    def step(self, attempt: Attempt) -> Attempt:
        handler = {
            State.FETCH_CHALLENGE: self._fetch,
            State.SOLVE_ATTEMPT: self._solve,
            State.REMOTE_ATTEMPT: self._remote,
            State.DECODE: self._decode,
        }.get(attempt.state)
        if handler is None:
            return attempt
        return handler(attempt)

    def _fetch(self, attempt):
        print(f"[*] Reserving session for game {attempt.game_pin} "
              f"(attempt {attempt.attempt + 1}/{self.attempts})...")
        try:
            session = self.client.fetch_challenge(attempt.game_pin)
        except SessionError as e:
            return replace(attempt, state=State.FAILURE, error=e)
        return replace(attempt, state=State.SOLVE_ATTEMPT, session=session)

    def _solve(self, attempt):
        session = attempt.session
        try:
            mask = solve_mask(session.token, session.challenge, self.solver, self.forcer)
        except AmbiguousOrNoMask as e:
            count = attempt.attempt + 1
            if count < self.attempts:
                return replace(attempt, state=State.FETCH_CHALLENGE, attempt=count,
                               session=None, error=e)
            print(f"[-] No unique mask after {count} attempts")
            return replace(attempt, state=State.REMOTE_ATTEMPT, attempt=count,
                           session=None, error=ExhaustedRetries(count))
        return replace(attempt, state=State.DECODE, mask=mask, error=None)

    def _remote(self, attempt):
        print("[*] Final attempt with remote evaluator...")
        try:
            session = self.client.fetch_challenge(attempt.game_pin)
            mask = self.solver.solve(session.challenge, allow_remote=True)
        except SessionError as e:
            failure = RemoteEvaluatorFailure()
            failure.__cause__ = e
            return replace(attempt, state=State.FAILURE, error=failure)
        return replace(attempt, state=State.DECODE, session=session, mask=mask, error=None)

    def _decode(self, attempt):
        plaintext = decode_token(attempt.session.token, attempt.mask)
        return replace(attempt, state=State.SUCCESS, plaintext=plaintext)

    def run(self, game_pin) -> Attempt:
        attempt = Attempt(State.FETCH_CHALLENGE, game_pin)
        while not attempt.done:
            attempt = self.step(attempt)
        return attempt

    def resolve_token(self, game_pin) -> str:
        """Returns the plaintext session token or raises the surfaced error."""
        attempt = self.run(game_pin)
        if attempt.state is State.FAILURE:
            raise attempt.error
        print(f"[+] Session token recovered with mask {attempt.mask!r}")
        return attempt.plaintext

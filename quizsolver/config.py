"""
Runtime configuration, loaded from the environment (and a .env file if present).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

RESERVE_URL = "https://kahoot.it/reserve/session/"
EVAL_URL = "http://safeval.pw/eval"
TOKEN_HEADER = "X-Kahoot-Session-Token"
TOKEN_ATTEMPTS = 40


@dataclass
class Config:
    """Endpoints and limits used by SessionClient and TokenResolver."""
    reserve_url: str = RESERVE_URL
    eval_url: str = EVAL_URL
    token_header: str = TOKEN_HEADER
    timeout: float = 10.0  # seconds, per request
    attempts: int = TOKEN_ATTEMPTS

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            reserve_url=env.get("QUIZSOLVER_RESERVE_URL", RESERVE_URL),
            eval_url=env.get("QUIZSOLVER_EVAL_URL", EVAL_URL),
            token_header=env.get("QUIZSOLVER_TOKEN_HEADER", TOKEN_HEADER),
            timeout=float(env.get("QUIZSOLVER_TIMEOUT", 10.0)),
            attempts=int(env.get("QUIZSOLVER_ATTEMPTS", TOKEN_ATTEMPTS)),
        )


config = Config.from_env()

"""
Error kinds raised while defeating a session challenge.

Only TransportError, GameNotFound, ChallengeParseError and
RemoteEvaluatorFailure ever leave TokenResolver; the rest drive its retries.
"""


class SessionError(Exception):
    """Base class for every session challenge error."""


class TransportError(SessionError):
    """Network or IO failure while talking to a collaborator."""


class GameNotFound(SessionError):
    def __init__(self, game_pin):
        super().__init__(f"game pin not found: {game_pin}")
        self.game_pin = game_pin


class ChallengeParseError(SessionError):
    """The reserve endpoint answered with something we cannot parse."""


class TokenParseError(ChallengeParseError):
    """The session token header is not valid base64."""


class UnsupportedChallenge(SessionError):
    """Neither arithmetic shape matched and no remote evaluation was allowed."""


class AmbiguousOrNoMask(SessionError):
    def __init__(self, count):
        super().__init__(f"not exactly one possible mask ({count} found)")
        self.count = count


class ExhaustedRetries(SessionError):
    def __init__(self, attempts):
        super().__init__(f"no unique mask after {attempts} attempts")
        self.attempts = attempts


class RemoteEvaluatorFailure(SessionError):
    def __init__(self, message="could not defeat session challenge"):
        super().__init__(message)

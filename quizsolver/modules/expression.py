import re

from ..errors import UnsupportedChallenge

# ASCII digits and whitespace only; \d and \s would admit Unicode
_WS = r"[ \t\n\f\r]*"
SUM_TIMES = re.compile(rf"^\(([0-9]+){_WS}\+{_WS}([0-9]+)\){_WS}\*{_WS}([0-9]+)$")
TIMES_SUM = re.compile(rf"^([0-9]+){_WS}\*{_WS}\(([0-9]+){_WS}\+{_WS}([0-9]+)\)$")


def _render(match, combine):
    try:
        a, b, c = (int(g) for g in match.groups())
        return str(combine(a, b, c)).encode()
    except ValueError as e:
        # int/str conversion digit limit
        raise UnsupportedChallenge(f"challenge operands too large: {e}") from e


class ExpressionSolver:
    """
    Solver for the arithmetic session challenge.
    The decimal rendering of the result is the XOR mask.
    """
    def __init__(self, evaluator=None):
        # callable(str) -> bytes, normally SessionClient.evaluate
        self.evaluator = evaluator

    def solve(self, challenge, allow_remote=False):
        """
        Recognizes `(a + b) * c` and `a * (b + c)`.
        Anything else is sent to the remote evaluator when allow_remote is set.
        """
        match = SUM_TIMES.fullmatch(challenge)
        if match:
            return _render(match, lambda a, b, c: (a + b) * c)

        match = TIMES_SUM.fullmatch(challenge)
        if match:
            return _render(match, lambda a, b, c: a * (b + c))

        if not allow_remote:
            raise UnsupportedChallenge(f"unsupported challenge: {challenge!r}")
        if self.evaluator is None:
            raise UnsupportedChallenge("no remote evaluator configured")

        print("[*] Delegating challenge to remote evaluator...")
        mask = self.evaluator(challenge)
        if not mask:
            raise UnsupportedChallenge("remote evaluator returned an empty result")
        return bytes(mask)

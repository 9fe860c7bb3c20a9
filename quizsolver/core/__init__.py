from .connection import SessionChallenge, SessionClient
from .resolver import Attempt, State, TokenResolver, decipher_token

__all__ = ['SessionChallenge', 'SessionClient', 'Attempt', 'State', 'TokenResolver', 'decipher_token']

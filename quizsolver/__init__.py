"""
Session challenge solver for a live-quiz platform.
Recovers the XOR mask hiding the session token, from the arithmetic
challenge when possible and by brute force otherwise.
"""

from .config import Config
from .core import SessionClient, TokenResolver, decipher_token
from .modules import ExpressionSolver, MaskBruteForcer, masks_equivalent, xor_mask

__version__ = "0.1.0"

__all__ = [
    'Config',
    'SessionClient',
    'TokenResolver',
    'decipher_token',
    'ExpressionSolver',
    'MaskBruteForcer',
    'masks_equivalent',
    'xor_mask',
]

from .xor import xor_mask, masks_equivalent
from .expression import ExpressionSolver
from .bruteforce import MaskBruteForcer

__all__ = ['xor_mask', 'masks_equivalent', 'ExpressionSolver', 'MaskBruteForcer']

"""
shadowpromote - promote a managed shadow metadata server to master
"""

__version__ = "0.1.0"

from .core import ShadowPromoter
from .errors import PromoteError
from .models import OutcomeKind, PromotionOutcome, Target

__all__ = ["ShadowPromoter", "PromoteError", "OutcomeKind", "PromotionOutcome", "Target"]

from .entry import ApplyRulesRequest, ApplyRulesResponse
from .rule import RuleCreate, RuleRead, RuleUpdate

__all__ = [
    "ApplyRulesRequest",
    "ApplyRulesResponse",
    "RuleCreate",
    "RuleRead",
    "RuleUpdate",
]

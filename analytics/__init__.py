"""Analytics helpers shared across PocketGuard services."""

from analytics.allocation import allocate_budget
from analytics.report import build_category_frame, build_ledger_frame, generate_report
from analytics.rewards import RewardTracker
from analytics.rules import (
    DEFAULT_RULES,
    RuleContext,
    daily_limit_rule,
    emergency_alert,
    emotional_purchase_rule,
    evaluate_rules,
    rising_trend_rule,
    runway_projection_rule,
)
from analytics.tips import MICRO_SAVING_TIPS, make_tip_rng, pick_micro_saving_tip

__all__ = [
    "allocate_budget",
    "build_category_frame",
    "build_ledger_frame",
    "generate_report",
    "RewardTracker",
    "DEFAULT_RULES",
    "RuleContext",
    "daily_limit_rule",
    "emergency_alert",
    "emotional_purchase_rule",
    "evaluate_rules",
    "rising_trend_rule",
    "runway_projection_rule",
    "MICRO_SAVING_TIPS",
    "make_tip_rng",
    "pick_micro_saving_tip",
]

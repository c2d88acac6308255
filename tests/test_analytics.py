"""Unit tests for allocation, ledger, rule, reward, tip and report helpers."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from analytics.allocation import allocate_budget
from analytics.report import build_category_frame, build_ledger_frame, generate_report
from analytics.rewards import RewardTracker
from analytics.rules import (
    RuleContext,
    daily_limit_rule,
    emotional_purchase_rule,
    evaluate_rules,
    rising_trend_rule,
    runway_projection_rule,
)
from analytics.tips import MICRO_SAVING_TIPS, pick_micro_saving_tip
from core.errors import MAX_AMOUNT, InvalidAmount, coerce_money
from core.ledger import ExpenseLedger
from core.models import AlertCategory, Category, ExpenseRecord, Mood, RewardState

DAY = date(2024, 1, 10)


def _record(amount: int, category: Category = Category.FOOD, mood: Mood = Mood.NEUTRAL, **kwargs) -> ExpenseRecord:
    return ExpenseRecord(amount=amount, category=category, mood=mood, timestamp=DAY, **kwargs)


def _context(record: ExpenseRecord, **overrides) -> RuleContext:
    values = dict(
        record=record,
        previous=(),
        today_spending=record.amount,
        daily_limit=150,
        prior_total=0,
        prior_count=0,
        prior_remaining=4500,
    )
    values.update(overrides)
    return RuleContext(**values)


@pytest.fixture()
def ledger() -> ExpenseLedger:
    book = ExpenseLedger()
    book.append(_record(100, Category.FOOD))
    book.append(_record(40, Category.TRANSPORT))
    book.append(_record(60, Category.FOOD))
    return book


@pytest.mark.parametrize(
    ("budget", "expected"),
    [
        (5000, (500, 4500, 150)),
        (999, (99, 899, 29)),
        (29, (2, 26, 0)),
        (1, (0, 0, 0)),
        (12345, (1234, 11110, 370)),
    ],
)
def test_allocate_budget_floors_each_bucket(budget, expected):
    allocation = allocate_budget(budget)

    assert (allocation.savings, allocation.usable, allocation.daily_limit) == expected
    assert allocation.daily_limit == allocation.usable // 30


def test_allocate_budget_respects_custom_rates():
    allocation = allocate_budget(1000, savings_rate=0.2, usable_rate=0.8, days_per_month=20)

    assert (allocation.savings, allocation.usable, allocation.daily_limit) == (200, 800, 40)


def test_ledger_tracks_totals_and_category_order(ledger):
    assert len(ledger) == 3
    assert ledger.total_spending == 200
    assert ledger.today_spending == 200
    assert ledger.total_spending == ledger.recomputed_total()
    assert list(ledger.category_totals().items()) == [("food", 160), ("transport", 40)]


def test_ledger_reset_today_keeps_history(ledger):
    ledger.reset_today()

    assert ledger.today_spending == 0
    assert ledger.total_spending == 200
    assert len(ledger) == 3


def test_ledger_recent_returns_tail_in_insertion_order(ledger):
    assert [record.amount for record in ledger.recent(2)] == [40, 60]
    assert [record.amount for record in ledger.recent(10)] == [100, 40, 60]
    assert ledger.recent(0) == []


def test_ledger_excludes_emergency_from_today(ledger):
    ledger.append(_record(500, Category.EMERGENCY, is_emergency=True))

    assert ledger.today_spending == 200
    assert ledger.total_spending == 700
    assert ledger.category_totals()["emergency"] == 500


def test_ledger_rejects_non_positive_amounts(ledger):
    before = ledger.snapshot()

    with pytest.raises(InvalidAmount):
        ledger.append(_record(0))

    assert ledger.snapshot() == before


@pytest.mark.parametrize(
    ("value", "expected"),
    [(12, 12), (12.0, 12), ("250", 250), (" 7 ", 7), (MAX_AMOUNT, MAX_AMOUNT), (str(MAX_AMOUNT), MAX_AMOUNT)],
)
def test_coerce_money_accepts_whole_numbers(value, expected):
    assert coerce_money(value, InvalidAmount) == expected


@pytest.mark.parametrize(
    "value",
    [
        pytest.param("1e5000", id="exponent-string"),
        pytest.param("1E+16", id="upper-exponent-string"),
        pytest.param(10**5000, id="int"),
        pytest.param(float(MAX_AMOUNT) * 10, id="float"),
        pytest.param(MAX_AMOUNT + 1, id="one-over"),
    ],
)
def test_coerce_money_rejects_amounts_above_maximum(value):
    with pytest.raises(InvalidAmount, match="maximum"):
        coerce_money(value, InvalidAmount)


@pytest.mark.parametrize(
    ("mood", "category", "fires"),
    [
        (Mood.STRESSED, Category.FOOD, True),
        (Mood.SAD, Category.ENTERTAINMENT, True),
        (Mood.STRESSED, Category.STUDY, False),
        (Mood.SAD, Category.MEDICINE, False),
        (Mood.HAPPY, Category.FOOD, False),
        (Mood.NEUTRAL, Category.PERSONAL, False),
    ],
)
def test_emotional_purchase_rule(mood, category, fires):
    alert = emotional_purchase_rule(_context(_record(10, category, mood)))

    assert (alert is not None) is fires


def test_daily_limit_rule_is_strictly_greater():
    at_limit = daily_limit_rule(_context(_record(150), today_spending=150))
    over_limit = daily_limit_rule(_context(_record(151), today_spending=151, currency="$"))

    assert at_limit is None
    assert over_limit is not None
    assert over_limit.text == "⚠️ Daily limit exceeded! You've spent $151 today (limit: $150)"


def test_rising_trend_rule_needs_two_prior_records():
    assert rising_trend_rule(_context(_record(30), previous=(_record(20),))) is None
    assert rising_trend_rule(_context(_record(30), previous=(_record(20), _record(10)))) is None
    assert rising_trend_rule(_context(_record(30), previous=(_record(10), _record(20)))) is not None


def test_runway_projection_rule():
    quiet = runway_projection_rule(_context(_record(10), prior_total=0, prior_count=0))
    safe = runway_projection_rule(_context(_record(10), prior_total=300, prior_count=3, prior_remaining=4200))
    risky = runway_projection_rule(_context(_record(10), prior_total=900, prior_count=3, prior_remaining=1000))

    assert quiet is None
    # 100/expense * (30 - 1) days = 2900 <= 4200
    assert safe is None
    assert risky is not None
    assert risky.category is AlertCategory.PROJECTION
    assert "4 days" in risky.text


def test_evaluate_rules_keeps_fixed_order():
    record = _record(300, Category.FOOD, Mood.SAD)
    ctx = _context(
        record,
        previous=(_record(100), _record(200)),
        today_spending=600,
        prior_total=300,
        prior_count=2,
        prior_remaining=100,
    )

    alerts = evaluate_rules(ctx)

    assert [alert.category for alert in alerts] == [
        AlertCategory.EMOTIONAL,
        AlertCategory.LIMIT,
        AlertCategory.TREND,
        AlertCategory.PROJECTION,
    ]


def test_reward_tracker_awards_every_cadence():
    tracker = RewardTracker(cadence=3, points_per_award=10)

    results = [tracker.evaluate(today_spending=10, daily_limit=150) for _ in range(6)]

    assert [alert is not None for alert in results] == [False, False, True, False, False, True]
    assert "6 days" in results[-1].text
    assert tracker.state == RewardState(points=20, consecutive_in_budget_days=6)


def test_reward_tracker_ignores_over_limit_evaluations():
    tracker = RewardTracker()
    tracker.evaluate(today_spending=10, daily_limit=150)
    tracker.evaluate(today_spending=10, daily_limit=150)

    assert tracker.evaluate(today_spending=151, daily_limit=150) is None
    assert tracker.state.consecutive_in_budget_days == 2
    assert tracker.evaluate(today_spending=150, daily_limit=150) is not None


class _FixedRng:
    def __init__(self, index: int):
        self.index = index
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.index


def test_pick_micro_saving_tip_uses_injected_rng():
    rng = _FixedRng(2)

    alert = pick_micro_saving_tip(rng)

    assert alert.text == f"💡 {MICRO_SAVING_TIPS[2].format(currency='₹')}"
    assert alert.category is AlertCategory.TIP
    assert rng.calls == [(0, len(MICRO_SAVING_TIPS))]


def test_pick_micro_saving_tip_fills_currency_symbol():
    alert = pick_micro_saving_tip(_FixedRng(0), currency="$")

    assert alert.text == "💡 Save $20 this week by reducing coffee purchases"


def test_pick_micro_saving_tip_rejects_empty_catalog():
    with pytest.raises(ValueError):
        pick_micro_saving_tip(_FixedRng(0), catalog=())


def test_generate_report_folds_unspent_usable_into_savings(ledger):
    ledger.append(_record(200, Category.EMERGENCY, is_emergency=True))
    allocation = allocate_budget(3000)

    report = generate_report(allocation, ledger, RewardState(points=20, consecutive_in_budget_days=6))

    assert report["total_spending"] == 400
    assert report["remaining_budget"] == 2300
    assert report["total_savings"] == 300 + 2300
    assert report["overspending_days"] == 0
    assert report["reward_points"] == 20
    assert report["category_totals"] == {"food": 160, "transport": 40, "emergency": 200}
    assert report["on_track"] is True


def test_generate_report_counts_overspending_days():
    book = ExpenseLedger()
    book.append(_record(3000))

    report = generate_report(allocate_budget(3000), book, RewardState())

    # ceil(3000 / 90) = 34 daily limits, four beyond a 30-day month
    assert report["overspending_days"] == 4
    assert report["remaining_budget"] == -300
    assert report["on_track"] is False


def test_generate_report_overspending_days_stay_exact_for_large_totals():
    book = ExpenseLedger()
    book.append(_record(3 * 10**16 + 1))

    report = generate_report(allocate_budget(100), book, RewardState())

    # daily limit 3, so 10**16 + 1 limits are used
    assert report["overspending_days"] == 10**16 + 1 - 30


def test_generate_report_guards_zero_daily_limit():
    book = ExpenseLedger()
    book.append(_record(45))

    report = generate_report(allocate_budget(10), book, RewardState())

    assert report["overspending_days"] == 15


def test_build_category_frame_sorts_and_shares():
    frame = build_category_frame({"transport": 40, "food": 160})

    assert frame["Category"].tolist() == ["food", "transport"]
    assert frame["Share"].tolist() == pytest.approx([0.8, 0.2])
    assert build_category_frame({}).empty


def test_build_ledger_frame_lists_newest_first(ledger):
    frame = build_ledger_frame(ledger)

    assert frame["Amount"].tolist() == [60, 40, 100]
    assert list(frame.columns) == ["Category", "Amount", "Mood", "Date", "Emergency"]

"""Equal-split payer balances and two-party settlement."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from household_spending.aggregation import grand_total
from household_spending.config import get_settings
from household_spending.config.settings import ShareStrategy
from household_spending.models import Expense, Payer, PayerBalance, Settlement
from household_spending.money import round_ratio

logger = structlog.get_logger(__name__)


def fair_shares(
    total: int, payer_count: int, strategy: ShareStrategy = "rounded"
) -> list[int]:
    """Split ``total`` into ``payer_count`` equal shares.

    ``rounded`` gives every payer ``round(total / payer_count)``; the shares
    may then miss the total by up to ``payer_count - 1`` minor units.
    ``largest_remainder`` gives everyone the floor and hands the leftover
    units to the first payers in order, so the shares always add up to
    ``total``.
    """
    if payer_count <= 0:
        return []

    if strategy == "rounded":
        return [round_ratio(total, payer_count)] * payer_count

    if strategy == "largest_remainder":
        base, remainder = divmod(total, payer_count)
        return [base + 1 if index < remainder else base for index in range(payer_count)]

    raise ValueError(f"Unknown share strategy {strategy!r}")


def payer_balance(
    expenses: Iterable[Expense],
    payers: Sequence[Payer],
    strategy: ShareStrategy | None = None,
) -> list[PayerBalance]:
    """What each payer paid against their equal share of the month total."""
    if not payers:
        return []

    expenses = list(expenses)
    total = grand_total(expenses)
    shares = fair_shares(total, len(payers), strategy or get_settings().share_strategy)

    paid_by_payer: dict[str, int] = {payer.id: 0 for payer in payers}
    for expense in expenses:
        if expense.paid_by in paid_by_payer:
            paid_by_payer[expense.paid_by] += expense.amount_cents
        else:
            logger.debug(
                "balance_unknown_payer",
                payer_id=expense.paid_by,
                expense_id=expense.id,
            )

    balances = [
        PayerBalance(
            payer_id=payer.id,
            payer_name=payer.display_name,
            paid=paid_by_payer[payer.id],
            share=share,
            balance=paid_by_payer[payer.id] - share,
        )
        for payer, share in zip(payers, shares)
    ]

    drift = sum(item.balance for item in balances)
    if drift:
        logger.debug("balance_rounding_drift", drift=drift, payers=len(payers))
    return balances


def settlement(
    balances: Sequence[PayerBalance], tolerance: int | None = None
) -> Settlement | None:
    """Single transfer settling a two-payer household.

    Returns None for any household that does not have exactly two payers, and
    when both balances are within ``tolerance`` minor units of zero.
    """
    if len(balances) != 2:
        return None

    limit = get_settings().settlement_tolerance_cents if tolerance is None else tolerance
    first, second = balances

    if abs(first.balance) <= limit and abs(second.balance) <= limit:
        return None

    if first.balance < second.balance:
        underpayer, overpayer = first, second
    else:
        underpayer, overpayer = second, first

    return Settlement(
        from_payer=underpayer.payer_name,
        to_payer=overpayer.payer_name,
        amount=abs(underpayer.balance),
        from_payer_id=underpayer.payer_id,
        to_payer_id=overpayer.payer_id,
    )

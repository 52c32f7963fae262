"""Shared output formatting for CLI commands."""

from coinwallet.domain.entities import CategoryTotals, CoinRecord, RecordMode

MODE_LABELS = {
    RecordMode.ADD: "Earned",
    RecordMode.PREMIUM: "Premium box",
    RecordMode.OTHER: "Other",
    RecordMode.SEREBO: "Select box",
    RecordMode.PICK: "Pick-up",
}


def format_coins(amount: int, signed: bool = False) -> str:
    return f"{amount:+,}" if signed else f"{amount:,}"


def describe_record(record: CoinRecord) -> str:
    """One-line description of a record."""
    mode = record.mode
    if mode is None:
        change = "no change"
    elif mode is RecordMode.ADD:
        change = f"{MODE_LABELS[mode]} {format_coins(record.earned, signed=True)}"
    else:
        change = f"{MODE_LABELS[mode]} {format_coins(-record.spent, signed=True)}"
    return f"{record.date.isoformat()}  {change:<24s} balance {format_coins(record.coin_amount)}"


def format_totals(totals: CategoryTotals) -> str:
    return (
        f"earned {format_coins(totals.earned, signed=True)} | "
        f"premium {format_coins(-totals.premium_box, signed=True)} | "
        f"select {format_coins(-totals.serebo, signed=True)} | "
        f"pick-up {format_coins(-totals.pick, signed=True)} | "
        f"other {format_coins(-totals.other, signed=True)}"
    )

"""JSON shape of the wallet and its migration to the current schema.

The persisted blob and the export file share one camelCase shape::

    {"initialCoinAmount": 1000, "records": [...], "settings": {...}}

Anything older-shaped (legacy goal fields, records without ``serebo`` /
``pick``) is normalized here, once, at the load/import boundary. The rest
of the engine only ever sees the canonical entities.
"""

import json
import logging
import math
from datetime import date
from typing import Any, Optional

from coinwallet.domain.entities import AppData, CoinRecord, OcrCrop, Settings
from coinwallet.domain.errors import SchemaError

logger = logging.getLogger(__name__)

# (json key, attribute, required)
RECORD_FIELDS = (
    ("id", "id", True),
    ("date", "date", True),
    ("timestamp", "timestamp", True),
    ("coinAmount", "coin_amount", True),
    ("earned", "earned", True),
    ("premiumBox", "premium_box", True),
    ("other", "other", True),
    ("serebo", "serebo", False),
    ("pick", "pick", False),
    ("primaryGoalAtThatDay", "primary_goal_at_that_day", False),
    ("secondaryGoalAtThatDay", "secondary_goal_at_that_day", False),
)

OCR_CROP_SIDES = ("left", "top", "right", "bottom")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_whole_number(value: Any, what: str) -> int:
    """Convert a JSON number to int, rejecting fractions and non-numbers."""
    if not _is_number(value):
        raise SchemaError(f"{what} is missing or invalid")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise SchemaError(f"{what} must be a whole number")
        return int(value)
    return value


def _parse_iso_date(value: Any, what: str) -> date:
    if not isinstance(value, str):
        raise SchemaError(f"{what} is missing or invalid")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise SchemaError(f"{what} is not a YYYY-MM-DD date: '{value}'")


def _optional_number(value: Any) -> Optional[int]:
    """Lenient settings number: anything unusable counts as unset."""
    if not _is_number(value):
        return None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            logger.warning("Ignoring non-whole goal value %r", value)
            return None
    return int(value)


def _weekday_list(value: Any) -> Optional[tuple[int, ...]]:
    """Lenient weekday list: needs exactly 7 entries, junk entries become 0."""
    if not isinstance(value, (list, tuple)) or len(value) != 7:
        return None
    return tuple(_optional_number(v) or 0 for v in value)


def _ocr_crop(value: Any) -> Optional[OcrCrop]:
    if not isinstance(value, dict):
        return None
    sides = {
        side: float(value[side])
        for side in OCR_CROP_SIDES
        if _is_number(value.get(side)) and math.isfinite(value[side])
    }
    return OcrCrop(**sides)


def normalize_settings(raw: Any) -> Settings:
    """Migrate any historical settings shape to canonical ``Settings``.

    Tiered fields are filled from the legacy ones when missing, and the
    legacy ones are back-filled from the tiered ones, so that a normalized
    result normalizes to itself.
    """
    if not isinstance(raw, dict):
        raw = {}

    primary_goals = _weekday_list(raw.get("primaryGoals"))
    primary_goal = _optional_number(raw.get("primaryGoal"))
    daily_goals = _weekday_list(raw.get("dailyGoals"))
    daily_goal = _optional_number(raw.get("dailyGoal"))

    # Legacy weekday goals rank below a tiered single goal, so they only
    # move up when no tiered goal is set.
    if primary_goals is None and primary_goal is None:
        primary_goals = daily_goals
    if primary_goal is None:
        primary_goal = daily_goal
    if daily_goals is None:
        daily_goals = primary_goals
    if daily_goal is None:
        daily_goal = primary_goal

    debt_reset_date = None
    if raw.get("debtResetDate") is not None:
        try:
            debt_reset_date = _parse_iso_date(raw["debtResetDate"], "settings.debtResetDate")
        except SchemaError as e:
            logger.warning("Ignoring %s", e.cause)

    show_goal_line = raw.get("showGoalLine")
    show_debt = raw.get("showDebt")
    return Settings(
        primary_goal=primary_goal,
        primary_goals=primary_goals,
        secondary_goal=_optional_number(raw.get("secondaryGoal")),
        secondary_goals=_weekday_list(raw.get("secondaryGoals")),
        daily_goal=daily_goal,
        daily_goals=daily_goals,
        show_goal_line=show_goal_line if isinstance(show_goal_line, bool) else True,
        show_debt=show_debt if isinstance(show_debt, bool) else True,
        debt_reset_date=debt_reset_date,
        ocr_crop=_ocr_crop(raw.get("ocrCrop")),
    )


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert settings to their JSON shape, omitting unset fields."""
    result: dict[str, Any] = {}
    pairs = (
        ("primaryGoal", settings.primary_goal),
        ("primaryGoals", settings.primary_goals),
        ("secondaryGoal", settings.secondary_goal),
        ("secondaryGoals", settings.secondary_goals),
        ("dailyGoal", settings.daily_goal),
        ("dailyGoals", settings.daily_goals),
    )
    for key, value in pairs:
        if value is None:
            continue
        result[key] = list(value) if isinstance(value, tuple) else value
    result["showGoalLine"] = settings.show_goal_line
    result["showDebt"] = settings.show_debt
    if settings.debt_reset_date is not None:
        result["debtResetDate"] = settings.debt_reset_date.isoformat()
    if settings.ocr_crop is not None:
        result["ocrCrop"] = {
            side: getattr(settings.ocr_crop, side)
            for side in OCR_CROP_SIDES
            if getattr(settings.ocr_crop, side) is not None
        }
    return result


def record_from_dict(raw: Any, index: int = 0) -> CoinRecord:
    """Validate and convert one JSON record.

    Raises:
        SchemaError: If a required field is missing or has the wrong type
    """
    if not isinstance(raw, dict):
        raise SchemaError(f"records[{index}] is not an object")
    if not isinstance(raw.get("id"), str):
        raise SchemaError(f"records[{index}].id is missing or invalid")

    values: dict[str, Any] = {
        "id": raw["id"],
        "date": _parse_iso_date(raw.get("date"), f"records[{index}].date"),
    }
    for key, attr, required in RECORD_FIELDS:
        if attr in values:
            continue
        value = raw.get(key)
        if value is None and not required:
            # serebo/pick were added later; goals are optional
            values[attr] = 0 if key in ("serebo", "pick") else None
            continue
        values[attr] = _as_whole_number(value, f"records[{index}].{key}")
    return CoinRecord(**values)


def record_to_dict(record: CoinRecord) -> dict[str, Any]:
    """Convert a record to its JSON shape."""
    result: dict[str, Any] = {}
    for key, attr, required in RECORD_FIELDS:
        value = getattr(record, attr)
        if attr == "date":
            value = value.isoformat()
        if value is None and not required:
            continue
        result[key] = value
    return result


def app_data_from_dict(raw: Any) -> AppData:
    """Validate and migrate a parsed JSON document to ``AppData``.

    Raises:
        SchemaError: Describing the first problem found; nothing is
            partially converted
    """
    if not isinstance(raw, dict):
        raise SchemaError("top-level value is not an object")
    initial = _as_whole_number(raw.get("initialCoinAmount"), "initialCoinAmount")
    records = raw.get("records")
    if not isinstance(records, list):
        raise SchemaError("records is missing or not an array")
    return AppData(
        initial_coin_amount=initial,
        records=tuple(record_from_dict(r, i) for i, r in enumerate(records)),
        settings=normalize_settings(raw.get("settings")),
    )


def app_data_to_dict(data: AppData) -> dict[str, Any]:
    """Convert ``AppData`` to its JSON shape."""
    return {
        "initialCoinAmount": data.initial_coin_amount,
        "records": [record_to_dict(r) for r in data.records],
        "settings": settings_to_dict(data.settings),
    }


def export_data(data: AppData) -> str:
    """Serialize ``AppData`` as pretty-printed JSON."""
    return json.dumps(app_data_to_dict(data), indent=2, ensure_ascii=False)


def import_data(text: str) -> AppData:
    """Parse and validate exported (or older-shaped) JSON text.

    Raises:
        SchemaError: If the text is not valid JSON or not a wallet document
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(str(e))
    return app_data_from_dict(raw)

"""Score value object shared by attempts, feedback and module progress."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ..exceptions import ValidationError
from ..value_object import ValueObject

SCORE_MIN = Decimal("0")
SCORE_MAX = Decimal("10")
_ONE_DECIMAL = Decimal("0.1")
_WHOLE = Decimal("1")


def _to_decimal(raw: object) -> Decimal | None:
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        if math.isnan(raw):
            return None
        if math.isinf(raw):
            return SCORE_MAX if raw > 0 else SCORE_MIN
        return Decimal(str(raw))
    if isinstance(raw, str):
        try:
            return Decimal(raw.strip())
        except InvalidOperation:
            return None
    return None


@dataclass(frozen=True)
class Score(ValueObject):
    """
    A score on the 0-10 scale, stored with one decimal place.

    Construction validates the range; use ``Score.clamped`` for values
    coming from untrusted sources such as the text-generation service.
    """

    value: Decimal

    def __post_init__(self) -> None:
        value = _to_decimal(self.value)
        if value is None or value.is_nan():
            raise ValidationError("Score must be a number", field="score", value=self.value)
        if not SCORE_MIN <= value <= SCORE_MAX:
            raise ValidationError(
                f"Score must be between {SCORE_MIN} and {SCORE_MAX}", field="score", value=value
            )
        object.__setattr__(self, "value", value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))

    @classmethod
    def zero(cls) -> "Score":
        return cls(SCORE_MIN)

    @classmethod
    def clamped(cls, raw: object) -> "Score":
        """
        Build a score from an arbitrary value, forcing it into range.

        Missing or non-numeric values become 0.
        """
        value = _to_decimal(raw)
        if value is None or value.is_nan():
            return cls.zero()
        if value.is_infinite():
            return cls(SCORE_MAX if value > 0 else SCORE_MIN)
        return cls(max(SCORE_MIN, min(SCORE_MAX, value)))

    @classmethod
    def from_ratio(cls, correct: int, total: int) -> "Score":
        """Scale ``correct / total`` onto the 0-10 range. An empty total scores 0."""
        if total <= 0:
            return cls.zero()
        return cls(Decimal(correct) / Decimal(total) * SCORE_MAX)

    def to_points(self) -> int:
        """Points awarded for this score: ten per score unit, rounded half up."""
        return int((self.value * 10).quantize(_WHOLE, rounding=ROUND_HALF_UP))

    def __float__(self) -> float:
        return float(self.value)

    def to_primitive(self) -> float:
        return float(self.value)

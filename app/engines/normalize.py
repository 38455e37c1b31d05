import math
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Optional, Union

# wide enough for any finite float quantized to a few decimal places
_ROUNDING_CONTEXT = Context(prec=400)


def normalize_key(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def parse_positive_number(value: Optional[Union[float, int, str]]) -> Optional[float]:
    """
    Return value as a float when it is a positive finite number (or a numeric
    string), otherwise None. Values that overflow to inf or underflow to 0.0
    as a float count as unusable.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError):
        # ValueError: signalling NaN ("snan") cannot become a float
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def round_half_up(value: float, places: int = 1) -> float:
    exponent = Decimal(1).scaleb(-places)
    return float(
        Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)
    )

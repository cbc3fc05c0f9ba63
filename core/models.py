# core/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def _as_float(name: str, value: Any) -> float:
    if value is None:
        return 0.0
    # bool is an int subclass, but true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _as_str(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ShoeItem:
    """
    One listing from the search API's `docs` array.
    price_low is the buyable price; it is the one compared against the threshold.
    """
    parent_name: str = ""
    pcode: str = ""
    price_high: float = 0.0
    price_low: float = 0.0

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "ShoeItem":
        if not isinstance(doc, dict):
            raise ValueError(f"expected an object in docs, got {type(doc).__name__}")
        return cls(
            parent_name=_as_str("parent_name", doc.get("parent_name")),
            pcode=_as_str("pcode", doc.get("pcode")),
            price_high=_as_float("price_high", doc.get("price_high")),
            price_low=_as_float("price_low", doc.get("price_low")),
        )


@dataclass(frozen=True)
class QueryResult:
    query_url: str
    threshold_price: float
    matching_shoes: Tuple[ShoeItem, ...] = field(default_factory=tuple)
    shoes_at_or_below_threshold: Tuple[ShoeItem, ...] = field(default_factory=tuple)

    @property
    def has_matches(self) -> bool:
        return bool(self.shoes_at_or_below_threshold)


# Ordered results that carry at least one qualifying shoe.
NotificationPayload = List[QueryResult]

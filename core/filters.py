# core/filters.py
from typing import List, Sequence

from .models import ShoeItem


def parse_query_urls(raw: str) -> List[str]:
    """
    Split a comma separated list of query URLs, trimming spaces around each.
    An empty string gives [""], not an empty list.
    """
    return [part.strip(" ") for part in raw.split(",")]


def shoes_at_or_below_threshold(
    shoes: Sequence[ShoeItem], threshold: float
) -> List[ShoeItem]:
    """
    Return the shoes whose low price is <= threshold, cheapest first.
    sorted() is stable, so equal prices keep their input order.
    """
    kept = [shoe for shoe in shoes if shoe.price_low <= threshold]
    return sorted(kept, key=lambda shoe: shoe.price_low)

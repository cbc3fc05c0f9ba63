# core/report.py
from typing import Callable, Iterable, List, Sequence

from .filters import shoes_at_or_below_threshold
from .logger import get_logger
from .models import NotificationPayload, QueryResult, ShoeItem

logger = get_logger(__name__)


def build_query_result(
    query_url: str, threshold: float, shoes: Sequence[ShoeItem]
) -> QueryResult:
    return QueryResult(
        query_url=query_url,
        threshold_price=threshold,
        matching_shoes=tuple(shoes),
        shoes_at_or_below_threshold=tuple(shoes_at_or_below_threshold(shoes, threshold)),
    )


def assemble_payload(results: Iterable[QueryResult]) -> NotificationPayload:
    """Keep only results with qualifying shoes, in their original order."""
    payload: NotificationPayload = []
    for result in results:
        if not result.has_matches:
            logger.debug(
                "Dropping %s: nothing at or below %.2f.",
                result.query_url, result.threshold_price,
            )
            continue
        payload.append(result)
    return payload


def collect_results(
    query_urls: Iterable[str],
    threshold: float,
    fetch: Callable[[str], List[ShoeItem]],
) -> NotificationPayload:
    """
    Fetch every query in order, one at a time, and assemble the payload.
    Errors raised by fetch propagate untouched.
    """
    results: List[QueryResult] = []
    for query_url in query_urls:
        shoes = fetch(query_url)
        result = build_query_result(query_url, threshold, shoes)
        logger.info(
            "Query %s: %d listed, %d at or below %.2f.",
            query_url, len(result.matching_shoes),
            len(result.shoes_at_or_below_threshold), threshold,
        )
        results.append(result)
    return assemble_payload(results)

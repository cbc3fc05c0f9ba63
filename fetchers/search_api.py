# fetchers/search_api.py
from typing import Any, List, Optional

import requests

from core.errors import FetchError
from core.logger import get_logger
from core.models import ShoeItem

logger = get_logger(__name__)

HEADERS = {"Accept": "application/json"}


def decode_response(payload: Any) -> List[ShoeItem]:
    """
    Decode the search envelope {"response": {"numFound": n, "docs": [...]}}.
    A missing response or docs key decodes to no items.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    response = payload.get("response")
    if response is None:
        response = {}
    if not isinstance(response, dict):
        raise ValueError("'response' must be an object")
    docs = response.get("docs")
    if docs is None:
        docs = []
    if not isinstance(docs, list):
        raise ValueError("'response.docs' must be a list")
    logger.debug("numFound=%s, docs=%d", response.get("numFound", 0), len(docs))
    return [ShoeItem.from_doc(doc) for doc in docs]


def fetch_matches(query_url: str, timeout: Optional[float] = None) -> List[ShoeItem]:
    logger.info("Fetching %s", query_url)
    try:
        # one connection per query, closed when the session exits
        with requests.Session() as session:
            session.headers.update(HEADERS)
            r = session.get(query_url, timeout=timeout)
            r.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Request to {query_url} failed: {e}") from e

    try:
        shoes = decode_response(r.json())
    except ValueError as e:
        # requests' JSONDecodeError is a ValueError too
        raise FetchError(f"Could not decode response from {query_url}: {e}") from e

    logger.info("Got %d shoe(s) from %s", len(shoes), query_url)
    return shoes

"""
Paginated collection of list endpoints.

The API signals the end of a collection only by returning an empty page,
so pages are requested one after another until that happens.
"""

import logging
from typing import Callable, Dict, List

from ..exceptions import ProtocolError

logger = logging.getLogger(__name__)


def collect_pages(fetch_page: Callable[[int], Dict], start: int = 1) -> List:
    """
    Concatenate the results of every page of a list endpoint.

    Args:
        fetch_page: Callable returning the decoded envelope
            ({"success", "errors", "messages", "result"}) for a page number
        start: First page number to request

    Returns:
        All items across all pages, in page arrival order

    Raises:
        ProtocolError: If any page reports success=false. Items gathered
            from earlier pages are discarded.
    """
    items = []
    page = start
    while True:
        envelope = fetch_page(page)
        if not envelope.get("success", False):
            raise ProtocolError(
                f"Listing failed on page {page}", errors=envelope.get("errors")
            )

        result = envelope.get("result") or []
        if not result:
            logger.debug(f"Page {page} is empty, collected {len(items)} items")
            return items

        items.extend(result)
        page += 1

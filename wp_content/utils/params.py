from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import urlencode

# WordPress REST names for the field filter and page size parameters.
FIELDS_PARAM = "_fields"
PAGE_SIZE_PARAM = "per_page"


def _unique(values: Sequence[str]) -> List[str]:
    """Drop repeated values, keeping first-seen order."""
    seen = set()
    result: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def build_endpoint_params(
    fields: Optional[Sequence[str]] = None, quantity: Optional[int] = None
) -> Dict[str, Any]:
    """
    Build the query parameters for a collection endpoint.

    - ``fields`` is de-duplicated (first occurrence wins) and joined with ','
    - ``quantity`` becomes the page size when it is an integer

    Anything else is silently left out, so ``build_endpoint_params()``
    returns an empty dictionary.
    """
    params: Dict[str, Any] = {}

    if isinstance(fields, (list, tuple)) and len(fields) > 0:
        params[FIELDS_PARAM] = ",".join(_unique(fields))
    if isinstance(quantity, int) and not isinstance(quantity, bool):
        params[PAGE_SIZE_PARAM] = quantity

    return params


def build_query_string(params: Mapping[str, Any]) -> str:
    """Encode ``params`` as a URL query string, keeping insertion order."""
    return urlencode([(key, value) for key, value in params.items()])

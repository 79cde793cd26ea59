import logging
from typing import Any, Dict, Optional

import requests

from .config import settings
from .errors import ResponseDecodeError, TransportError

logger = logging.getLogger(__name__)


def endpoint_from_region(region: Optional[str], api: str = "") -> str:
    """
    Compose the base endpoint for an API.

    "US" (default) and "EU" select the hosted regions; any other value is
    taken as a custom base URL.
    """
    region = settings.DEFAULT_REGION if region is None else region

    if region in ("", "us", "US"):
        base = settings.US_API_BASE_URL
    elif region in ("eu", "EU"):
        base = settings.EU_API_BASE_URL
    else:
        base = region

    return f"{base.rstrip('/')}/{api}"


def post_json(url: str, payload: Dict[str, Any]) -> Any:
    """
    POST a JSON payload and return the decoded response body.

    Raises:
        TransportError: the request could not be completed
        ResponseDecodeError: the body is not JSON and strict decoding is enabled
    """
    logger.debug("POST %s", url)

    try:
        response = requests.post(url, json=payload, timeout=settings.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise TransportError(f"failed to connect to API server: {e}") from e

    logger.debug("POST %s -> HTTP %s (%d bytes)", url, response.status_code, len(response.content))

    if not response.content:
        if settings.STRICT_DECODE:
            raise ResponseDecodeError(f"empty response body (HTTP {response.status_code})")
        return {}

    try:
        return response.json()
    except ValueError as e:
        if settings.STRICT_DECODE:
            raise ResponseDecodeError(f"response body is not valid JSON: {e}") from e
        logger.warning("Discarding non-JSON response body from %s (HTTP %s)", url, response.status_code)
        return {}

"""Minimal JSON-over-HTTP transport shared by the service façades."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request

from procurement.domain.exceptions import InternalError

logger = logging.getLogger(__name__)


def post_json(url: str, payload: dict, timeout: int = 20) -> dict:
    """POST *payload* to *url* and return the decoded JSON object.

    Any transport, HTTP or decoding failure becomes InternalError.
    """
    data = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    request = urllib.request.Request(
        url,
        data=data,
        headers={"Accept": "application/json", "Content-Type": "application/json"},
        method="POST",
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            body = response.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        detail = exc.read().decode("utf-8", errors="replace")
        logger.error("POST %s failed with HTTP %s: %s", url, exc.code, detail)
        raise InternalError(f"HTTP {exc.code} from {url}: {detail}") from exc
    except (urllib.error.URLError, OSError) as exc:
        logger.error("POST %s failed: %s", url, exc)
        raise InternalError(f"Request to {url} failed: {exc}") from exc

    if not body:
        return {}
    try:
        decoded = json.loads(body)
    except ValueError as exc:
        raise InternalError(f"Invalid JSON from {url}") from exc
    if not isinstance(decoded, dict):
        raise InternalError(f"Unexpected response from {url} (JSON non-object)")
    return decoded

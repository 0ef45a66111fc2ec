"""Roman Numeral Converter API client.

A thin wrapper around the ``/romannumeral`` endpoint using the
``requests`` library.  Both methods return a tuple ``(data, error)``:
on success ``data`` holds the parsed JSON body and ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.

Example::

    client = RomanNumeralClient(base_url="http://localhost:8000")
    data, error = client.convert(2024)
    # data == {"input": "2024", "output": "MMXXIV"}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CONVERT_PATH = "/romannumeral"


class RomanNumeralClient:
    """Client for the Roman numeral conversion API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``
                or ``http://localhost:8000/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, path: str, params: Dict[str, Any]
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform a GET request and split the outcome into ``(data, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s with %s", url, params)
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def convert(self, number: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Convert a single number.

        ``number`` is sent as-is; the server validates it.
        """
        return self._request(CONVERT_PATH, {"query": str(number)})

    def convert_range(
        self, min_value: Any, max_value: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Convert every number from ``min_value`` to ``max_value`` inclusive.

        On success ``data["conversions"]`` is ordered by ascending input.
        """
        return self._request(CONVERT_PATH, {"min": str(min_value), "max": str(max_value)})

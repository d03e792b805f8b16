"""Thin JSON-over-HTTP wrapper around a requests session."""

import logging
from typing import Any, Callable

import requests

from ..errors import DecodeError, HttpError, NetworkError
from .config import get_settings

logger = logging.getLogger(__name__)

COMMON_HEADERS = {"Content-Type": "application/json"}


class Networking:
    """Issues single GET/POST requests and returns the decoded JSON object.

    Every call performs exactly one request. There are no retries and no
    timeout is passed to the transport, so a call blocks until requests
    itself resolves or fails.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        hooks: list[Callable[..., Any]] | None = None,
    ):
        self.base_url = base_url or get_settings().base_url
        self.session = session or requests.Session()

        # requests calls each hook as hook(response, **kwargs)
        for hook in hooks or []:
            self.session.hooks["response"].append(hook)

    def get_json(self, path: str) -> dict[str, Any]:
        """GET base_url + path and decode the body as a JSON object."""
        url = self.base_url + path
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url)
        except requests.RequestException as e:
            logger.error(f"GET {url} failed: {e}")
            raise NetworkError(f"GET {url} failed: {e}", cause=e) from e

        return self._handle_response(response)

    def post_json(
        self,
        path: str,
        body: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST body as JSON to base_url + path and decode the JSON reply.

        The common headers are always sent; any caller headers are applied
        on top of them.
        """
        url = self.base_url + path
        request_headers = {**COMMON_HEADERS, **(headers or {})}
        logger.debug(f"POST {url}")

        try:
            response = self.session.post(url, json=body, headers=request_headers)
        except requests.RequestException as e:
            logger.error(f"POST {url} failed: {e}")
            raise NetworkError(f"POST {url} failed: {e}", cause=e) from e

        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> dict[str, Any]:
        logger.debug(
            f"Response {response.status_code} from {response.url} "
            f"({len(response.content or b'')} bytes)"
        )

        if response.status_code != 200:
            logger.warning(
                f"Request to {response.url} returned {response.status_code} {response.reason}"
            )
            raise HttpError(response.status_code, response.reason)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Could not parse response from {response.url}: {e}")
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        return data

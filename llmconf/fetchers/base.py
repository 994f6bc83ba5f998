# -*- coding: utf-8 -*-
"""Shared HTTP plumbing for the live model-list fetchers."""

from __future__ import annotations

import abc
import json
import logging
import time
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..constant import FETCH_TIMEOUT
from ..exceptions import FetchFailedError, FetchTimeoutError
from ..providers.models import ModelInfo

logger = logging.getLogger(__name__)

_ERROR_BODY_LIMIT = 200


class ModelFetcher(abc.ABC):
    """Fetches the model list of one provider family.

    Subclasses implement :meth:`fetch_models`. The optional *transport* is
    handed to ``httpx.Client`` (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = FETCH_TIMEOUT,
    ) -> None:
        self.transport = transport
        self.timeout = timeout

    @abc.abstractmethod
    def fetch_models(
        self,
        api_key: str = "",
        base_url: str = "",
    ) -> Dict[str, ModelInfo]:
        """Return the provider's models keyed by id."""

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            transport=self.transport,
        )

    def _timed_out(self, cause: Optional[Exception] = None) -> FetchTimeoutError:
        return FetchTimeoutError(
            f"request timeout after {self.timeout:g}s",
            cause=cause,
        )

    def _get_json(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """GET *url* and decode JSON, all within ``self.timeout`` seconds.

        The body is streamed so the deadline is checked between chunks; a
        server that trickles bytes cannot hold the caller past it by more
        than one read.
        """
        deadline = time.monotonic() + self.timeout
        logger.debug("Fetching models from %s", url)
        chunks: List[bytes] = []
        try:
            with self._client() as client:
                with client.stream(
                    "GET",
                    url,
                    headers=dict(headers or {}),
                ) as resp:
                    for chunk in resp.iter_bytes():
                        if time.monotonic() > deadline:
                            raise self._timed_out()
                        chunks.append(chunk)
                    status = resp.status_code
        except httpx.TimeoutException as exc:
            raise self._timed_out(exc) from exc
        except httpx.HTTPError as exc:
            raise FetchFailedError(
                f"failed to fetch models: {exc}",
                cause=exc,
            ) from exc

        body = b"".join(chunks)
        if status != 200:
            snippet = body[:_ERROR_BODY_LIMIT].decode("utf-8", "replace")
            raise FetchFailedError(f"API returned status {status}: {snippet}")
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise FetchFailedError(
                f"failed to decode response: {exc}",
                cause=exc,
            ) from exc

        if time.monotonic() > deadline:
            raise self._timed_out()
        return data


def payload_list(payload: Any, key: str) -> List[Any]:
    """Return ``payload[key]`` as a list; a missing or null key is empty.

    Any other shape is a decode failure, so callers fall back to the
    built-in catalog.
    """
    if not isinstance(payload, dict):
        raise FetchFailedError("failed to decode response: not an object")
    entries = payload.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise FetchFailedError(
            f"failed to decode response: '{key}' is "
            f"{type(entries).__name__}, not a list",
        )
    return entries


def bearer_headers(api_key: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"} if api_key else {}

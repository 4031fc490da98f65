"""Festivals REST API provider implementing IFestivalAPIProvider.

Issues ``GET {base_uri}/festivals`` with ``Accept: application/json`` and
decodes the JSON array body into :class:`RawFestival` records.

The API throttles aggressively, so every non-200 response is retried with
exponential backoff: the response is closed, the provider sleeps for the
next interval handed out by the policy, and the request is sent again.
When the policy stops (or the sleep itself raises ``CancelledError``) the
last response is returned as-is and decoding is attempted on its body.  A throttled or
error-page body then surfaces as a :class:`ResponseParsingError` whose
``status_code`` is the final non-200 status.

Network-level faults are not retried; they raise
:class:`ProviderUnavailableError` straight away.

Cancelling the task that awaits :meth:`FestivalRESTAPIProvider.get_festivals`
(for example through ``asyncio.wait_for``) is never swallowed: it propagates
as ``CancelledError`` on Python 3.11+, where the task reports pending
cancellation requests.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import httpx

from festival_organizer.config.settings import DEFAULT_FESTIVALS_API_URI
from festival_organizer.interfaces.festival_api_provider import IFestivalAPIProvider
from festival_organizer.models.festival import RawFestival
from festival_organizer.providers.festival_api.decoder import decode_festivals
from festival_organizer.utils.backoff import BackOffExecution, ExponentialBackOff
from festival_organizer.utils.errors import ProviderUnavailableError
from festival_organizer.utils.logging import get_logger

_PROVIDER_NAME = "festivals_api"
_FESTIVALS_PATH = "festivals"
_HTTP_OK = 200
_HEADERS = {"Accept": "application/json"}


class FestivalRESTAPIProvider(IFestivalAPIProvider):
    """Festival data provider backed by the festivals REST API.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient`` for testability and connection pooling.
    base_uri:
        API root; the ``festivals`` path segment is appended to it.
    backoff:
        Retry policy for non-200 responses.
    sleep:
        Awaitable used to wait between retries (``asyncio.sleep``).
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_uri: str = DEFAULT_FESTIVALS_API_URI,
        backoff: ExponentialBackOff | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._http = http_client
        self._base_uri = base_uri
        self._backoff = backoff or ExponentialBackOff()
        self._sleep = sleep
        self._logger = get_logger(__name__)

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    def build_url(self, path: str) -> str:
        """Append *path* to the base URI as a single path segment."""
        return f"{self._base_uri.rstrip('/')}/{path.lstrip('/')}"

    # -- IFestivalAPIProvider implementation -----------------------------------

    async def get_festivals(self) -> list[RawFestival]:
        response = await self._invoke_get_with_backoff(_FESTIVALS_PATH)
        body = response.text

        if not body:
            self._logger.info("festivals_api_empty_response", status=response.status_code)
        else:
            self._logger.debug(
                "festivals_api_response",
                status=response.status_code,
                length=len(body),
            )

        festivals = decode_festivals(
            body,
            status_code=response.status_code,
            provider_name=_PROVIDER_NAME,
        )
        self._logger.info("festivals_api_decoded", festivals=len(festivals))
        return festivals

    # -- Transport -------------------------------------------------------------

    async def _invoke_get_with_backoff(self, path: str) -> httpx.Response:
        """GET *path*, retrying non-200 responses until the backoff policy stops.

        Returns the first 200 response, or the last response received once
        the policy stops or the wait between retries is cancelled.
        """
        url = self.build_url(path)
        execution = self._backoff.start()
        self._logger.debug("festivals_api_invoke", url=url)

        while True:
            response = await self._send(url)

            if response.status_code == _HTTP_OK:
                self._logger.debug("festivals_api_success", url=url, attempts=execution.attempts + 1)
                return response

            wait = execution.next_back_off()
            if wait is BackOffExecution.STOP:
                self._logger.warning(
                    "festivals_api_backoff_exhausted",
                    url=url,
                    status=response.status_code,
                    elapsed_s=execution.elapsed,
                )
                return response

            await response.aclose()
            self._logger.warning(
                "festivals_api_backoff",
                url=url,
                status=response.status_code,
                backoff_s=wait,
            )
            try:
                await self._sleep(wait)
            except asyncio.CancelledError:
                if _cancel_requested():
                    raise
                self._logger.warning(
                    "festivals_api_backoff_interrupted",
                    url=url,
                    status=response.status_code,
                )
                return response

    async def _send(self, url: str) -> httpx.Response:
        try:
            return await self._http.get(url, headers=_HEADERS)
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(
                message=f"Request for {url} failed: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc


def _cancel_requested() -> bool:
    """True when the running task itself has been asked to cancel."""
    task = asyncio.current_task()
    cancelling = getattr(task, "cancelling", None)  # Task.cancelling() is 3.11+
    return bool(cancelling and cancelling())

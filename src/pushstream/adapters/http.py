# /src/pushstream/adapters/http.py
# HTTP response adapter - one request per subscription, via httpx

import asyncio
import logging
from typing import Optional, Set

import httpx

from .base import SourceAdapter
from ..config import HttpSettings
from ..errors import describe_failure
from ..events.event import Event
from ..observable import Observable
from ..observer import SessionObserver

logger = logging.getLogger(__name__)

# Strong references to in-flight requests so the loop does not drop them
_pending: Set["asyncio.Task[None]"] = set()


class HttpResponseAdapter(SourceAdapter):
    """Turn an HTTP request into an Observable of ``httpx.Response``.

    Every subscription sends a fresh request. On success the observer
    gets ``next(response)`` then ``completed``; on any failure to send the
    request, or (with ``raise_for_status``) a non-2xx status, it gets exactly
    one ``error("<METHOD> <url>: ...")`` and nothing else.
    """

    def __init__(
        self,
        url: str,
        settings: Optional[HttpSettings] = None,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
        method: str = "GET"
    ):
        """Initialize the adapter.

        Args:
            url: Target address
            settings: Request settings (defaults to ``HttpSettings()``)
            client: Shared sync client; a short-lived one is built per request otherwise
            async_client: Shared async client, same rule as ``client``
            method: HTTP method
        """
        self._url = url
        self._settings = settings or HttpSettings()
        self._client = client
        self._async_client = async_client
        self._method = method.upper()

    @property
    def url(self) -> str:
        return self._url

    @property
    def settings(self) -> HttpSettings:
        return self._settings

    # ========== Synchronous ==========

    def observable(self) -> Observable[httpx.Response]:
        """Observable whose subscriptions block until the response arrives."""
        return Observable.from_handler(self._subscribe)

    def _subscribe(self, observer: SessionObserver) -> None:
        try:
            response = self._send()
        except Exception as e:
            self._fail(observer, e)
            return
        self._succeed(observer, response)

    def _send(self) -> httpx.Response:
        if self._client is not None:
            return self._check(self._client.request(self._method, self._url))

        with httpx.Client(**self._settings.client_kwargs()) as client:
            return self._check(client.request(self._method, self._url))

    # ========== Asynchronous ==========

    def async_observable(self) -> Observable[httpx.Response]:
        """Observable whose subscriptions schedule the request on the running loop.

        ``subscribe`` returns immediately; events arrive once the request
        finishes, from the event loop.
        """
        return Observable.from_handler(self._subscribe_async)

    def _subscribe_async(self, observer: SessionObserver) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            observer(Event.error(f"{self._method} {self._url}: no running event loop"))
            return

        task = loop.create_task(self._fetch(observer))
        _pending.add(task)
        task.add_done_callback(_on_fetch_done)

    async def _fetch(self, observer: SessionObserver) -> None:
        try:
            response = await self._send_async()
        except Exception as e:
            self._fail(observer, e)
            return

        # A failing observer still ends the session with one error event
        try:
            self._succeed(observer, response)
        except Exception as e:
            if observer.stopped:
                logger.error(f"{self._method} {self._url}: observer failed after termination: {e}")
                return
            observer(Event.error(describe_failure(e)))

    async def _send_async(self) -> httpx.Response:
        if self._async_client is not None:
            return self._check(await self._async_client.request(self._method, self._url))

        async with httpx.AsyncClient(**self._settings.client_kwargs()) as client:
            return self._check(await client.request(self._method, self._url))

    # ========== Delivery ==========

    def _check(self, response: httpx.Response) -> httpx.Response:
        if self._settings.raise_for_status:
            response.raise_for_status()
        return response

    def _succeed(self, observer: SessionObserver, response: httpx.Response) -> None:
        logger.debug(f"{self._method} {self._url} -> {response.status_code}")
        observer(Event.next(response))
        observer(Event.completed())

    def _fail(self, observer: SessionObserver, exc: Exception) -> None:
        logger.warning(f"{self._method} {self._url} failed: {exc}")
        observer(Event.error(f"{self._method} {self._url}: {describe_failure(exc)}"))


def _on_fetch_done(task: "asyncio.Task[None]") -> None:
    _pending.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Asynchronous HTTP delivery failed: {exc}")

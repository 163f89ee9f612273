"""Dispatcher: the single path every API call takes.

Lifecycle of a call: CREATED (sequence assigned when the operation is
invoked) -> BUILT -> ADMITTED (throttle passed; at most connection_limit
calls are admitted and unsettled at once) -> SENT -> SUCCEEDED | FAILED.

Errors are normalized into the HighSystemsError taxonomy and always carry
the sequence number of the call. Nothing is retried or cached.
"""

import asyncio
import time
from collections.abc import Awaitable
from dataclasses import dataclass, field

import httpx

from highsystems.config.options import HighSystemsOptions, ProxyConfig
from highsystems.errors import (
    HighSystemsError,
    ParseError,
    ServiceError,
    TransportError,
)
from highsystems.logging.debug import RequestTimer, get_logger, sequence_var
from highsystems.operations.descriptors import RequestDescriptor
from highsystems.transport.builder import HttpRequest, RequestBuilder
from highsystems.transport.throttle import Throttle

request_logger = get_logger("request")
response_logger = get_logger("response")


@dataclass
class PendingCall:
    sequence: int
    descriptor: RequestDescriptor
    request: HttpRequest | None = None
    created_at: float = field(default_factory=time.monotonic)


class Dispatcher:

    def __init__(self, options: HighSystemsOptions):
        self._sequence = 0
        self._client: httpx.AsyncClient | None = None
        self._client_proxy: str | None = None
        self.pending: dict[int, PendingCall] = {}
        self.reconfigure(options)

    @property
    def options(self) -> HighSystemsOptions:
        return self._options

    @property
    def sequence(self) -> int:
        """Sequence number of the most recently created call."""
        return self._sequence

    def reconfigure(self, options: HighSystemsOptions) -> None:
        """Swap in a new configuration; the throttle starts from an empty window."""
        self._options = options
        self.builder = RequestBuilder(options)
        self.throttle = Throttle(
            options.connection_limit,
            options.connection_limit_period,
            options.error_on_connection_limit,
        )
        # calls past the throttle whose HTTP exchange has not settled
        self.in_flight = asyncio.Semaphore(options.connection_limit)

    def _proxy_url(self) -> str | None:
        proxy = self._options.proxy
        return proxy.url if isinstance(proxy, ProxyConfig) else None

    async def _get_client(self) -> httpx.AsyncClient:
        proxy = self._proxy_url()
        if self._client is not None and not self._client.is_closed and proxy != self._client_proxy:
            await self._client.aclose()
            self._client = None
        if self._client is None or self._client.is_closed:
            # No default deadline: per-call timeouts come from request_options
            self._client = httpx.AsyncClient(timeout=None, proxy=proxy)
            self._client_proxy = proxy
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def request(
        self,
        descriptor: RequestDescriptor,
        options: dict,
        request_options: dict | None = None,
        return_raw: bool = False,
    ) -> Awaitable:
        """Create one API call and return the awaitable that runs it.

        The sequence number is assigned and the call recorded as pending
        here, when the caller invokes the operation, not when it is awaited.
        The awaitable resolves to the results (or the raw httpx.Response).
        """
        self._sequence += 1
        call = PendingCall(sequence=self._sequence, descriptor=descriptor)
        self.pending[call.sequence] = call
        return self._run(call, options, request_options or {}, return_raw)

    async def _run(self, call: PendingCall, options: dict, request_options: dict, return_raw: bool):
        sequence = call.sequence
        token = sequence_var.set(sequence)
        in_flight = self.in_flight

        try:
            call.request = self.builder.build(call.descriptor, options)
            await self.throttle.acquire()
            async with in_flight:
                response = await self._send(call.request, request_options)
            return self._normalize(response, return_raw)
        except HighSystemsError as e:
            if e.sequence is None:
                e.sequence = sequence
            response_logger.debug(
                "High Systems Error",
                extra={"debug_data": {
                    "operation": call.descriptor.name,
                    "error": type(e).__name__,
                    "status": e.status,
                    "detail": e.message,
                }},
            )
            raise
        finally:
            self.pending.pop(sequence, None)
            sequence_var.reset(token)

    async def _send(self, request: HttpRequest, overrides: dict) -> httpx.Response:
        kwargs = dict(overrides)
        headers = {**request.headers, **(kwargs.pop("headers", None) or {})}
        params = {**request.params, **(kwargs.pop("params", None) or {})}
        if request.json is not None:
            kwargs.setdefault("json", request.json)

        request_logger.debug(
            "Request",
            extra={"debug_data": {"method": request.method, "url": request.url, "params": params}},
        )

        client = await self._get_client()
        try:
            with RequestTimer() as timer:
                response = await client.request(
                    request.method, request.url, params=params, headers=headers, **kwargs
                )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to High Systems timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Cannot reach High Systems: {e}") from e

        response_logger.debug(
            "Response",
            extra={"debug_data": {
                "status": response.status_code,
                "url": request.url,
                "latency_ms": timer.elapsed_ms,
            }},
        )
        return response

    def _normalize(self, response: httpx.Response, return_raw: bool):
        status = response.status_code
        try:
            data = response.json() if response.content else None
        except ValueError as e:
            if 200 <= status < 300:
                raise ParseError(f"Invalid JSON in response: {e}", status=status) from e
            data = None

        if not 200 <= status < 300:
            message = data.get("message") if isinstance(data, dict) else None
            raise ServiceError(message or response.reason_phrase or f"HTTP {status}", status=status, body=data)

        if return_raw:
            return response

        return data.get("results") if isinstance(data, dict) else data

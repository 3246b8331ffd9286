from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import *

from .codec import Codec, JSONCodec
from .errors import TransportError, response_error
from .http.types import HttpImplementation, RequestCancelled, RequestFailed
from .models import ErrorPolicy
from .request import Request, build_request
from .types import FormInput, HeadersInput, Method, MethodLike
from .utils import cancellable, logger

T = TypeVar("T")

Exchange = Tuple[bool, int, bytes]


@dataclass(frozen=True)
class Client:
    http: HttpImplementation
    codec: Codec = field(default_factory=JSONCodec)
    default_policy: ErrorPolicy = field(default_factory=ErrorPolicy)

    def build(
        self,
        method: MethodLike,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        body: Any = None,
        headers: Optional[HeadersInput] = None,
        form: Optional[FormInput] = None,
    ) -> Request:
        return build_request(
            method,
            base_url,
            relative_url,
            body=body,
            headers=headers,
            form=form,
            codec=self.codec,
        )

    async def send(
        self,
        method: MethodLike,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        body: Any = None,
        headers: Optional[HeadersInput] = None,
        form: Optional[FormInput] = None,
        policy: Optional[ErrorPolicy] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> None:
        """
        Send a request and discard the response body.
        """
        request = self.build(
            method, base_url, relative_url, body=body, headers=headers, form=form
        )
        await self.send_request(request, policy=policy, cancel=cancel)

    async def fetch(
        self,
        into: Type[T],
        method: MethodLike,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        body: Any = None,
        headers: Optional[HeadersInput] = None,
        form: Optional[FormInput] = None,
        policy: Optional[ErrorPolicy] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> Optional[T]:
        """
        Send a request and decode a successful response into `into`.

        Returns None if a failure was suppressed by the policy.
        """
        request = self.build(
            method, base_url, relative_url, body=body, headers=headers, form=form
        )
        return await self.fetch_request(request, into, policy=policy, cancel=cancel)

    async def send_request(
        self,
        request: Request,
        *,
        policy: Optional[ErrorPolicy] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> None:
        policy = policy or self.default_policy
        try:
            ok, status, body = await cancellable(
                self._exchange(request, read_on_success=False), cancel
            )
        except RequestFailed as exc:
            self._transport_failed(request, exc, policy)
            return
        if ok:
            return
        if policy.fail_on_response_error:
            raise response_error(status, body)
        logger.debug("ignoring HTTP %s from %s", status, request.url)

    async def fetch_request(
        self,
        request: Request,
        into: Type[T],
        *,
        policy: Optional[ErrorPolicy] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> Optional[T]:
        policy = policy or self.default_policy
        try:
            ok, status, body = await cancellable(
                self._exchange(request, read_on_success=True), cancel
            )
        except RequestFailed as exc:
            self._transport_failed(request, exc, policy)
            return None
        if ok:
            return self.codec.decode(body, into)
        if policy.fail_on_response_error:
            raise response_error(status, body)
        logger.debug("ignoring HTTP %s from %s", status, request.url)
        return None

    async def get(
        self,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        into: Optional[Type[T]] = None,
        **kwargs: Any,
    ) -> Optional[T]:
        return await self._verb(Method.GET, base_url, relative_url, into, kwargs)

    async def post(
        self,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        into: Optional[Type[T]] = None,
        **kwargs: Any,
    ) -> Optional[T]:
        return await self._verb(Method.POST, base_url, relative_url, into, kwargs)

    async def put(
        self,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        into: Optional[Type[T]] = None,
        **kwargs: Any,
    ) -> Optional[T]:
        return await self._verb(Method.PUT, base_url, relative_url, into, kwargs)

    async def patch(
        self,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        into: Optional[Type[T]] = None,
        **kwargs: Any,
    ) -> Optional[T]:
        return await self._verb(Method.PATCH, base_url, relative_url, into, kwargs)

    async def delete(
        self,
        base_url: str,
        relative_url: Optional[str] = None,
        *,
        into: Optional[Type[T]] = None,
        **kwargs: Any,
    ) -> Optional[T]:
        return await self._verb(Method.DELETE, base_url, relative_url, into, kwargs)

    async def _verb(
        self,
        method: Method,
        base_url: str,
        relative_url: Optional[str],
        into: Optional[Type[T]],
        kwargs: Dict[str, Any],
    ) -> Optional[T]:
        if into is None:
            await self.send(method, base_url, relative_url, **kwargs)
            return None
        return await self.fetch(into, method, base_url, relative_url, **kwargs)

    async def _exchange(self, request: Request, *, read_on_success: bool) -> Exchange:
        """
        Internal API performing one exchange. A successful response is left
        unread, with an empty body, unless `read_on_success` is True.
        """
        logger.debug("sending request %r", request)
        async with self.http(request) as response:
            if response.ok and not read_on_success:
                return True, response.status, b""
            return response.ok, response.status, await response.read()

    def _transport_failed(
        self, request: Request, exc: RequestFailed, policy: ErrorPolicy
    ) -> None:
        cancelled = isinstance(exc, RequestCancelled)
        if policy.fail_on_transport_error:
            raise TransportError(
                exc.inner, request.url, cancelled=cancelled
            ) from exc.inner
        logger.debug(
            "ignoring failed request to %s (cancelled=%s): %r",
            request.url,
            cancelled,
            exc.inner,
        )

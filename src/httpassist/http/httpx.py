from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, List, Tuple

import httpx
from multidict import CIMultiDict, CIMultiDictProxy

from ..codec import Payload
from ..request import MultipartForm, Request
from .types import RequestFailed, Response

TEXT_PART = "text/plain; charset=utf-8"
CONTENT_TYPE = "Content-Type"


@dataclass(frozen=True)
class HTTPX:
    client: httpx.AsyncClient

    @asynccontextmanager
    async def __call__(self, request: Request) -> AsyncIterator[Response]:
        # a list keeps repeated header names as separate entries
        headers: List[Tuple[str, str]] = list(request.headers.items())
        kwargs: Dict[str, Any] = {}
        if isinstance(request.body, Payload):
            if CONTENT_TYPE not in request.headers:
                headers.append((CONTENT_TYPE, request.body.content_type))
            kwargs["content"] = request.body.content
        elif isinstance(request.body, MultipartForm):
            kwargs["files"] = [
                (name, (None, value.encode("utf-8"), TEXT_PART))
                for name, value in request.body
            ]
        try:
            async with self.client.stream(
                request.method.value, request.url, headers=headers, **kwargs
            ) as response:
                yield Response(
                    response.status_code,
                    CIMultiDictProxy(CIMultiDict(response.headers.multi_items())),
                    response.aread,
                )
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise RequestFailed(exc) from exc

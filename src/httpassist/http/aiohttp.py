import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional, Union

import aiohttp
from multidict import CIMultiDict
from yarl import URL

from ..codec import Payload
from ..request import MultipartForm, Request
from .types import RequestFailed, Response

CONTENT_TYPE = "Content-Type"


@dataclass(frozen=True)
class AIOHTTP:
    session: aiohttp.ClientSession

    @asynccontextmanager
    async def __call__(self, request: Request) -> AsyncIterator[Response]:
        headers = CIMultiDict(request.headers)
        data: Optional[Union[bytes, aiohttp.MultipartWriter]] = None
        if isinstance(request.body, Payload):
            # a caller supplied Content-Type wins over the payload's
            if CONTENT_TYPE not in headers:
                headers.add(CONTENT_TYPE, request.body.content_type)
            data = request.body.content
        elif isinstance(request.body, MultipartForm):
            data = multipart(request.body)
        try:
            async with self.session.request(
                request.method.value,
                # already concatenated by the caller, do not requote
                URL(request.url, encoded=True),
                headers=headers,
                data=data,
            ) as response:
                yield Response(response.status, response.headers, response.read)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise RequestFailed(exc) from exc


def multipart(form: MultipartForm) -> aiohttp.MultipartWriter:
    writer = aiohttp.MultipartWriter("form-data")
    for name, value in form:
        part: Any = writer.append(value)
        part.set_content_disposition("form-data", name=name)
    return writer

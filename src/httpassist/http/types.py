from __future__ import annotations

from dataclasses import dataclass, field
from typing import AsyncContextManager, Awaitable, Callable

from multidict import CIMultiDictProxy

from ..request import Request


@dataclass(frozen=True)
class Response:
    status: int
    headers: CIMultiDictProxy[str] = field(repr=False)
    reader: Callable[[], Awaitable[bytes]] = field(repr=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    async def read(self) -> bytes:
        return await self.reader()


@dataclass
class RequestFailed(Exception):
    inner: BaseException


class RequestCancelled(RequestFailed):
    pass


HttpImplementation = Callable[[Request], AsyncContextManager[Response]]

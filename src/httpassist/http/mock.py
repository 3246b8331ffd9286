import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from functools import partial
from typing import AsyncIterator, Dict, List, Optional, Union

from multidict import CIMultiDict, CIMultiDictProxy

from ..request import Request
from ..types import Timeout
from .types import RequestFailed, Response


@dataclass(frozen=True)
class MockResponse:
    status: int = 200
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    read_error: Optional[Exception] = None


@dataclass
class MockHTTP:
    """
    Replays scripted responses in order, cycling when exhausted. An
    exception in the script, or a response whose `read_error` is set, is
    raised as a transport failure.
    """

    responses: List[Union[MockResponse, Exception]]
    delay: Timeout = 0
    counter: int = 0
    reads: int = 0
    requests: List[Request] = field(default_factory=list)

    @asynccontextmanager
    async def __call__(self, request: Request) -> AsyncIterator[Response]:
        self.requests.append(request)
        try:
            outcome = self.responses[self.counter]
        finally:
            self.counter = (self.counter + 1) % len(self.responses)
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(outcome, RequestFailed):
            raise outcome
        if isinstance(outcome, Exception):
            raise RequestFailed(outcome) from outcome
        yield Response(
            outcome.status,
            CIMultiDictProxy(CIMultiDict(outcome.headers)),
            partial(self._read, outcome),
        )

    async def _read(self, outcome: MockResponse) -> bytes:
        self.reads += 1
        if outcome.read_error is not None:
            raise RequestFailed(outcome.read_error) from outcome.read_error
        return outcome.body

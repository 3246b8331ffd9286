from typing import Optional


class HttpAssistError(Exception):
    pass


class TransportError(HttpAssistError):
    """
    The exchange could not complete: connection, DNS, TLS, timeout or
    cancellation. The underlying failure is kept in `inner`.
    """

    def __init__(
        self, inner: Exception, url: Optional[str] = None, *, cancelled: bool = False
    ):
        self.inner = inner
        self.url = url
        self.cancelled = cancelled
        super().__init__(f"request to {url} failed: {inner!r}")


class ResponseError(HttpAssistError):
    def __init__(self, status: int, body: bytes):
        self.status = status
        self.body = body
        super().__init__(status, self.text)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return f"HTTP {self.status}: {self.text}"


class ClientResponseError(ResponseError):
    pass


class ServerResponseError(ResponseError):
    pass


class CodecError(HttpAssistError):
    pass


def response_error(status: int, body: bytes) -> ResponseError:
    if 400 <= status < 500:
        return ClientResponseError(status, body)
    elif 500 <= status < 600:
        return ServerResponseError(status, body)
    return ResponseError(status, body)

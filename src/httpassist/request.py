from __future__ import annotations

from dataclasses import dataclass, field
from typing import *

from multidict import CIMultiDict, CIMultiDictProxy

from .codec import Codec, JSONCodec, Payload
from .types import JSON_CONTENT_TYPE, FormInput, HeadersInput, Method, MethodLike

ACCEPT = "Accept"

Body = Union[None, Payload, "MultipartForm"]


@dataclass(frozen=True)
class MultipartForm:
    """
    Ordered text fields sent as multipart/form-data, one part per field.
    """

    fields: Tuple[Tuple[str, str], ...]

    @classmethod
    def from_input(cls, form: FormInput) -> MultipartForm:
        return cls(tuple((str(name), str(value)) for name, value in _pairs(form)))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.fields)


@dataclass(frozen=True)
class Request:
    method: Method
    url: str
    headers: CIMultiDictProxy[str] = field(repr=False)
    body: Body = None


def build_request(
    method: MethodLike,
    base_url: str,
    relative_url: Optional[str] = None,
    *,
    body: Any = None,
    headers: Optional[HeadersInput] = None,
    form: Optional[FormInput] = None,
    codec: Optional[Codec] = None,
) -> Request:
    """
    Assemble a request. No I/O happens here.

    The relative url is appended verbatim to the base url. When form fields
    are given they become the body and any typed body is ignored; otherwise
    a typed body is encoded by the codec. `Accept: application/json` is
    always added after the caller's headers.
    """
    url = base_url + relative_url if relative_url else base_url

    header_store: CIMultiDict[str] = CIMultiDict()
    if headers is not None:
        for name, value in _pairs(headers):
            header_store.add(name, value)
    header_store.add(ACCEPT, JSON_CONTENT_TYPE)

    content: Body = None
    if form is not None:
        content = MultipartForm.from_input(form)
    elif body is not None:
        content = (codec or JSONCodec()).encode(body)

    return Request(
        method=Method.coerce(method),
        url=url,
        headers=CIMultiDictProxy(header_store),
        body=content,
    )


def _pairs(
    data: Union[Mapping[str, str], Iterable[Tuple[str, str]]]
) -> Iterable[Tuple[str, str]]:
    if isinstance(data, Mapping):
        return data.items()
    return data

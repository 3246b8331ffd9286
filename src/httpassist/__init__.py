from .client import Client
from .codec import Codec, JSONCodec, Payload
from .errors import (
    ClientResponseError,
    CodecError,
    HttpAssistError,
    ResponseError,
    ServerResponseError,
    TransportError,
)
from .models import LENIENT, STRICT, ErrorPolicy
from .request import MultipartForm, Request, build_request
from .types import Method

__all__ = (
    "Client",
    "ClientResponseError",
    "Codec",
    "CodecError",
    "ErrorPolicy",
    "HttpAssistError",
    "JSONCodec",
    "LENIENT",
    "Method",
    "MultipartForm",
    "Payload",
    "Request",
    "ResponseError",
    "STRICT",
    "ServerResponseError",
    "TransportError",
    "build_request",
)

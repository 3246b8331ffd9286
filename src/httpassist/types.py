from enum import Enum, unique
from typing import Iterable, Mapping, Tuple, Union

Timeout = Union[float, int]

HeaderPairs = Iterable[Tuple[str, str]]
HeadersInput = Union[Mapping[str, str], HeaderPairs]

FormPairs = Iterable[Tuple[str, str]]
FormInput = Union[Mapping[str, str], FormPairs]

JSON_CONTENT_TYPE = "application/json"


@unique
class Method(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def coerce(cls, method: Union["Method", str]) -> "Method":
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method {method!r}") from None


MethodLike = Union[Method, str]

import abc
import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import CodecError
from .types import JSON_CONTENT_TYPE

T = TypeVar("T")


@dataclass(frozen=True)
class Payload:
    content: bytes = dataclasses.field(repr=False)
    content_type: str


class Codec(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def encode(self, value: Any) -> Payload:
        """
        Serialize value into a payload tagged with its content type.

        Raise CodecError if the value cannot be serialized.
        """

    @abc.abstractmethod
    def decode(self, data: bytes, into: Type[T]) -> T:
        """
        Deserialize data into an instance of `into`.

        Raise CodecError on malformed or type-mismatched input.
        """


class JSONCodec(Codec):
    """
    JSON codec backed by pydantic.

    Anything pydantic can serialize can be encoded: JSON-native values,
    dataclasses, pydantic models and containers of those. Decoding validates
    in strict mode against `into`, so `{"id": "1"}` does not decode into a
    dataclass whose `id` is an `int`.
    """

    content_type = JSON_CONTENT_TYPE

    def encode(self, value: Any) -> Payload:
        try:
            content = adapter(Any).dump_json(value)
        except PydanticSerializationError as exc:
            raise CodecError(f"cannot encode {type(value).__name__}: {exc}") from exc
        return Payload(content, self.content_type)

    def decode(self, data: bytes, into: Type[T]) -> T:
        try:
            return adapter(into).validate_json(data, strict=True)
        except ValidationError as exc:
            raise CodecError(f"cannot decode into {into!r}: {exc}") from exc


@lru_cache(maxsize=256)
def adapter(into: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(into)
    except PydanticSchemaGenerationError as exc:
        raise CodecError(f"unsupported target type {into!r}") from exc

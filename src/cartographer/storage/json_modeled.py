"""JSON serialisation layer with model validation on top of a string store."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, assert_never

from pydantic import StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from cartographer.common import JsonValue, create_logger
from cartographer.utils.functools.models import Result, chain, fail, succeed
from cartographer.utils.validation import format_validation_error

from .models import CastFailure, InternalFailure, NotFoundFailure, internal_failure
from .protocol import MapStore, Model

logger = create_logger("storage.json")

JSON_INDENT = 3


class PydanticModel[V]:
    """`Model` backed by a pydantic `TypeAdapter`.

    Works for any type pydantic can validate: BaseModel subclasses,
    dataclasses, TypedDicts, annotated primitives.
    """

    def __init__(self, type_: Any, name: str | None = None) -> None:  # noqa: ANN401
        self._adapter: TypeAdapter[V] = TypeAdapter(type_)
        self._name = name or getattr(type_, "__name__", None) or repr(type_)

    @property
    def name(self) -> str:
        return self._name

    def cast(self, raw: object) -> Result[V, CastFailure]:
        try:
            return succeed(self._adapter.validate_python(raw))
        except ValidationError as exc:
            return fail(CastFailure(message=format_validation_error(self._name, exc)))

    def dump(self, value: V) -> JsonValue:
        return self._adapter.dump_python(value, mode="json")

    def __repr__(self) -> str:
        return f"PydanticModel({self._name})"


STRING_MODEL: PydanticModel[str] = PydanticModel(StrictStr, name="str")


class JSONModeledMapStore[K, V]:
    """`MapStore[K, V]` over a `MapStore[str, str]` holding JSON text.

    Keys coming back from `list` and values coming back from `read` are
    validated; anything the models reject surfaces as `internal-failure`.
    """

    def __init__(
        self,
        store: MapStore[str, str],
        value_model: Model[V],
        key_model: Model[K],
        string_from_key: Callable[[K], str] = str,
        string_from_value: Callable[[V], str] | None = None,
    ) -> None:
        self._store = store
        self._value_model = value_model
        self._key_model = key_model
        self._string_from_key = string_from_key
        self._string_from_value = string_from_value or self._default_string_from_value

    async def list(self) -> Result[list[K], InternalFailure]:
        return await chain(await self._store.list()).then(self._cast_keys).result()

    async def read(self, key: K) -> Result[V, NotFoundFailure | InternalFailure]:
        return await (
            chain(await self._store.read(self._string_from_key(key)))
            .then(_parse_json)
            .then(self._value_model.cast)
            .catch(_to_store_failure)
            .result()
        )

    async def write(self, key: K, value: V) -> Result[None, InternalFailure]:
        try:
            content = self._string_from_value(value)
        except (TypeError, ValueError, PydanticSerializationError) as exc:
            logger.error("Value serialisation failed", key=str(key), error=str(exc))
            return fail(internal_failure(f"Failed to serialise value for '{key}'", exc))
        return await self._store.write(self._string_from_key(key), content)

    async def destroy(self, key: K) -> Result[None, NotFoundFailure | InternalFailure]:
        return await self._store.destroy(self._string_from_key(key))

    def _cast_keys(self, string_keys: list[str]) -> Result[list[K], InternalFailure]:
        keys: list[K] = []
        for string_key in string_keys:
            key_result = self._key_model.cast(string_key)
            if key_result.is_err():
                message = key_result.err_value.message
                logger.error("Stored key rejected by key model", key=string_key, error=message)
                return fail(InternalFailure(message=message))
            keys.append(key_result.ok_value)
        return succeed(keys)

    def _default_string_from_value(self, value: V) -> str:
        return json.dumps(self._value_model.dump(value), indent=JSON_INDENT, ensure_ascii=False) or ""


def _parse_json(content: str) -> Result[object, InternalFailure]:
    try:
        return succeed(json.loads(content))
    except json.JSONDecodeError as exc:
        return fail(internal_failure("Stored content is not valid JSON", exc))


def _to_store_failure(
    failure: CastFailure | NotFoundFailure | InternalFailure,
) -> Result[Any, NotFoundFailure | InternalFailure]:
    match failure:
        case CastFailure():
            logger.error("Stored value rejected by value model", error=failure.message)
            return fail(InternalFailure(message=failure.message))
        case NotFoundFailure() | InternalFailure():
            return fail(failure)
        case _:
            assert_never(failure)


def create_json_modeled_storage[K, V](
    store: MapStore[str, str],
    value_model: Model[V],
    key_model: Model[K],
    string_from_key: Callable[[K], str] = str,
    string_from_value: Callable[[V], str] | None = None,
) -> JSONModeledMapStore[K, V]:
    return JSONModeledMapStore(store, value_model, key_model, string_from_key, string_from_value)

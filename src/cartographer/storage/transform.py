"""Key-transforming MapStore combinators."""

from __future__ import annotations

from collections.abc import Callable

from cartographer.utils.functools.models import Result

from .models import InternalFailure, NotFoundFailure
from .protocol import MapStore


class TransformKeyMapStore[K, TK, V]:
    """Expose a `MapStore[TK, V]` as a `MapStore[K, V]`.

    `forward` is applied to every key going in; `backward` to every key
    coming out of `list`. `backward(forward(k)) == k` must hold for the keys
    actually used, it is not checked here.

    When `owns` is given, `list` skips inner keys it rejects, so several
    transforms can share one inner store without seeing each other's keys.
    """

    def __init__(
        self,
        forward: Callable[[K], TK],
        backward: Callable[[TK], K],
        inner: MapStore[TK, V],
        owns: Callable[[TK], bool] | None = None,
    ) -> None:
        self._forward = forward
        self._backward = backward
        self._inner = inner
        self._owns = owns

    async def list(self) -> Result[list[K], InternalFailure]:
        return (await self._inner.list()).map(self._backward_keys)

    async def read(self, key: K) -> Result[V, NotFoundFailure | InternalFailure]:
        return await self._inner.read(self._forward(key))

    async def write(self, key: K, value: V) -> Result[None, InternalFailure]:
        return await self._inner.write(self._forward(key), value)

    async def destroy(self, key: K) -> Result[None, NotFoundFailure | InternalFailure]:
        return await self._inner.destroy(self._forward(key))

    def _backward_keys(self, keys: list[TK]) -> list[K]:
        if self._owns is not None:
            keys = [key for key in keys if self._owns(key)]
        return [self._backward(key) for key in keys]


def transform_key[K, TK, V](
    forward: Callable[[K], TK],
    backward: Callable[[TK], K],
    store: MapStore[TK, V],
    owns: Callable[[TK], bool] | None = None,
) -> MapStore[K, V]:
    return TransformKeyMapStore(forward, backward, store, owns)


def transform_key_with_namespace[V](namespace: str, store: MapStore[str, V]) -> MapStore[str, V]:
    """Prefix keys with `<namespace>/`; `list` only reports keys under that prefix."""
    prefix = f"{namespace}/"
    return transform_key(
        lambda key: f"{prefix}{key}",
        lambda key: key[len(prefix) :],
        store,
        owns=lambda key: key.startswith(prefix),
    )


def transform_key_with_file_extension[V](extension: str, store: MapStore[str, V]) -> MapStore[str, V]:
    """Suffix keys with `.<extension>`; `list` only reports keys with that suffix."""
    suffix = f".{extension}"
    return transform_key(
        lambda key: f"{key}{suffix}",
        lambda key: key[: -len(suffix)],
        store,
        owns=lambda key: key.endswith(suffix),
    )

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import JsonValue

from cartographer.common import KeySegment, create_logger
from cartographer.config import CartographerConfig, ConfigError, ConfigNotFoundError, load_config, resolve_config_path
from cartographer.settings import get_settings
from cartographer.storage import MapStore, NotFoundFailure, PydanticModel, create_model_map_store
from cartographer.utils.functools.models import Err, Ok, Result

logger = create_logger("cli.store")

KEY_MODEL: PydanticModel[str] = PydanticModel(KeySegment, name="key")
VALUE_MODEL: PydanticModel[JsonValue] = PydanticModel(JsonValue, name="JSON value")
NAMESPACE_MODEL: PydanticModel[str] = PydanticModel(KeySegment, name="namespace")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file (defaults to $CARTOGRAPHER_CONFIG_PATH or ./local.cartographer.json)."),
]
NamespaceOption = Annotated[
    str,
    typer.Option("--namespace", "-n", show_default=True, help="Namespace the keys live in."),
]
KeyArgument = Annotated[str, typer.Argument(help="Entry key.")]

app = typer.Typer(help="Inspect and edit a Cartographer store.")


@app.callback(invoke_without_command=True)
def _store_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_keys(config: ConfigOption = None, namespace: NamespaceOption = "default") -> None:
    keys = _run(config, namespace, lambda store: store.list())
    typer.echo(json.dumps(sorted(keys), indent=2))


@app.command("read")
def read(key: KeyArgument, config: ConfigOption = None, namespace: NamespaceOption = "default") -> None:
    key = _cast_key(key)
    value = _run(config, namespace, lambda store: store.read(key))
    typer.echo(json.dumps(value, indent=2))


@app.command("write")
def write(
    key: KeyArgument,
    value: Annotated[str, typer.Argument(help="Value as JSON text.")],
    config: ConfigOption = None,
    namespace: NamespaceOption = "default",
) -> None:
    key = _cast_key(key)
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        typer.secho(f"Value is not valid JSON: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc
    _run(config, namespace, lambda store: store.write(key, parsed))
    typer.echo(f"Wrote '{key}' to '{namespace}'")


@app.command("destroy")
def destroy(key: KeyArgument, config: ConfigOption = None, namespace: NamespaceOption = "default") -> None:
    key = _cast_key(key)
    _run(config, namespace, lambda store: store.destroy(key))
    typer.echo(f"Destroyed '{key}' in '{namespace}'")


def _cast_key(key: str) -> str:
    match KEY_MODEL.cast(key):
        case Ok(valid):
            return valid
        case Err(failure):
            typer.secho(failure.message, err=True, fg=typer.colors.RED)
            raise typer.Exit(code=1)


def _run(
    config_path: Path | None,
    namespace: str,
    operation: Callable[[MapStore[str, JsonValue]], Awaitable[Result[Any, Any]]],
) -> Any:  # noqa: ANN401
    namespace_result = NAMESPACE_MODEL.cast(namespace)
    if namespace_result.is_err():
        typer.secho(namespace_result.err_value.message, err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    config = _load_config(config_path)

    async def _execute() -> Result[Any, Any]:
        store = await create_model_map_store(config, VALUE_MODEL, KEY_MODEL, namespace)
        return await operation(store)

    match asyncio.run(_execute()):
        case Ok(value):
            return value
        case Err(NotFoundFailure() as failure):
            typer.secho(failure.message, err=True, fg=typer.colors.YELLOW)
            raise typer.Exit(code=1)
        case Err(failure):
            logger.error("Store operation failed", namespace=namespace, error=failure.message)
            typer.secho(failure.message, err=True, fg=typer.colors.RED)
            raise typer.Exit(code=1)


def _load_config(config_path: Path | None) -> Any:  # noqa: ANN401
    path = resolve_config_path(config_path)
    match load_config(path):
        case Ok(loaded):
            file_config = loaded
        case Err(ConfigNotFoundError()) if config_path is None:
            file_config = CartographerConfig()
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)
    return get_settings().merged_with(file_config)


def _handle_error(error: ConfigError) -> None:
    message = error.message
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)

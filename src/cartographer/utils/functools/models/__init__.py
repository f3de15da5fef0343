from .result import (
    Chain,
    Err,
    Ok,
    OkErr,
    Result,
    UnwrapError,
    chain,
    fail,
    handle_result,
    is_err,
    is_ok,
    succeed,
)

__all__ = [
    "Chain",
    "Err",
    "Ok",
    "OkErr",
    "Result",
    "UnwrapError",
    "chain",
    "fail",
    "handle_result",
    "is_err",
    "is_ok",
    "succeed",
]

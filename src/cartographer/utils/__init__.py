from .validation import format_validation_error

__all__ = ["format_validation_error"]

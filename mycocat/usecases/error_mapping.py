"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from mycocat.adapters.dataset_errors import (
    DatasetError,
    DatasetFormatError,
    DatasetNotFoundError,
)
from mycocat.domain.ports import UseCaseError


def map_dataset_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised while loading a dataset.
        default_code: Code used for exceptions outside the dataset hierarchy.
        default_message: Optional message overriding ``str(exc)`` for those.

    Returns:
        UseCaseError carrying a code and a message suitable for a status line.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, DatasetNotFoundError):
        return UseCaseError(
            "DATASET_NOT_FOUND",
            _compose_error_message("Dataset missing", exc.path),
            meta={"path": exc.path},
        )
    if isinstance(exc, DatasetFormatError):
        return UseCaseError(
            "DATASET_INVALID",
            _compose_error_message(str(exc), exc.hint),
            meta={"path": exc.path},
        )
    if isinstance(exc, DatasetError):
        return UseCaseError(default_code, str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_dataset_error"]

"""Sparse JSON request bodies."""

from __future__ import annotations

from typing import Any

from .models.options import Options


def serialize_options(options: Options) -> dict[str, Any]:
    """Return the JSON body for ``options``.

    Unset (``None``) fields are omitted; empty strings and empty sequences are
    real values and are sent. Sequences keep their order and each element is
    encoded by its own model.
    """
    return options.body_values()

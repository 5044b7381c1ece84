# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from ._concepts import Ordering

__all__ = ("to_list_type",)


def to_list_type(value: Any, /) -> list[Any]:
    """Normalize any input into a plain list keyed 0..n-1.

    Mapping keys are discarded and only values are kept, in insertion
    order. Any other iterable is expanded in iteration order. Strings,
    bytes and pydantic models iterate but are single items, so they
    become a one-element list like any other bare scalar. `None`
    elements inside a container are real items and are kept; only a
    top-level `None` means "no items".

    Args:
        value (Any): Iterable, mapping, ordering or scalar.

    Returns:
        list[Any]: A new list owned by the caller.
    """
    if value is None:
        return []
    if isinstance(value, Ordering):
        return value.__list__()
    if isinstance(value, (str, bytes, bytearray, BaseModel)):
        return [value]
    if hasattr(value, "values") and callable(value.values):
        return list(value.values())
    if isinstance(value, Iterable):
        return list(value)
    return [value]

# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


__all__ = ("Ordering",)


class Ordering(ABC, Generic[T]):
    """Base for ordered storage with sequential integer positions."""

    @abstractmethod
    def __list__(self) -> list[T]:
        pass


# File: blockdata/_concepts.py

# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import BlockDataError, OutOfBoundsError
from .collection import Collection, OrderedCollection
from .config import settings
from .utils import to_list_type
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)


__all__ = (
    "__version__",
    "BlockDataError",
    "Collection",
    "OrderedCollection",
    "OutOfBoundsError",
    "logger",
    "settings",
    "to_list_type",
)

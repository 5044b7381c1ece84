# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for configuration module."""

import pytest
from pydantic import ValidationError

from blockdata.config import CollectionSettings, settings


class TestCollectionSettings:
    """Tests for CollectionSettings class."""

    def test_default_values(self, monkeypatch):
        for name in ("LOG_LEVEL", "REPR_MAX_ITEMS", "ERROR_VALUE_MAX_LEN"):
            monkeypatch.delenv(f"BLOCKDATA_{name}", raising=False)
        config = CollectionSettings()
        assert config.LOG_LEVEL == "INFO"
        assert config.REPR_MAX_ITEMS == 10
        assert config.ERROR_VALUE_MAX_LEN == 50

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BLOCKDATA_REPR_MAX_ITEMS", "3")
        monkeypatch.setenv("BLOCKDATA_LOG_LEVEL", "debug")
        config = CollectionSettings()
        assert config.REPR_MAX_ITEMS == 3
        assert config.LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            CollectionSettings(LOG_LEVEL="chatty")

    def test_bounds(self):
        with pytest.raises(ValidationError):
            CollectionSettings(REPR_MAX_ITEMS=-1)
        with pytest.raises(ValidationError):
            CollectionSettings(ERROR_VALUE_MAX_LEN=2)

    def test_frozen(self):
        config = CollectionSettings()
        with pytest.raises(ValidationError):
            config.REPR_MAX_ITEMS = 1

    def test_singleton_instance(self):
        assert isinstance(settings, CollectionSettings)

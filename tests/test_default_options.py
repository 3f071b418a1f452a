"""
Default options unit tests
"""

from datetime import datetime

import pytest

import reldate.default_options as default_options_module
from reldate import (
    DefaultOptions,
    DefaultOptionsProvider,
    format_relative,
    get_default_options,
    reset_default_options,
    set_default_options,
)
from reldate.config import config
from reldate.default_options import resolve_defaults
from reldate.locale import en_GB, en_US, it


@pytest.fixture
def module_provider(monkeypatch):
    """Fresh module-level provider with fixed initial values"""
    provider = DefaultOptionsProvider(DefaultOptions(locale=en_US, time_zone="UTC"))
    monkeypatch.setattr(default_options_module, "_provider", provider)
    return provider


class TestDefaultOptionsFromConfig:
    """DefaultOptions.from_config"""

    def test_reads_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LOCALE", "en-GB")
        monkeypatch.setattr(config, "WEEK_STARTS_ON", 3)
        monkeypatch.setattr(config, "FIRST_WEEK_CONTAINS_DATE", None)
        monkeypatch.setattr(config, "TIME_ZONE", "Asia/Tokyo")

        options = DefaultOptions.from_config()

        assert options.locale is en_GB
        assert options.week_starts_on == 3
        assert options.first_week_contains_date is None
        assert options.time_zone == "Asia/Tokyo"

    def test_provider_loads_lazily(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LOCALE", "it")
        provider = DefaultOptionsProvider()

        assert provider.get().locale is it

    def test_settings_live_in_the_package(self):
        """The library never imports a top-level config module"""
        assert type(config).__module__ == "reldate.config"
        assert default_options_module.config is config


class TestDefaultOptionsProvider:
    """DefaultOptionsProvider"""

    def test_set_and_reset(self):
        initial = DefaultOptions(locale=en_US, time_zone="UTC")
        provider = DefaultOptionsProvider(initial)

        updated = provider.set(locale=it, week_starts_on=1)

        assert provider.get() is updated
        assert updated.locale is it
        assert updated.time_zone == "UTC"
        assert initial.locale is en_US

        provider.reset()
        assert provider.get() is initial

    def test_unknown_field(self):
        provider = DefaultOptionsProvider(DefaultOptions())

        with pytest.raises(TypeError):
            provider.set(color="blue")

    def test_resolve_defaults(self):
        options = DefaultOptions(locale=it)

        assert resolve_defaults(options) is options
        assert resolve_defaults(DefaultOptionsProvider(options)) is options


class TestModuleDefaults:
    """Module-level get/set/reset"""

    def test_set_default_options_affects_format_relative(self, module_provider):
        value = datetime(2026, 10, 13, 4, 30)
        base = datetime(2026, 10, 14, 12, 0)

        assert format_relative(value, base) == "yesterday at 4:30 AM"

        set_default_options(locale=it)
        assert get_default_options().locale is it
        assert format_relative(value, base) == "ieri alle 04:30"

        reset_default_options()
        assert format_relative(value, base) == "yesterday at 4:30 AM"

    def test_injected_defaults_do_not_touch_module_state(self, module_provider):
        value = datetime(2026, 10, 13, 4, 30)
        base = datetime(2026, 10, 14, 12, 0)
        injected = DefaultOptionsProvider(DefaultOptions(locale=en_GB, time_zone="UTC"))

        assert format_relative(value, base, defaults=injected) == "yesterday at 04:30"
        assert get_default_options().locale is en_US

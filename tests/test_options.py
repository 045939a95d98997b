"""Tests for option models and settings."""

import pytest
from pydantic import ValidationError

from timeweave import RunOptions, ScheduleOptions
from timeweave.config import LogFormat, Settings


class TestScheduleOptions:
    def test_defaults(self):
        options = ScheduleOptions()
        assert options.cram == 1
        assert options.stretch == 1
        assert options.seed is None

    def test_cram_is_rounded_up(self):
        assert ScheduleOptions(cram=2.2).cram == 3

    def test_scale_overrides_cram_and_stretch(self):
        options = ScheduleOptions(scale=3.5, cram=1, stretch=1)
        assert options.cram == 4
        assert options.stretch == 3.5

    @pytest.mark.parametrize("kwargs", [{"cram": 0}, {"stretch": 0}, {"stretch": -1}, {"scale": 0}])
    def test_rejects_non_positive_factors(self, kwargs):
        with pytest.raises(ValidationError):
            ScheduleOptions(**kwargs)

    def test_rejects_unknown_options(self):
        with pytest.raises(ValidationError):
            ScheduleOptions(strech=2)

    def test_seed_makes_draws_reproducible(self):
        first = ScheduleOptions(seed=5).rng.random()
        second = ScheduleOptions(seed=5).rng.random()
        assert first == second

    def test_options_are_frozen(self):
        with pytest.raises(ValidationError):
            ScheduleOptions().cram = 2


class TestRunOptions:
    def test_defaults(self):
        options = RunOptions()
        assert options.live is False
        assert options.daemonize is False

    def test_rejects_unknown_options(self):
        with pytest.raises(ValidationError):
            RunOptions(daemonise=True)


class TestSettings:
    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("TIMEWEAVE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TIMEWEAVE_LOG_FORMAT", "json")
        monkeypatch.setenv("TIMEWEAVE_DEFAULT_SEED", "17")

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == LogFormat.JSON
        assert settings.DEFAULT_SEED == 17

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "DEFAULT_SEED"):
            monkeypatch.delenv(f"TIMEWEAVE_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == LogFormat.CONSOLE
        assert settings.DEFAULT_SEED is None

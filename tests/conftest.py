import time

import pytest

from timeweave import Moment, ScheduleOptions, Scope


class FakeRandom:
    """Stands in for ``random.Random.random`` with a fixed sequence of draws."""

    def __init__(self, *values: float):
        self.values = list(values)

    def __call__(self) -> float:
        return self.values.pop(0)


class Recorder:
    """Collects (label, clock reading) pairs from moment callbacks."""

    def __init__(self):
        self.calls: list[tuple[str, float]] = []

    def moment(self, label: str) -> Moment:
        def record(scope: Scope) -> None:
            self.calls.append((label, time.time()))
        return Moment(record)

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.calls]

    @property
    def times(self) -> list[float]:
        return [ts for _, ts in self.calls]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def noop():
    return Moment(lambda scope: None)


@pytest.fixture
def seeded():
    def build(seed: int = 1234, **kwargs) -> ScheduleOptions:
        return ScheduleOptions(seed=seed, **kwargs)
    return build


@pytest.fixture
def fake_random():
    def install(options: ScheduleOptions, *values: float) -> FakeRandom:
        fake = FakeRandom(*values)
        options.rng.random = fake
        return fake
    return install

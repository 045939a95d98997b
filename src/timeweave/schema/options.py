"""Option models for scheduling and running timelines."""

import math
import random
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator


class ScheduleOptions(BaseModel):
    """Options passed unchanged through every level of a scheduling run.

    ``cram`` replicates the Moment children of serial timelines, ``stretch``
    multiplies every offset computed within the scheduled subtree. ``scale``
    is accepted as input only and sets both (``cram`` rounded up).

    A single ``random.Random`` seeded from ``seed`` is shared by every nested
    scheduler, so scheduling the same timeline with the same seed reproduces
    the same offsets.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cram: int = Field(default=1, ge=1, description="Replication factor for Moment children")
    stretch: float = Field(default=1.0, gt=0, description="Multiplier applied to computed offsets")
    seed: int | None = Field(default=None, description="Seed for the shared random generator")

    _rng: random.Random = PrivateAttr(default_factory=random.Random)

    @model_validator(mode="before")
    @classmethod
    def _apply_scale(cls, data: Any) -> Any:
        if isinstance(data, dict) and "scale" in data:
            data = dict(data)
            scale = data.pop("scale")
            if scale is not None:
                data["cram"] = scale
                data["stretch"] = scale
        return data

    @field_validator("cram", mode="before")
    @classmethod
    def _ceil_cram(cls, value: Any) -> Any:
        if isinstance(value, float):
            return math.ceil(value)
        return value

    def model_post_init(self, __context: Any) -> None:
        self._rng.seed(self.seed)

    @property
    def rng(self) -> random.Random:
        """The random generator shared by the whole scheduling run."""
        return self._rng


class RunOptions(BaseModel):
    """How a runner evaluates a stream of scheduled events."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    live: bool = Field(default=False, description="Sleep until each event's offset is reached")
    daemonize: bool = Field(default=False, description="Detach from the terminal before running")

"""Photography service catalog models."""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Service(BaseModel):
    """A bookable photography service from the static catalog.

    ``duration_minutes`` is deliberately loose: a bad catalog entry is
    reported at submission time instead of failing the whole catalog load.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: int
    duration_minutes: Optional[float] = None
    duration_label: str = ""

    @property
    def has_valid_duration(self) -> bool:
        """Duration is present, finite and not negative."""
        return (
            self.duration_minutes is not None
            and math.isfinite(self.duration_minutes)
            and self.duration_minutes >= 0
        )

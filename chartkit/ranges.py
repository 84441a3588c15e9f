"""Mapping of data values onto pixel distances."""

import math
from dataclasses import dataclass


@dataclass
class ContinuousRange:
    """A span of values mapped linearly onto ``domain`` pixels."""

    min: float = 0.0
    max: float = 0.0
    domain: int = 0
    descending: bool = False

    def is_zero(self):
        """True if neither bound nor the domain has been set."""
        return (
            (self.min == 0 or math.isnan(self.min))
            and (self.max == 0 or math.isnan(self.max))
            and self.domain == 0
        )

    def delta(self):
        """The difference between max and min."""
        return self.max - self.min

    def __str__(self):
        if self.delta() == 0:
            return "ContinuousRange [empty]"
        return f"ContinuousRange [{self.min:.2f},{self.max:.2f}] => {self.domain}"

    def translate(self, value):
        """Map ``value`` to a pixel offset within the domain."""
        delta = self.delta()
        if delta == 0:
            raise ValueError("cannot translate within a range of zero width")
        ratio = (value - self.min) / delta
        offset = int(math.ceil(ratio * float(self.domain)))
        if self.descending:
            return self.domain - offset
        return offset
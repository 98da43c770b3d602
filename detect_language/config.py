import dataclasses
from enum import Enum
from typing import Optional

from .errors import TooGreatDistance, TooSmallDistance

MAX_RELATIVE_DISTANCE = 0.99


# pylint: disable=invalid-name
class LanguageUniverse(Enum):
    """Candidate language set the detector is built from."""

    all = 1
    spoken = 2

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Config:
    """
    Validated detection options.

    Every ``with_*`` method returns a new ``Config`` and leaves the receiver
    untouched, so a config can be shared and chained freely.
    """

    minimum_relative_distance: Optional[float] = None
    enable_low_accuracy_mode: bool = False
    enable_preload: bool = False
    language_universe: LanguageUniverse = LanguageUniverse.all

    def with_minimum_relative_distance(self, raw_distance: float) -> "Config":
        """
        Store the minimum relative distance used by the detector.

        Args:
            raw_distance (float): Requested distance, must satisfy 0.0 <= d < 0.99.

        Returns:
            Config: A copy of this config holding the distance.

        Raises:
            TooSmallDistance: If the distance is negative.
            TooGreatDistance: If the distance is 0.99 or more (or NaN).
        """
        if raw_distance < 0.0:
            raise TooSmallDistance(raw_distance)
        # written as a negation so that NaN is rejected too
        if not raw_distance < MAX_RELATIVE_DISTANCE:
            raise TooGreatDistance(raw_distance)
        return dataclasses.replace(self, minimum_relative_distance=raw_distance)

    def with_low_accuracy_mode(self) -> "Config":
        return dataclasses.replace(self, enable_low_accuracy_mode=True)

    def with_preload(self) -> "Config":
        return dataclasses.replace(self, enable_preload=True)

    def with_language_universe(self, universe: LanguageUniverse) -> "Config":
        return dataclasses.replace(self, language_universe=universe)

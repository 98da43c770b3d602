"""Error taxonomy for configuration and stream failures."""


class DetectLanguageError(Exception):
    """Base class for errors raised by detect_language."""


class ConfigError(DetectLanguageError, ValueError):
    """Invalid detection option; raised before any detector is built."""


class _DistanceError(ConfigError):
    def __init__(self, value: float):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class TooSmallDistance(_DistanceError):
    """Minimum relative distance below 0.0."""


class TooGreatDistance(_DistanceError):
    """Minimum relative distance at or above 0.99."""


class InputDecodeError(DetectLanguageError, OSError):
    """The input sample is not valid text in the expected encoding."""

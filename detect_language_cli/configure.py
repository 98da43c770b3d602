"""Helpers to build configs and logging from CLI args."""

import logging
from typing import Optional, Tuple

from detect_language.config import Config, LanguageUniverse
from detect_language.errors import ConfigError

LOG_FORMAT = "%(asctime)s [%(levelname)s][%(filename)s:%(lineno)d][%(funcName)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def compute_log_level(verbose: int) -> int:
    log_levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    return log_levels[min(verbose, len(log_levels) - 1)]


def configure_logging(verbose: int, stream) -> None:
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        stream=stream,
        level=compute_log_level(verbose),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def _flag(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}")
    return value


def make_config(args) -> Config:
    """
    Map parsed CLI args to a validated Config.

    Raises:
        TooSmallDistance, TooGreatDistance: If the distance flag is out of range.
        ConfigError: If an on/off option is not a boolean.
    """
    config = Config()
    if args.minimum_relative_distance is not None:
        config = config.with_minimum_relative_distance(float(args.minimum_relative_distance))
    if _flag("low_accuracy_mode", args.low_accuracy_mode):
        config = config.with_low_accuracy_mode()
    if _flag("preload", args.preload):
        config = config.with_preload()
    if _flag("spoken_language_only", args.spoken_language_only):
        config = config.with_language_universe(LanguageUniverse.spoken)
    return config


def _non_negative(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def resolve_limits(args) -> Tuple[int, Optional[int]]:
    """Return the (input byte limit, output record limit) pair from CLI args."""
    sample_limit = _non_negative("max_input_sample_bytes", args.max_input_sample_bytes)
    result_limit = None
    if args.max_output_languages is not None:
        result_limit = _non_negative("max_output_languages", args.max_output_languages)
    return sample_limit, result_limit

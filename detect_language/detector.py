"""Build a query-ready lingua detector from a validated Config."""

import logging

from lingua import LanguageDetector, LanguageDetectorBuilder

from .config import Config, LanguageUniverse

LOG = logging.getLogger(__name__)


def build_from_builder(config: Config, builder: LanguageDetectorBuilder) -> LanguageDetector:
    """
    Apply the options of ``config`` to ``builder`` and build the detector.

    Args:
        config (Config): Validated detection options.
        builder (LanguageDetectorBuilder): Builder with its language set already selected.

    Returns:
        LanguageDetector: Detector to be used read-only for the rest of the run.
    """
    if config.enable_low_accuracy_mode:
        builder = builder.with_low_accuracy_mode()

    if config.minimum_relative_distance is not None:
        builder = builder.with_minimum_relative_distance(config.minimum_relative_distance)

    if config.enable_preload:
        builder = builder.with_preloaded_language_models()

    LOG.info(
        "Building detector: universe=%s low_accuracy=%s minimum_relative_distance=%s preload=%s",
        config.language_universe,
        config.enable_low_accuracy_mode,
        config.minimum_relative_distance,
        config.enable_preload,
    )
    return builder.build()


def build_from_all_languages(config: Config) -> LanguageDetector:
    return build_from_builder(config, LanguageDetectorBuilder.from_all_languages())


def build_from_all_spoken_languages(config: Config) -> LanguageDetector:
    return build_from_builder(config, LanguageDetectorBuilder.from_all_spoken_languages())


def build_detector(config: Config) -> LanguageDetector:
    if config.language_universe == LanguageUniverse.spoken:
        return build_from_all_spoken_languages(config)
    return build_from_all_languages(config)

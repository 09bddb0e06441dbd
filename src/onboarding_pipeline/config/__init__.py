"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the onboarding pipeline:
    - Pydantic models for type-safe configuration
    - Layered YAML loader (file, profile, overrides) with key checks
    - Support for configuration profiles

Configuration Structure:
    - OnboardingConfig: Root configuration object
    - GlobalConfig: Global settings (timezone, pinned reference date)
    - MockDataConfig: Mock applicant generation
    - PipelineConfig: Transition requirements and note composition
    - AnalyticsConfig: Enabled aggregations and their thresholds
"""

from onboarding_pipeline.config.loader import (
    ConfigLoader,
    UnknownConfigKeyError,
    load_config,
    merge_layers,
)
from onboarding_pipeline.config.models import (
    AGGREGATION_NAMES,
    AnalyticsConfig,
    GlobalConfig,
    MockDataConfig,
    OnboardingConfig,
    PipelineConfig,
    PipelineHealthConfig,
    TimeToHireConfig,
)

__all__ = [
    "AGGREGATION_NAMES",
    "AnalyticsConfig",
    "ConfigLoader",
    "GlobalConfig",
    "MockDataConfig",
    "OnboardingConfig",
    "PipelineConfig",
    "PipelineHealthConfig",
    "TimeToHireConfig",
    "UnknownConfigKeyError",
    "load_config",
    "merge_layers",
]

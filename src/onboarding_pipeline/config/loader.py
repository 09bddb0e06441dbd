"""
Configuration Loader - Layered YAML Configuration.

An OnboardingConfig is assembled from up to three layers, lowest first:
    1. The config file (e.g. config/default.yaml)
    2. A named profile, looked up in a `profiles/` directory beside the
       config file, then in `<base_path>/config/profiles`
    3. Explicit overrides passed to load()

Every key of every layer must name an OnboardingConfig field (section
keys by their YAML alias, e.g. `global`); unknown keys raise
UnknownConfigKeyError before pydantic validation runs.

`global.reference_date` accepts an ISO date, null, or the word "today",
which is pinned to the loader's clock at load time.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, Union, get_origin

import yaml
from pydantic import BaseModel

from onboarding_pipeline.config.models import OnboardingConfig

logger = logging.getLogger(__name__)

TODAY_KEYWORD = "today"


class UnknownConfigKeyError(ValueError):
    """A configuration layer names keys OnboardingConfig does not have."""

    def __init__(self, source: str, keys: List[str]) -> None:
        self.source = source
        self.keys = keys
        super().__init__(f"Unknown config keys in {source}: {', '.join(keys)}")


def merge_layers(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep merge overlay into a copy of base; nested mappings merge key by key."""
    result = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_layers(current, value)
        else:
            result[key] = value
    return result


def unknown_keys(
    layer: Mapping[str, Any],
    model: Type[BaseModel] = OnboardingConfig,
    prefix: str = "",
) -> List[str]:
    """Dotted paths in layer that are not fields of model (recursing into sub-models)."""
    fields = {}
    for name, info in model.model_fields.items():
        fields[name] = info
        if info.alias:
            fields[info.alias] = info

    unknown: List[str] = []
    for key, value in layer.items():
        path = f"{prefix}{key}"
        info = fields.get(key)
        if info is None:
            unknown.append(path)
            continue
        section = info.annotation
        if (
            isinstance(value, Mapping)
            and get_origin(section) is None
            and isinstance(section, type)
            and issubclass(section, BaseModel)
        ):
            unknown.extend(unknown_keys(value, section, f"{path}."))
    return unknown


class ConfigLoader:
    """Builds a validated OnboardingConfig from YAML layers."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        """
        Args:
            base_path: Base for relative config paths and the fallback
                       profile directory
            clock: Resolves reference_date "today" (defaults to date.today)
        """
        self._base_path = Path(base_path) if base_path else Path(".")
        self._clock = clock or date.today

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> OnboardingConfig:
        """
        Load a config file, then merge profile and overrides on top.

        Raises:
            FileNotFoundError: If the config or profile file doesn't exist
            UnknownConfigKeyError: If any layer names an unknown key
            ValidationError: If the merged values are invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._read_layer(path)

        if profile:
            profile_path = self._find_profile(profile, path)
            profile_dict = self._read_layer(profile_path)
            logger.debug(
                f"Profile {profile} ({profile_path}) sets: {', '.join(sorted(profile_dict))}"
            )
            config_dict = merge_layers(config_dict, profile_dict)

        if overrides:
            self._check_keys(overrides, "overrides")
            config_dict = merge_layers(config_dict, overrides)

        config = self.load_from_dict(config_dict)
        logger.info(
            f"Loaded config {path.name} (profile={profile}, "
            f"reference_date={config.global_settings.reference_date})"
        )
        return config

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> OnboardingConfig:
        """Validate an already merged mapping."""
        self._check_keys(config_dict, "config")
        return OnboardingConfig.model_validate(self._pin_reference_date(config_dict))

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read_layer(self, path: Path) -> Dict[str, Any]:
        """Read one YAML layer; an empty file is an empty mapping."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
        self._check_keys(data, str(path))
        return data

    def _find_profile(self, profile: str, config_path: Path) -> Path:
        candidates = [
            config_path.parent / "profiles" / f"{profile}.yaml",
            self._base_path / "config" / "profiles" / f"{profile}.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                return candidate
        searched = ", ".join(str(c) for c in candidates)
        raise FileNotFoundError(f"Profile not found: {profile} (searched {searched})")

    def _check_keys(self, layer: Mapping[str, Any], source: str) -> None:
        unknown = unknown_keys(layer)
        if unknown:
            logger.warning(f"Rejected config {source}: unknown keys {unknown}")
            raise UnknownConfigKeyError(source, unknown)

    def _pin_reference_date(self, config_dict: Mapping[str, Any]) -> Dict[str, Any]:
        """Replace reference_date "today" with the clock's date."""
        result = dict(config_dict)
        for key in ("global", "global_settings"):
            settings = result.get(key)
            if isinstance(settings, Mapping) and settings.get("reference_date") == TODAY_KEYWORD:
                result[key] = {**settings, "reference_date": self._clock()}
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> OnboardingConfig:
    """Convenience wrapper around ConfigLoader.load()."""
    return ConfigLoader(base_path=base_path).load(config_path, profile, overrides)

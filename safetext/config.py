"""Configuration model and loaders for safetext.

Responsibilities:
- Define pass-pipeline settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SafetextConfig`: pass names, table mode, and input guard for one run.
- `ConfigLoader`: static construction helpers for `SafetextConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_name_list,
    parse_permissive_boolean,
    parse_required_boolean,
)
from .text.cleaners import unknown_pass_names


DEFAULT_PASSES: tuple[str, ...] = ("strip-undefined", "translate")


@dataclass(slots=True)
class SafetextConfig:
    """Settings for one normalization run.

    Attributes:
        passes: Pass names in application order.
        use_entities: Translate to HTML named entities instead of decimal references.
        reject_utf8: Fail when the raw input already contains UTF-8 multibyte sequences.
    """

    passes: tuple[str, ...] = DEFAULT_PASSES
    use_entities: bool = False
    reject_utf8: bool = False

    def validate(self) -> None:
        """Validate pass names before running a pipeline."""

        if not self.passes:
            raise ValueError("`passes` must name at least one pass.")
        unknown = unknown_pass_names(self.passes)
        if unknown:
            raise ValueError(f"`passes` includes unknown pass name(s): {', '.join(unknown)}.")


class ConfigLoader:
    """Factory methods for creating `SafetextConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"passes", "use_entities", "reject_utf8"})

    @staticmethod
    def from_yaml(path: Path) -> SafetextConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SafetextConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        passes = ConfigLoader._optional_pass_list(
            normalize_optional_string(env_map.get("SAFETEXT_PASSES")), "SAFETEXT_PASSES"
        )
        use_entities = ConfigLoader._optional_env_boolean(env_map, "SAFETEXT_USE_ENTITIES")
        reject_utf8 = ConfigLoader._optional_env_boolean(env_map, "SAFETEXT_REJECT_UTF8")

        config = SafetextConfig(
            passes=DEFAULT_PASSES if passes is None else passes,
            use_entities=use_entities or False,
            reject_utf8=reject_utf8 or False,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> SafetextConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        try:
            passes = ConfigLoader._optional_pass_list(payload.get("passes"), "passes")
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

        config = SafetextConfig(
            passes=DEFAULT_PASSES if passes is None else passes,
            use_entities=ConfigLoader._optional_boolean(
                payload, "use_entities", source_label, default=False
            ),
            reject_utf8=ConfigLoader._optional_boolean(
                payload, "reject_utf8", source_label, default=False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the config does not support."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_pass_list(raw: object, field_name: str) -> tuple[str, ...] | None:
        """Parse a pass list, returning `None` only when no value was given.

        Raises:
            ValueError: If a value was given but names no pass.
        """

        if raw is None:
            return None
        passes = parse_name_list(raw, field_name)
        if not passes:
            raise ValueError(f"`{field_name}` must name at least one pass.")
        return passes

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean value from environment mapping."""

        raw = normalize_optional_string(env.get(key))
        if raw is None:
            return None
        return parse_required_boolean(raw, key)

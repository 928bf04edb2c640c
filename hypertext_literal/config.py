"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .constants import DEFAULT_ATTRIBUTE_SEPARATOR, DEFAULT_MARKUP_SEPARATOR, NESTED_ATTRIBUTE_GROUPS

TABLE_NAME = "hypertext-literal"


@dataclass(frozen=True)
class HypertextConfig:
    """Configuration for rendering interpolated values.

    Attributes:
        markup_separator: Separator placed between items of a list of markup
            values interpolated in text.
        attribute_separator: Separator placed between attribute strings of a
            list of attribute providers interpolated in a start tag.
        nested_attribute_groups: Attribute keys whose mapping values expand to
            ``"<key>-<nested key>"`` attributes.

    Examples:
        HypertextConfig(markup_separator="")
    """

    markup_separator: str = DEFAULT_MARKUP_SEPARATOR
    attribute_separator: str = DEFAULT_ATTRIBUTE_SEPARATOR
    nested_attribute_groups: tuple[str, ...] = NESTED_ATTRIBUTE_GROUPS


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`attribute_separator` must be a string")
    """


def load_config(search_path: Path) -> HypertextConfig:
    """Find the rendering settings that apply to templates under `search_path`.

    The nearest directory holding a `pyproject.toml` with a
    ``[tool.hypertext-literal]`` table, or a `.hypertext-literal.toml` with a
    ``[hypertext-literal]`` (or ``[tool.hypertext-literal]``) table, decides the
    list separators and the attribute groups expanded into ``<group>-<key>``
    names. `pyproject.toml` wins over the dotfile in the same directory. Tables
    are not merged across directories: an empty table means "defaults here".
    Unreadable or malformed TOML files are ignored, as is a `pyproject.toml`
    without the table.

    Args:
        search_path: Directory holding the templates being rendered.

    Returns:
        HypertextConfig: Settings from the nearest table, with unset keys left
            at their defaults, or `HypertextConfig()` when no table exists.

    Raises:
        ConfigError: If the nearest table is not a mapping or names a setting
            other than `markup_separator`, `attribute_separator` or
            `nested_attribute_groups`.

    Examples:
        load_config(Path("templates")).nested_attribute_groups  # ("aria", "data")
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", TABLE_NAME)]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / f".{TABLE_NAME}.toml",
            table_paths=[(TABLE_NAME,), ("tool", TABLE_NAME)],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return HypertextConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> HypertextConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> HypertextConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    known = {field.name for field in fields(HypertextConfig)}
    unknown = sorted(set(raw_config) - known)
    if unknown:
        raise ConfigError(
            f"Unsupported `[{table_display}]` settings in {config_file}: {', '.join(unknown)}"
        )

    return HypertextConfig(**raw_config)


def normalize_config(config: HypertextConfig) -> HypertextConfig:
    """Coerce list-valued settings read from TOML into tuples."""
    groups = config.nested_attribute_groups
    if isinstance(groups, list):
        return replace(config, nested_attribute_groups=tuple(groups))
    return config


def validate_config(config: HypertextConfig) -> None:
    """Validate a `HypertextConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a separator is not a string, or the nested attribute
            groups are not non-empty strings.

    Examples:
        validate_config(HypertextConfig(attribute_separator=" "))
    """
    config = normalize_config(config)

    for name in ("markup_separator", "attribute_separator"):
        if not isinstance(getattr(config, name), str):
            raise ConfigError(f"`{name}` must be a string")

    groups = config.nested_attribute_groups
    if not isinstance(groups, tuple):
        raise ConfigError("`nested_attribute_groups` must be a list of strings")
    for group in groups:
        if not isinstance(group, str) or not group:
            raise ConfigError("`nested_attribute_groups` entries must be non-empty strings")


def apply_overrides(config: HypertextConfig, **overrides: object) -> HypertextConfig:
    """Apply override values to a `HypertextConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set
            to None are ignored.

    Returns:
        HypertextConfig: New configuration with the overrides applied, or the
            original configuration when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `HypertextConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> HypertextConfig:
    """Load, override, and validate configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), markup_separator="")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config

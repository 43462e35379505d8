"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

A field ``retries`` on a class with ``_prefix = "TYPHOON_RETRY"`` is read
from ``TYPHOON_RETRY_RETRIES``.  Unset fields keep their dataclass default.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from typhoon.config.settings.base import Settings
from typhoon.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """Environment variable name for *field_name* on *settings_class*."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


def coerce(raw: str, type_hint: Any) -> Any:
    """Convert the raw string *raw* to *type_hint*.

    Raises:
        ValueError: *raw* is not a valid literal for numeric hints.
    """
    if type_hint is bool:
        return raw.strip().lower() in _TRUTHY
    if type_hint in (int, float):
        return type_hint(raw)
    if typing.get_origin(type_hint) is list:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class SettingsLoader(abc.ABC):
    """Port: build a validated settings instance from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from environment variables.

    Args:
        environ: Mapping to read from instead of ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is None:
                if not _has_default(field):
                    raise MissingRequiredSettingError(key)
                continue
            try:
                values[field.name] = coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the process environment, then read it.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'typhoon-retry[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "coerce", "env_key"]

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from servicebox.scopes import Scope


class ServiceBoxSettings(BaseSettings):
    """Container defaults read from ``SERVICEBOX_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="SERVICEBOX_", frozen=True)

    default_scope: Scope = Scope.SINGLETON
    """Scope given to factories that never declared one."""

    detect_cycles: bool = True
    """Fail fast with ``CyclicDependencyError`` on indirect cycles."""

    validate_arity: bool = True
    """Check routine signatures against resolved dependency counts."""

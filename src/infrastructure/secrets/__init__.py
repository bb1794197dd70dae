"""Secrets adapters."""

from src.infrastructure.secrets.env_adapter import EnvAdapter

__all__ = ["EnvAdapter"]

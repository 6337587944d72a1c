"""DTO validation package for the memory repository."""

from .repository_config import RepositoryConfig, build_repository_config

__all__ = [
    "RepositoryConfig",
    "build_repository_config",
]

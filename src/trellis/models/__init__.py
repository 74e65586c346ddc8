"""Trellis data models - re-exports all public model classes."""

from trellis.models.config import FlagSource, ProjectConfig, TrellisSettings
from trellis.models.manifest import Manifest

__all__ = [
    "FlagSource",
    "Manifest",
    "ProjectConfig",
    "TrellisSettings",
]

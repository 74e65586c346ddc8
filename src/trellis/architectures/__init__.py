"""Backend architecture generators and the registry that resolves them."""

from trellis.architectures.base import ArchitectureInfo, BaseArchitecture
from trellis.architectures.registry import ArchitectureRegistry, default_registry

__all__ = [
    "ArchitectureInfo",
    "ArchitectureRegistry",
    "BaseArchitecture",
    "default_registry",
]

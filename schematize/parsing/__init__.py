"""Instance document parsing."""

from .instance_loader import InstanceLoader, SourceMap, instance_loader

__all__ = ["InstanceLoader", "SourceMap", "instance_loader"]

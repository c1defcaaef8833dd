"""Infrastructure adapter exports."""

from .resources import PackageResourceDir

__all__ = ["PackageResourceDir"]

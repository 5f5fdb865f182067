"""Augmentation layer: report existing awaitables, streams and functions."""

from .decorators import tracked
from .tracking import track_future, track_stream

__all__ = ["track_future", "track_stream", "tracked"]

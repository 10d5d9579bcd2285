"""Snapshot replay and rendering."""

from .snapshot_renderer import SnapshotRenderer

__all__ = ["SnapshotRenderer"]

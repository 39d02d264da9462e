from __future__ import annotations

from .trees import RecordingListener, full_tree, generate_tree, left_deep_tree

__all__ = ["RecordingListener", "full_tree", "generate_tree", "left_deep_tree"]

"""JSON-friendly boundary for a UI or server.

Only plain dicts, lists, strings and numbers cross this layer:
- state snapshots
- move encode/decode
"""

from .serde import move_to_dict, dict_to_move, snapshot

__all__ = ["move_to_dict", "dict_to_move", "snapshot"]

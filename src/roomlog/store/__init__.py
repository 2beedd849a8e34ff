"""Storage layer.

This package owns the globally sorted entry store, the per-room indexes
into it, and the room registry. Only :class:`roomlog.manager.RoomLog` is
expected to drive insertions through it.
"""

"""Persistence for generated boards."""

from .board_store import BoardStore, default_store_path

__all__ = ["BoardStore", "default_store_path"]

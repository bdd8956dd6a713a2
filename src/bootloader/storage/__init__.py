"""Persistence helpers for environment state."""

from bootloader.storage.state import get_state_path, load_state, save_state

__all__ = ["get_state_path", "load_state", "save_state"]

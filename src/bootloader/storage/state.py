"""State file helpers."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from bootloader.lib.errors import StateError
from bootloader.models.state import State

STATE_FILE_NAME = "bbl-state.json"


def get_state_path(state_dir: Path) -> Path:
    """Return the state file path inside a state directory."""
    return state_dir / STATE_FILE_NAME


def load_state(state_dir: Path) -> State:
    """Load the environment state from a state directory.

    A missing or empty state file yields an empty ``State``.
    """
    state_path = get_state_path(state_dir)
    if not state_path.exists():
        return State()

    try:
        content = state_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StateError(
            path=str(state_path),
            message=f"Failed to read state at {state_path}: {exc}",
        ) from exc

    if not content.strip():
        return State()

    try:
        return State.model_validate_json(content)
    except ValidationError as exc:
        raise StateError(
            path=str(state_path),
            message=f"Invalid state format in {state_path}: {exc}",
        ) from exc


def save_state(state_dir: Path, state: State) -> None:
    """Persist the environment state to a state directory."""
    state_path = get_state_path(state_dir)
    try:
        state_path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(
            state.model_dump(mode="json", by_alias=True), indent=2, sort_keys=True
        )
        state_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise StateError(
            path=str(state_path),
            message=f"Failed to write state to {state_path}: {exc}",
        ) from exc

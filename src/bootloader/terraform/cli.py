"""Terraform output reader backed by the terraform binary."""

from __future__ import annotations

import json
import shutil
import subprocess  # nosec B404
import tempfile
from pathlib import Path
from typing import Any

from bootloader.lib.errors import TerraformError
from bootloader.lib.logging_config import get_logger
from bootloader.terraform.output_provider import TerraformManager

logger = get_logger(__name__)

STATE_FILE_NAME = "terraform.tfstate"


class TerraformCLI(TerraformManager):
    """Read outputs by running ``terraform output -json`` against a state."""

    def __init__(self, binary: str = "terraform") -> None:
        """Initialize the reader.

        Args:
            binary: Name or path of the terraform executable
        """
        self._binary = binary

    def get_outputs(self, tf_state: str) -> dict[str, Any]:
        """Return the outputs recorded in a terraform state."""
        if not tf_state:
            raise TerraformError("terraform state is empty")

        work_dir = Path(tempfile.mkdtemp(prefix="bbl-terraform-"))
        try:
            state_path = work_dir / STATE_FILE_NAME
            state_path.write_text(tf_state, encoding="utf-8")

            logger.debug("Running %s output -json", self._binary)
            try:
                result = subprocess.run(  # noqa: S603  # nosec B603
                    [self._binary, "output", "-json", f"-state={state_path}"],
                    capture_output=True,
                    text=True,
                    cwd=work_dir,
                )
            except OSError as exc:
                raise TerraformError(
                    f"failed to run {self._binary}: {exc}"
                ) from exc
        finally:
            shutil.rmtree(work_dir, ignore_errors=True)

        if result.returncode != 0:
            raise TerraformError(
                f"terraform output failed: {result.stderr.strip() or result.stdout}"
            )

        return _parse_outputs(result.stdout)


def _parse_outputs(stdout: str) -> dict[str, Any]:
    """Flatten ``terraform output -json`` into name -> value."""
    try:
        payload = json.loads(stdout or "{}")
    except json.JSONDecodeError as exc:
        raise TerraformError(f"invalid terraform output: {exc}") from exc

    if not isinstance(payload, dict):
        raise TerraformError("invalid terraform output: expected a JSON object")

    outputs: dict[str, Any] = {}
    for name, entry in payload.items():
        if isinstance(entry, dict) and "value" in entry:
            outputs[name] = entry["value"]
        else:
            outputs[name] = entry
    return outputs

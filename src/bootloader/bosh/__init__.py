"""Director lifecycle management.

This package turns a persisted environment state into director inputs,
drives the executor, and folds the results back into the state.
"""

from bootloader.bosh.executor import BOSHExecutor
from bootloader.bosh.inputs import build_interpolate_input
from bootloader.bosh.manager import Manager

__all__ = ["BOSHExecutor", "Manager", "build_interpolate_input"]

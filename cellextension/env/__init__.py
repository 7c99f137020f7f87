"""Gymnasium environment for Cell Extension."""

from .cell_env import CellExtensionEnv

__all__ = ['CellExtensionEnv']

"""Utility functions for Cell Extension."""

from .validation import (
    print_validation_errors,
    validate_evaluation_config,
    validate_settings,
)

__all__ = ['print_validation_errors', 'validate_evaluation_config', 'validate_settings']

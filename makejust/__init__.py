"""Extract build templates from a template folder and run their install script."""

__version__ = "0.0.12"
__all__ = ["arith", "embed", "cli"]
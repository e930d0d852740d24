"""Stagewise — working directory change status with partial selection."""

__version__ = "0.1.0"

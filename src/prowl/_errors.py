"""Prowl error hierarchy.

All prowl-specific errors inherit from ProwlError for easy catching.
"""


class ProwlError(Exception):
    """Base error for all prowl operations."""


class ConfigError(ProwlError):
    """Invalid or missing configuration (e.g. a routes folder that does not exist)."""


class RouteModuleError(ProwlError):
    """A route module could not be imported."""

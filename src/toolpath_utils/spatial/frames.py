"""Define constants relating to named coordinate frames."""

DEFAULT_FRAME = "map"
"""Reference frame assumed for poses that don't specify one."""

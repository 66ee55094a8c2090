"""Shared configuration for the test suite."""

from hypothesis import settings

# NumPy and trimesh imports can make the first example of a test slow
settings.register_profile("toolpath_utils", deadline=None)
settings.load_profile("toolpath_utils")

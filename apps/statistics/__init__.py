"""Statistics app package.

Serves the cached count of currently bookable units.
"""

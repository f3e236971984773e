"""
Core utilities shared across the users API.

This package hosts configuration helpers (env vars, backend selection)
and logging setup. Routers, services and adapters read settings from here
instead of touching os.environ directly.
"""

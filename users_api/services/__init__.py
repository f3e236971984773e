"""
Use cases for the users API.

Routers call these services instead of touching a store directly, so the
backend can be swapped without changing the HTTP layer.
"""

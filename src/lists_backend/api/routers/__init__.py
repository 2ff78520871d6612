"""
lists_backend.api.routers

HTTP routers (health, auth, users, lists).
"""

# Package marker.

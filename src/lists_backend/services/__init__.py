"""
lists_backend.services

Service-layer package.

Responsibilities:
- Apply domain rules (password confirmation, user-name uniqueness, list
  ownership) on top of the generic repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are plain Python and testable against a real sqlite-backed repository.

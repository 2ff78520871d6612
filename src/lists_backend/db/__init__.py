"""
lists_backend.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the documents table, engine/session setup, the document store and
  the generic repository on top of it.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services only see `Repository`; the SQL layout behind it can change freely.

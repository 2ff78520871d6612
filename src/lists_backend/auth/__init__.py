"""
lists_backend.auth

Authentication/authorization package.

Responsibilities:
- Password hashing and verification (bcrypt).
- JWT encoding/decoding and the access/refresh token lifecycle.
- Typed claims and the token pair model.
"""

# Package marker.

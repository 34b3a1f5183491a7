"""
Identifier and credential generation.

MusicLister has no passwords and no sessions: registering a user
yields a ``secretCode`` that the client presents as the ``secretCode``
query parameter on every later request.  Possession of the code is the
whole authentication scheme.  Codes and entity IDs come from the same
generator, random UUID4 strings, whose format is not part of the API
contract.
"""

import uuid


def generate_unique_id() -> str:
    """Return a fresh, collision‑resistant opaque identifier."""
    return str(uuid.uuid4())


def generate_secret_code() -> str:
    """Return a fresh bearer credential for a newly registered user."""
    return generate_unique_id()

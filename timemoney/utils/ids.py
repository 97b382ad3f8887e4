"""Identifier generation."""
import uuid


def generate_id() -> str:
    """Return a fresh unique id for participants, labels and activities."""
    return uuid.uuid4().hex

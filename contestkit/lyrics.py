"""Recover a song from its dubstep remix."""


def restore_song(remix: str) -> str:
    """Replace every ``WUB`` in the remix with a single space."""
    return remix.replace("WUB", " ")
"""Feature modules of the Wordstack app."""

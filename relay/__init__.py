"""Pod file relay: a generator appending records to a shared log and an echo server serving it."""

__version__ = "1.0.0"

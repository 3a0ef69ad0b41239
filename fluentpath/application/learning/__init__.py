"""Learning application layer."""

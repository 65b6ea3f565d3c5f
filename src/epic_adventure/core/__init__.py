"""Shared building blocks: event bus and randomness source."""

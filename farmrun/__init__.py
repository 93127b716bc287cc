"""A tile-based puzzle game about a farmer collecting carrots for a pig, with its map rules and small text helpers."""

__version__ = "0.1.0"
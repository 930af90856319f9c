"""Character, string, byte-buffer, linked-list, line-reading and token-chain helpers."""

__version__ = "0.1.0"
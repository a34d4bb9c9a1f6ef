"""Core primitives shared by every typlate layer."""

"""Core utilities shared across the moshpf launcher."""

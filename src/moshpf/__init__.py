"""moshpf launcher.

Downloads the pinned, platform-specific ``mpf`` release binary on first use
and runs it with the caller's arguments and standard streams.
"""

__version__ = "0.1.0"

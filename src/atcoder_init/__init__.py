"""Bootstrap a Cargo project with sample tests for an AtCoder contest."""

__version__ = "0.1.0"

"""Wallet balance normalization toolkit."""

__version__ = "0.1.0"

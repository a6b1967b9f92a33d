"""
settings-store - typed document repositories over MongoDB with optimistic
concurrency, plus local email/password authentication.
"""

__version__ = "0.1.0"

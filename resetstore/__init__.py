# resetstore/__init__.py

"""
Persistence layer for selector/verifier password reset tokens.
"""

__version__ = "0.1.0"

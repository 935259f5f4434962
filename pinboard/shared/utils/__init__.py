"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from pinboard.shared.utils.security import SecurityUtils
"""

from pinboard.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]

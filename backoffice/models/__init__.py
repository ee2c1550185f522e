"""
Models Package

Exports all models for easy importing.
"""

from backoffice.models.admin import Admin
from backoffice.models.user import User

__all__ = ['Admin', 'User']

"""
同步原语
"""

from .rwlock import ReadWriteLock

__all__ = ['ReadWriteLock']

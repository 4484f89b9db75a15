"""
Transient feedback package (never hit-tested).
"""

from .floating_text import FloatingText
from .bullet_trace import BulletTrace

__all__ = [
    'FloatingText',
    'BulletTrace',
]

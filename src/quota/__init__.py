"""
配额模块
"""

from .usage_limiter import UsageLimiter, API_LIMITS

__all__ = [
    'UsageLimiter',
    'API_LIMITS'
]

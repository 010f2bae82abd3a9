"""Analysis functionality"""

from .analyzer import MetricsCalculator

__all__ = ['MetricsCalculator']

"""
Shared test harness.
"""

from shared.tests.test_base import LaborantTest

__all__ = ["LaborantTest"]

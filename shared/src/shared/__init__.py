"""
Shared utilities for Notaire components (test harness and reporter).
"""

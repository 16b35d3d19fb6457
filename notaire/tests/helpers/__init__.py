"""
Test helpers: keys, transaction builders, in-memory fakes.
"""

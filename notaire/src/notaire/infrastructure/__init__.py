"""
Infrastructure layer.
"""

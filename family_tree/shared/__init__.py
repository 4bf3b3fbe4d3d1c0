"""
Shared utilities for the family tree API
"""

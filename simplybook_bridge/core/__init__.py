"""
Core models and exceptions for the SimplyBook bridge.
"""

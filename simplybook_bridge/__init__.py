"""
SimplyBook bridge: booking widget backend for the SimplyBook JSON-RPC API.
"""

__version__ = "1.0.0"

"""
Batch process scheduler: reorders a fixed set of processes by priority,
shortest job first, or first come first served.
"""

__version__ = "1.0.0"

"""
neveridle - keeps a session from going idle by sending synthetic input.
"""

__version__ = "1.0.0"

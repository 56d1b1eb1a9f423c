"""
Grammar quiz grader service.
"""

__version__ = "1.0.0"

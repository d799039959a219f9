"""
pdf-actions: Adobe PDF Services exposed as callable document actions.
"""

__version__ = "1.0.0"

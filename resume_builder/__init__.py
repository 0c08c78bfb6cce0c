"""
Resume builder core: data model, ATS scoring and AI-backed content features
"""

__version__ = "1.0.0"

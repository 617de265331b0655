"""
Utility helpers for the Flask application.
"""

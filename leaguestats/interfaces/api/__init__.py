"""
HTTP API interface.
"""

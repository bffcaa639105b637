"""
Interfaces package: command line and HTTP presentation layers.
"""

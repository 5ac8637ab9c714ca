"""
CTF Event Engine

Loads a CTF event definition from YAML and scores its challenges.
"""

__version__ = "1.0.0"

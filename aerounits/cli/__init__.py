"""
Command-line interface for aerounits.
"""

"""
HTTP API for aerounits.
"""

"""Presentation helpers for dates, images and weights.

Each module is a leaf: nothing here imports another utility module. UI and
API code call these directly to turn domain values into display strings or
request payloads.
"""

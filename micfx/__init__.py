"""MicFx starter web application package.

Ensures the local ``micfx`` package is resolved as a regular package rather
than a namespace package.
"""

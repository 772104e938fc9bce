"""
Configuration loading and validation for the roster rotator.

Provides strongly typed settings objects for the roster path, the external
runner command and the rotation mode, with upfront validation.
"""

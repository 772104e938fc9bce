"""
Generic utility functions shared across modules.

Currently holds the clock abstraction used to date-stamp roster backups.
"""

"""
Roster file management: path derivation, rotation, the external runner, and
read-only status reporting.

The active roster CSV is maintained by an external program. This package
forwards the roster to that program and then moves the program's `.out`
result into place, optionally keeping a dated backup of the previous roster.
"""

"""
Support layer for shared board utilities.

Provides configuration loading and logging setup used by the CLI.
"""

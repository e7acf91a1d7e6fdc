"""
general.
=======

Shared general-purpose modules used across the extraction pipeline:
manual token import, config loading and debug logging.
"""

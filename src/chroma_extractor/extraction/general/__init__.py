"""
general.
=======

Shared general-purpose modules (config, settings, debug logging) used across
the extraction layer.
"""

"""Domain layer for daytodo.

Pure models and rules for day files. Nothing in this package touches the
filesystem or the terminal.
"""

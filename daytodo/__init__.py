"""daytodo - a plain-text daily todo tracker with subtasks."""

__version__ = "0.1.0"

"""
Shared palettekit utilities: structured logging and in-process metrics.
"""

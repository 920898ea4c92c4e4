"""palettekit services."""

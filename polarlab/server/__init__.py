"""Reference Polar Conversion Service."""

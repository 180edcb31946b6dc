"""Core codec: alphabets, radix conversion, UUID formatting."""

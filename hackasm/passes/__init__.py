"""Two passes of assembly: label scanning and encoding."""

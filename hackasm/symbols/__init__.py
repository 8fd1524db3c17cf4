"""Symbol table of an assembly run (predefined symbols, labels and variables)."""

"""Command-line arguments parsing into `CLIArguments`."""

from .error_handler import cli_hackasm_error_handler

__all__ = ["cli_hackasm_error_handler"]

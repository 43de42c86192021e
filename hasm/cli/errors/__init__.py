from .error_handler import cli_hasm_error_handler

__all__ = ["cli_hasm_error_handler"]

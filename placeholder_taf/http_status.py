"""Expected-status constants for endpoint assertions.

Endpoints accept an HttpStatus member or a plain int.
"""
from http import HTTPStatus as HttpStatus

__all__ = ["HttpStatus"]

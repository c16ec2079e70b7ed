from .base import WebEndpoint
from .comments import CommentEndpoint
from .users import UserEndpoint

__all__ = ["WebEndpoint", "CommentEndpoint", "UserEndpoint"]

import logging
from typing import List

from ..client import ValidatableResponse
from ..http_status import HttpStatus
from ..models import CommentDto
from .base import WebEndpoint

logger = logging.getLogger("placeholder-taf.comments")

COMMENTS_END = "/comments"
COMMENTS_RESOURCE_END = "/comments/{comment_id}"


class CommentEndpoint(WebEndpoint):
    """
    Comment resource wrapper.
    Typed methods assert the default success status and return DTOs;
    *_response variants take the expected status and return the raw ValidatableResponse.
    """

    def create(self, comment: CommentDto) -> CommentDto:
        return self.create_response(comment, HttpStatus.CREATED).extract_as(CommentDto)

    def create_response(self, comment: CommentDto, status: int) -> ValidatableResponse:
        logger.info("Create new Comment")
        return self._post(COMMENTS_END, comment).status_code(status)

    def update(self, comment_id: int, comment: CommentDto) -> CommentDto:
        return self.update_response(comment, comment_id, HttpStatus.OK).extract_as(CommentDto)

    def update_response(self, comment: CommentDto, comment_id: int, status: int) -> ValidatableResponse:
        logger.info(f"Update Comment by id [{comment_id}]")
        return self._put(COMMENTS_RESOURCE_END, comment, comment_id=comment_id).status_code(status)

    def get_by_id(self, comment_id: int) -> CommentDto:
        return self.get_by_id_response(comment_id, HttpStatus.OK).extract_as(CommentDto)

    def get_by_id_response(self, comment_id: int, status: int) -> ValidatableResponse:
        logger.info(f"Get Comment by id [{comment_id}]")
        return self._get(COMMENTS_RESOURCE_END, comment_id=comment_id).status_code(status)

    def get_all(self) -> List[CommentDto]:
        return self.get_all_response(HttpStatus.OK).extract_as_list(CommentDto)

    def get_all_response(self, status: int) -> ValidatableResponse:
        logger.info("Get all Comments")
        return self._get(COMMENTS_END).status_code(status)

    def delete(self, comment_id: int) -> None:
        self.delete_response(comment_id, HttpStatus.OK)

    def delete_response(self, comment_id: int, status: int) -> ValidatableResponse:
        logger.info(f"Delete Comment by id [{comment_id}]")
        return self._delete(COMMENTS_RESOURCE_END, comment_id=comment_id).status_code(status)

import logging
from typing import List, Union

from ..client import ValidatableResponse
from ..http_status import HttpStatus
from ..models import UserDto
from .base import WebEndpoint

logger = logging.getLogger("placeholder-taf.users")

USERS_END = "/users"
USERS_RESOURCE_END = "/users/{user_id}"


class UserEndpoint(WebEndpoint):
    """User resource wrapper. Lookup by id takes a string or an int."""

    def create(self, user: UserDto) -> UserDto:
        return self.create_response(user, HttpStatus.CREATED).extract_as(UserDto)

    def create_response(self, user: UserDto, status: int) -> ValidatableResponse:
        logger.info("Create new User")
        return self._post(USERS_END, user).status_code(status)

    def update(self, user_id: int, user: UserDto) -> UserDto:
        return self.update_response(user, user_id, HttpStatus.OK).extract_as(UserDto)

    def update_response(self, user: UserDto, user_id: int, status: int) -> ValidatableResponse:
        logger.info(f"Update User by id [{user_id}]")
        return self._put(USERS_RESOURCE_END, user, user_id=user_id).status_code(status)

    def get_by_id(self, user_id: Union[str, int]) -> UserDto:
        return self.get_by_id_response(user_id, HttpStatus.OK).extract_as(UserDto)

    def get_by_id_response(self, user_id: Union[str, int], status: int) -> ValidatableResponse:
        logger.info(f"Get User by id [{user_id}]")
        return self._get(USERS_RESOURCE_END, user_id=user_id).status_code(status)

    def get_all(self) -> List[UserDto]:
        return self.get_all_response(HttpStatus.OK).extract_as_list(UserDto)

    def get_all_response(self, status: int) -> ValidatableResponse:
        logger.info("Get all Users")
        return self._get(USERS_END).status_code(status)

    def delete(self, user_id: int) -> None:
        self.delete_response(user_id, HttpStatus.OK)

    def delete_response(self, user_id: int, status: int) -> ValidatableResponse:
        logger.info(f"Delete User by id [{user_id}]")
        return self._delete(USERS_RESOURCE_END, user_id=user_id).status_code(status)

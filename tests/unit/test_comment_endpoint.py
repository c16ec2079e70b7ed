import logging

import pytest

from placeholder_taf import CommentEndpoint, HttpStatus, UnexpectedStatusError
from placeholder_taf.models import CommentDto
from tests.utils.payloads import COMMENT_PAYLOAD


@pytest.fixture
def endpoint(stub_spec):
    return CommentEndpoint(stub_spec)


def test_create_returns_created_comment(backend, endpoint):
    backend.reply(201, {**COMMENT_PAYLOAD, "id": 501})
    new = CommentDto(post_id=1, name="n", email="e@x.io", body="b")

    created = endpoint.create(new)

    args, kwargs = backend.last_call
    assert args == ("POST", "https://placeholder.test/comments")
    assert kwargs["json"] == {"postId": 1, "name": "n", "email": "e@x.io", "body": "b"}
    assert created.id == 501


def test_create_fails_on_unexpected_status(backend, endpoint):
    backend.reply(200, COMMENT_PAYLOAD)

    with pytest.raises(UnexpectedStatusError) as exc:
        endpoint.create(CommentDto(name="n"))
    assert exc.value.expected == 201
    assert exc.value.actual == 200


def test_create_response_with_custom_status(backend, endpoint):
    backend.reply(400, {"error": "bad"})

    resp = endpoint.create_response(CommentDto(), HttpStatus.BAD_REQUEST)

    assert resp.json() == {"error": "bad"}


def test_update(backend, endpoint):
    backend.reply(200, {**COMMENT_PAYLOAD, "body": "edited"})

    updated = endpoint.update(1, CommentDto(**{**COMMENT_PAYLOAD, "body": "edited"}))

    args, kwargs = backend.last_call
    assert args == ("PUT", "https://placeholder.test/comments/1")
    assert kwargs["json"]["body"] == "edited"
    assert updated.body == "edited"


def test_update_response_argument_order(backend, endpoint):
    backend.reply(404, {})

    endpoint.update_response(CommentDto(name="x"), 9999, 404)

    args, _ = backend.last_call
    assert args[1] == "https://placeholder.test/comments/9999"


def test_get_by_id(backend, endpoint):
    backend.reply(200, COMMENT_PAYLOAD)

    comment = endpoint.get_by_id(1)

    args, kwargs = backend.last_call
    assert args == ("GET", "https://placeholder.test/comments/1")
    assert kwargs["json"] is None
    assert comment == CommentDto.model_validate(COMMENT_PAYLOAD)


def test_get_by_id_not_found(backend, endpoint):
    backend.reply(404, {})

    with pytest.raises(AssertionError):
        endpoint.get_by_id(0)

    backend.reply(404, {})
    assert endpoint.get_by_id_response(0, HttpStatus.NOT_FOUND).status == 404


def test_get_all(backend, endpoint):
    backend.reply(200, [COMMENT_PAYLOAD, {**COMMENT_PAYLOAD, "id": 2}])

    comments = endpoint.get_all()

    args, _ = backend.last_call
    assert args == ("GET", "https://placeholder.test/comments")
    assert [c.id for c in comments] == [1, 2]
    assert all(isinstance(c, CommentDto) for c in comments)


def test_get_all_empty(backend, endpoint):
    backend.reply(200, [])
    assert endpoint.get_all() == []


def test_delete(backend, endpoint):
    backend.reply(200, {})

    assert endpoint.delete(3) is None

    args, _ = backend.last_call
    assert args == ("DELETE", "https://placeholder.test/comments/3")


def test_actions_are_logged(backend, endpoint, caplog):
    backend.reply(200, COMMENT_PAYLOAD).reply(200, [])

    with caplog.at_level(logging.INFO, logger="placeholder-taf.comments"):
        endpoint.update(5, CommentDto())
        endpoint.get_all()

    assert "Update Comment by id [5]" in caplog.messages
    assert "Get all Comments" in caplog.messages


def test_plain_dict_body_sent_unchanged(backend, endpoint):
    backend.reply(201, {"id": 501})

    endpoint._post("/comments", {"postId": 2, "extra": None})

    _, kwargs = backend.last_call
    assert kwargs["json"] == {"postId": 2, "extra": None}

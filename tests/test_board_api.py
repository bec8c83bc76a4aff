"""Board API client — tests for request shapes and failure classification.

Tests cover:
    - Each operation hits its endpoint with the documented method and body
    - Success bodies parse into typed payloads
    - TransportFailure on requests exceptions
    - MalformedResponse on non-JSON / non-object / missing fields (status and
      raw body kept)
    - ApplicationError on status "error" or non-2xx, code kept verbatim,
      unknown codes recognized as UNRECOGNIZED
    - ConfigurationMissing without any network call
    - Lists are returned in server order
    - Naive and offset-aware timestamps parse to comparable UTC values
    - Operator log records carry status and raw body, never the password
"""

import logging
from datetime import datetime

import requests

from core.errors import ErrorCode, ErrorKind
from core.models import IdentityDetails, IdentityGrant, Thread
from services.board_api import BoardClient

THREAD = {
    "id": 1,
    "random_user_id": "U1",
    "title": "Hello",
    "created_at": "2024-05-01 10:00:00",
    "post_count": 3,
}


def _post(post_id, created_at):
    return {
        "id": post_id,
        "random_user_id": "U2",
        "content": f"post {post_id}",
        "created_at": created_at,
    }


# --------------------------------------------------------------- requests --


def test_register_posts_credentials(http, response):
    client, fake = http(
        response({"status": "success", "message": "ok", "randomUserId": "U1", "id": 7})
    )

    result = client.register("a@b.co", "secret1")

    assert result.ok
    assert result.payload == IdentityGrant(identity="U1", message="ok", account_number=7)
    call = fake.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://board.test/api/register_user.php"
    assert call["json"] == {"email": "a@b.co", "password": "secret1"}
    assert call["timeout"] == 5.0


def test_login_posts_credentials(http, response):
    client, fake = http(response({"status": "success", "message": "hi", "randomUserId": "U9"}))

    result = client.login("a@b.co", "pw")

    assert result.payload.identity == "U9"
    assert result.payload.account_number is None
    assert fake.calls[0]["url"].endswith("/login.php")


def test_list_threads_parses_and_keeps_server_order(http, response):
    second = dict(THREAD, id=2, created_at="2024-06-01 10:00:00", post_count=None)
    client, fake = http(response({"status": "success", "threads": [THREAD, second]}))

    result = client.list_threads()

    assert [t.id for t in result.payload] == [1, 2]
    assert result.payload[0] == Thread(
        id=1,
        author_identity="U1",
        title="Hello",
        created_at=datetime(2024, 5, 1, 10, 0, 0),
        reply_count=3,
    )
    assert result.payload[1].reply_count is None
    assert fake.calls[0]["method"] == "GET"
    assert fake.calls[0]["json"] is None


def test_create_thread_sends_identity_in_body(http, response):
    client, fake = http(response({"status": "success", "message": "created", "threadId": 42}))

    result = client.create_thread("U1", "Title")

    assert result.payload.created_id == 42
    assert result.payload.message == "created"
    assert fake.calls[0]["json"] == {"randomUserId": "U1", "title": "Title"}


def test_list_thread_posts_sends_thread_id_query(http, response):
    body = {
        "status": "success",
        "thread": {"id": 5, "title": "Topic"},
        "posts": [_post(1, "2024-05-01 10:00:00"), _post(2, "2024-05-02 10:00:00")],
    }
    client, fake = http(response(body))

    result = client.list_thread_posts(5)

    assert fake.calls[0]["params"] == {"thread_id": 5}
    assert fake.calls[0]["url"].endswith("/get_thread_posts.php")
    assert result.payload.thread.title == "Topic"
    assert [p.id for p in result.payload.posts] == [1, 2]


def test_list_thread_posts_without_thread_header(http, response):
    client, _ = http(response({"status": "success", "posts": []}))
    result = client.list_thread_posts(5)
    assert result.payload.thread is None
    assert result.payload.posts == ()


def test_create_post_sends_identity_thread_and_content(http, response):
    client, fake = http(response({"status": "success", "message": "posted"}))

    result = client.create_post("U1", 5, "hello")

    assert result.payload.message == "posted"
    assert fake.calls[0]["json"] == {"randomUserId": "U1", "threadId": 5, "content": "hello"}


def test_lookup_identity_details_uses_query_parameter(http, response):
    client, fake = http(
        response(
            {"status": "success", "email": "a@b.co", "registeredAt": "2024-01-02 03:04:05"}
        )
    )

    result = client.lookup_identity_details("U1")

    assert fake.calls[0]["params"] == {"random_user_id": "U1"}
    assert result.payload == IdentityDetails(
        email="a@b.co", registered_at=datetime(2024, 1, 2, 3, 4, 5)
    )


def test_base_url_trailing_slash_is_ignored(http_session, response):
    fake = http_session(response({"status": "success", "threads": []}))
    client = BoardClient("http://board.test/api/", session=fake)

    client.list_threads()

    assert fake.calls[0]["url"] == "http://board.test/api/get_threads.php"


# ------------------------------------------------------------ failures --


def test_transport_failure(http, transport_error):
    client, _ = http(transport_error)

    result = client.list_threads()

    assert not result.ok
    assert result.error.kind is ErrorKind.TRANSPORT_FAILURE
    assert "connection refused" in result.error.message


def test_timeout_is_transport_failure(http):
    client, _ = http(requests.Timeout("read timed out"))
    assert client.list_threads().error.kind is ErrorKind.TRANSPORT_FAILURE


def test_non_json_body_is_malformed(http, response):
    client, _ = http(response("<html>Fatal error</html>", status_code=500))

    result = client.list_threads()

    assert result.error.kind is ErrorKind.MALFORMED_RESPONSE
    assert result.error.status == 500
    assert result.error.raw_body == "<html>Fatal error</html>"


def test_json_array_body_is_malformed(http, response):
    client, _ = http(response("[1, 2]"))
    assert client.list_threads().error.kind is ErrorKind.MALFORMED_RESPONSE


def test_success_without_required_field_is_malformed(http, response):
    client, _ = http(response({"status": "success", "message": "ok"}))

    result = client.register("a@b.co", "secret1")

    assert result.error.kind is ErrorKind.MALFORMED_RESPONSE
    assert "randomUserId" in result.error.message
    assert result.error.status == 200


def test_thread_with_bad_timestamp_is_malformed(http, response):
    client, _ = http(
        response({"status": "success", "threads": [dict(THREAD, created_at="yesterday")]})
    )
    assert client.list_threads().error.kind is ErrorKind.MALFORMED_RESPONSE


def test_error_status_is_application_error_with_verbatim_code(http, response):
    body = {
        "status": "error",
        "error_code": "EMAIL_ALREADY_EXISTS",
        "message": "Email already exists",
    }
    client, _ = http(response(body, status_code=409))

    result = client.register("a@b.co", "secret1")

    assert result.error.kind is ErrorKind.APPLICATION_ERROR
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    assert result.error.recognized_code is ErrorCode.EMAIL_ALREADY_EXISTS
    assert result.error.message == "Email already exists"
    assert result.error.status == 409


def test_error_status_with_http_200_is_still_application_error(http, response):
    client, _ = http(response({"status": "error", "error_code": "DB_ERROR", "message": "x"}))
    result = client.list_threads()
    assert result.error.kind is ErrorKind.APPLICATION_ERROR
    assert result.error.recognized_code is ErrorCode.DB_ERROR


def test_non_2xx_with_success_status_is_application_error(http, response):
    client, _ = http(response({"status": "success", "threads": []}, status_code=500))
    assert client.list_threads().error.kind is ErrorKind.APPLICATION_ERROR


def test_unknown_code_is_kept_but_recognized_as_unrecognized(http, response):
    client, _ = http(response({"status": "error", "error_code": "RATE_LIMITED"}))

    error = client.list_threads().error

    assert error.code == "RATE_LIMITED"
    assert error.recognized_code is ErrorCode.UNRECOGNIZED


def test_missing_code_is_unrecognized(http, response):
    client, _ = http(response({"status": "error", "message": "nope"}))
    error = client.create_post("U1", 1, "x").error
    assert error.code is None
    assert error.recognized_code is ErrorCode.UNRECOGNIZED


def test_unconfigured_client_makes_no_network_call(http_session, response):
    fake = http_session(response({"status": "success", "threads": []}))
    client = BoardClient(None, session=fake)

    result = client.list_threads()

    assert not client.configured
    assert result.error.kind is ErrorKind.CONFIGURATION_MISSING
    assert fake.calls == []


def test_mixed_timestamp_forms_compare(http, response):
    body = {
        "status": "success",
        "posts": [
            _post(1, "2024-05-01 10:00:00"),
            _post(2, "2024-05-02T10:00:00Z"),
            _post(3, "2024-05-03T10:00:00+09:00"),
        ],
    }
    client, _ = http(response(body))

    posts = client.list_thread_posts(5).payload.newest_first().posts

    assert [p.id for p in posts] == [3, 2, 1]
    assert [p.created_at for p in posts] == [
        datetime(2024, 5, 3, 1, 0),
        datetime(2024, 5, 2, 10, 0),
        datetime(2024, 5, 1, 10, 0),
    ]
    assert all(p.created_at.tzinfo is None for p in posts)


# ------------------------------------------------------------- logging --


def test_malformed_response_is_logged_with_status_and_body(http, response, caplog):
    client, _ = http(response("<html>Fatal error</html>", status_code=500))

    with caplog.at_level(logging.DEBUG, logger="services.board_api"):
        client.list_threads()

    [record] = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert record.status == 500
    assert record.raw_body == "<html>Fatal error</html>"
    assert record.operation == "list_threads"


def test_transport_failure_is_logged(http, transport_error, caplog):
    client, _ = http(transport_error)

    with caplog.at_level(logging.DEBUG, logger="services.board_api"):
        client.list_threads()

    [record] = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert record.operation == "list_threads"
    assert "connection refused" in record.getMessage()


def test_password_never_reaches_the_log(http, response, transport_error, caplog):
    client, _ = http(
        transport_error,
        response("not json", status_code=502),
        response({"status": "error", "error_code": "INVALID_CREDENTIALS"}, status_code=401),
        response({"status": "success", "message": "ok"}),
    )

    with caplog.at_level(logging.DEBUG):
        client.login("a@b.co", "hunter2-secret")
        client.login("a@b.co", "hunter2-secret")
        client.login("a@b.co", "hunter2-secret")
        client.register("a@b.co", "hunter2-secret")

    assert caplog.records
    assert "hunter2-secret" not in caplog.text

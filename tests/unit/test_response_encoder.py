import pytest

from dbprobe.app.domain.models import ProbeOutcome, ProbeResponse
from dbprobe.app.handlers.response_encoder import encode_outcome, to_http_event_response, to_structured_response


@pytest.mark.parametrize(
    "outcome, status, message",
    [
        (ProbeOutcome.ready(), 200, "Database is ready!"),
        (
            ProbeOutcome.connect_failed("could not translate host name"),
            500,
            "Error connecting to database: could not translate host name",
        ),
        (ProbeOutcome.query_failed("server closed the connection"), 500, "Error checking database: server closed the connection"),
        (ProbeOutcome.timed_out(), 500, "Database did not become available within 5 minutes."),
    ],
)
def test_outcome_mapping(outcome, status, message):
    assert encode_outcome(outcome) == ProbeResponse(status_code=status, message=message)


def test_http_event_shape_is_plain_text():
    rendered = to_http_event_response(ProbeResponse(status_code=200, message="Database is ready!"))
    assert rendered["statusCode"] == 200
    assert rendered["body"] == "Database is ready!"
    assert rendered["headers"]["Content-Type"].startswith("text/plain")
    assert rendered["isBase64Encoded"] is False


def test_structured_shape_carries_message_field():
    rendered = to_structured_response(ProbeResponse(status_code=500, message="boom"))
    assert rendered == {"statusCode": 500, "message": "boom"}

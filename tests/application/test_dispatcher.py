"""Tests for the push dispatcher with fake Expo and FCM gateways."""

import pytest

from orderpush.notifications.notification.dispatch import LaneStatus, PushDispatcher

FCM_A = "fcm-registration-token-aaaa"
FCM_B = "fcm-registration-token-bbbb"


@pytest.fixture
def dispatcher(expo, fcm):
    return PushDispatcher(expo, fcm)


def _expo_tokens(count):
    return [f"ExponentPushToken[{i}]" for i in range(count)]


class TestClassificationRouting:
    def test_expo_and_fcm_lanes(self, dispatcher, expo, fcm):
        result = dispatcher.dispatch(["ExponentPushToken[a]", "abc123fcm"], "Hi", "Body", {"orderId": "X"})

        assert [m["to"] for m in expo.sent_messages] == ["ExponentPushToken[a]"]
        assert fcm.sent_multicasts[0]["tokens"] == ["abc123fcm"]
        assert result.expo.status is LaneStatus.SUCCEEDED
        assert result.fcm.status is LaneStatus.SUCCEEDED

    def test_no_tokens_no_provider_calls(self, dispatcher, expo, fcm):
        result = dispatcher.dispatch([], "Hi", "Body")

        assert expo.sent_chunks == []
        assert fcm.sent_multicasts == []
        assert result.expo.status is LaneStatus.SKIPPED
        assert result.fcm.status is LaneStatus.SKIPPED


class TestExpoLane:
    def test_message_shape(self, dispatcher, expo):
        dispatcher.dispatch(["ExponentPushToken[a]"], "Title", "Body", {"orderId": "X", "n": 1})

        assert expo.sent_messages == [
            {
                "to": "ExponentPushToken[a]",
                "sound": "default",
                "title": "Title",
                "body": "Body",
                "data": {"orderId": "X", "n": 1},
            }
        ]

    def test_invalid_expo_tokens_silently_dropped(self, dispatcher, expo):
        result = dispatcher.dispatch(["ExponentPushToken[]", "ExponentPushToken[ok]"], "T", "B")

        assert [m["to"] for m in expo.sent_messages] == ["ExponentPushToken[ok]"]
        assert result.expo.dropped == 1
        assert result.expo.attempted == 1

    def test_all_invalid_means_no_call(self, dispatcher, expo):
        result = dispatcher.dispatch(["ExponentPushToken[]"], "T", "B")

        assert expo.sent_chunks == []
        assert result.expo.status is LaneStatus.SKIPPED
        assert result.expo.dropped == 1

    def test_chunks_by_gateway_size(self, expo, fcm):
        expo.max_chunk_size = 2
        dispatcher = PushDispatcher(expo, fcm)

        result = dispatcher.dispatch(_expo_tokens(5), "T", "B")

        assert [len(chunk) for chunk in expo.sent_chunks] == [2, 2, 1]
        assert result.expo.attempted == 5

    def test_failed_chunk_does_not_stop_later_chunks(self, expo, fcm):
        expo.max_chunk_size = 2
        expo.configure(failing_chunks={0}, failure_reason="expo 503")
        dispatcher = PushDispatcher(expo, fcm)

        result = dispatcher.dispatch(_expo_tokens(5), "T", "B")

        assert [len(chunk) for chunk in expo.sent_chunks] == [2, 1]
        assert result.expo.status is LaneStatus.PARTIAL
        assert result.expo.failed == 2
        assert "expo 503" in result.expo.error

    def test_every_chunk_failing(self, dispatcher, expo):
        expo.configure(should_succeed=False)

        result = dispatcher.dispatch(_expo_tokens(3), "T", "B")

        assert result.expo.status is LaneStatus.FAILED
        assert result.expo.failed == 3

    def test_rejected_tickets_counted(self, dispatcher, expo):
        expo.configure(rejected_tokens={"ExponentPushToken[1]"})

        result = dispatcher.dispatch(_expo_tokens(3), "T", "B")

        assert result.expo.status is LaneStatus.PARTIAL
        assert result.expo.failed == 1

    def test_custom_sound(self, expo, fcm):
        PushDispatcher(expo, fcm, sound="bell.wav").dispatch(["ExponentPushToken[a]"], "T", "B")
        assert expo.sent_messages[0]["sound"] == "bell.wav"


class TestFcmLane:
    def test_single_multicast_with_string_data(self, dispatcher, fcm):
        dispatcher.dispatch([FCM_A, FCM_B], "Title", "Body", {"orderId": "X", "count": 2})

        assert fcm.sent_multicasts == [
            {
                "tokens": [FCM_A, FCM_B],
                "title": "Title",
                "body": "Body",
                "data": {"orderId": "X", "count": "2"},
            }
        ]

    def test_failure_is_reported_not_raised(self, dispatcher, fcm):
        fcm.configure(should_succeed=False, failure_reason="quota exceeded")

        result = dispatcher.dispatch([FCM_A, FCM_B], "T", "B")

        assert result.fcm.status is LaneStatus.FAILED
        assert result.fcm.failed == 2
        assert "quota exceeded" in result.fcm.error

    def test_fcm_failure_does_not_affect_expo(self, dispatcher, expo, fcm):
        fcm.configure(should_succeed=False)

        result = dispatcher.dispatch(["ExponentPushToken[a]", FCM_A], "T", "B")

        assert result.expo.status is LaneStatus.SUCCEEDED
        assert len(expo.sent_messages) == 1
        assert result.fcm.status is LaneStatus.FAILED

    def test_partial_multicast(self, dispatcher, fcm):
        fcm.configure(rejected_tokens={FCM_B})

        result = dispatcher.dispatch([FCM_A, FCM_B], "T", "B")

        assert result.fcm.status is LaneStatus.PARTIAL
        assert result.fcm.failed == 1

    def test_unexpected_exception_swallowed(self, expo):
        class ExplodingFcm:
            def send_multicast(self, tokens, title, body, data):
                raise KeyError("surprise")

        result = PushDispatcher(expo, ExplodingFcm()).dispatch([FCM_A], "T", "B")

        assert result.fcm.status is LaneStatus.FAILED

import pytest

from imsgdb.app import AppMessage
from imsgdb.errors import PlistParseError, PlistParseErrorKind


def _archive(top=None, user_info=None, url=None):
    payload = dict(top or {})
    payload["userInfo"] = dict(user_info or {})
    if url is not None:
        payload["URL"] = {"NS.relative": url}
    return payload


def test_parse_apple_pay_sent_265():
    payload = _archive(
        top={"an": "Apple\u00a0Pay", "ldtext": "Sent $265 with Apple\u00a0Pay."},
        user_info={"caption": "Apple\u00a0Cash", "subcaption": "$265\u00a0Payment"},
        url="data:application/vnd.apple.pkppm;base64,FAKE_BASE64_DATA=",
    )
    expected = AppMessage(
        url="data:application/vnd.apple.pkppm;base64,FAKE_BASE64_DATA=",
        caption="Apple\u00a0Cash",
        subcaption="$265\u00a0Payment",
        app_name="Apple\u00a0Pay",
        ldtext="Sent $265 with Apple\u00a0Pay.",
    )
    assert AppMessage.from_map(payload) == expected


def test_parse_apple_pay_recurring_1():
    payload = _archive(
        top={"an": "Apple\u00a0Cash", "ldtext": "Sending you $1 weekly starting Nov 18, 2023"},
        url="data:application/vnd.apple.pkppm;base64,FAKEDATA",
    )
    expected = AppMessage(
        url="data:application/vnd.apple.pkppm;base64,FAKEDATA",
        app_name="Apple\u00a0Cash",
        ldtext="Sending you $1 weekly starting Nov 18, 2023",
    )
    assert AppMessage.from_map(payload) == expected


def test_parse_reservation_invite():
    url = (
        "https://reservations.example.com/book/view?rid=0000000&confnumber=00000"
        "&invitationId=1234567890-abcd-def-ghij-4u5t1sv3ryc00l"
    )
    payload = _archive(
        top={"an": "OpenTable"},
        user_info={
            "image-title": "Rusty Grill - Boise",
            "image-subtitle": "Reservation Confirmed",
            "caption": "Table for 4 people\nSunday, October 17 at 7:45 PM",
            "subcaption": "You're invited! Tap to accept.",
        },
        url=url,
    )
    expected = AppMessage(
        url=url,
        title="Rusty Grill - Boise",
        subtitle="Reservation Confirmed",
        caption="Table for 4 people\nSunday, October 17 at 7:45 PM",
        subcaption="You're invited! Tap to accept.",
        app_name="OpenTable",
    )
    assert AppMessage.from_map(payload) == expected


def test_parse_slideshow():
    url = "https://photos.example.com/1337h4x0r_jk#Home"
    payload = _archive(
        top={"an": "Photos", "ldtext": "Home - 37 Photos"},
        user_info={"caption": "Home", "subcaption": "37 Photos"},
        url=url,
    )
    expected = AppMessage(
        url=url,
        caption="Home",
        subcaption="37 Photos",
        app_name="Photos",
        ldtext="Home - 37 Photos",
    )
    assert AppMessage.from_map(payload) == expected


def test_parse_game():
    payload = _archive(
        top={"an": "GamePigeon", "ldtext": "Dots & Boxes"},
        user_info={"caption": "Your move."},
        url="data:?ver=48&data=pr3t3ndth3r3154b10b0fd4t4h3re=3",
    )
    expected = AppMessage(
        url="data:?ver=48&data=pr3t3ndth3r3154b10b0fd4t4h3re=3",
        caption="Your move.",
        app_name="GamePigeon",
        ldtext="Dots & Boxes",
    )
    balloon = AppMessage.from_map(payload)
    assert balloon == expected
    assert balloon.parse_query_string() == {}


BUSINESS_URL = (
    "?receivedMessage=33c309ab520bc2c76e99c493157ed578"
    "&replyMessage=6a991da615f2e75d4aa0de334e529024"
)


def _business():
    return _archive(
        top={"an": "Business", "ldtext": "Yes, connect me with Goldman Sachs."},
        user_info={"caption": "Yes, connect me with Goldman Sachs."},
        url=BUSINESS_URL,
    )


def test_parse_business():
    expected = AppMessage(
        url=BUSINESS_URL,
        caption="Yes, connect me with Goldman Sachs.",
        app_name="Business",
        ldtext="Yes, connect me with Goldman Sachs.",
    )
    assert AppMessage.from_map(_business()) == expected


def test_parse_business_query_string():
    balloon = AppMessage.from_map(_business())
    assert balloon.parse_query_string() == {
        "receivedMessage": "33c309ab520bc2c76e99c493157ed578",
        "replyMessage": "6a991da615f2e75d4aa0de334e529024",
    }


CHECK_IN_URL = "?messageType=1&interfaceVersion=1&sendDate=1697316869.688709"


@pytest.mark.parametrize(
    "caption",
    [
        "Check In: Timer Started",
        "Check In: Has not checked in when expected, location shared",
        "Check In: Fake Location",
    ],
)
def test_parse_check_in(caption):
    payload = _archive(
        top={"an": "Check In", "ldtext": caption},
        user_info={"caption": caption},
        url=CHECK_IN_URL,
    )
    expected = AppMessage(
        url=CHECK_IN_URL, caption=caption, app_name="Check In", ldtext=caption
    )
    assert AppMessage.from_map(payload) == expected


def test_parse_check_in_query_string():
    payload = _archive(
        top={"an": "Check In"},
        user_info={"caption": "Check In: Timer Started"},
        url=CHECK_IN_URL,
    )
    assert AppMessage.from_map(payload).parse_query_string() == {
        "messageType": "1",
        "interfaceVersion": "1",
        "sendDate": "1697316869.688709",
    }


def test_parse_find_my():
    url = "?FindMyMessagePayloadVersionKey=v0&FindMyMessagePayloadZippedDataKey=FAKEDATA"
    payload = _archive(
        top={"an": "Find My", "ldtext": "Started Sharing Location"}, url=url
    )
    expected = AppMessage(
        url=url, app_name="Find My", ldtext="Started Sharing Location"
    )
    assert AppMessage.from_map(payload) == expected


def test_image_is_read_from_root():
    payload = _archive(top={"image": "preview.png"})
    assert AppMessage.from_map(payload).image == "preview.png"


def test_trailing_captions():
    payload = _archive(
        user_info={"secondary-subcaption": "left", "tertiary-subcaption": "right"}
    )
    balloon = AppMessage.from_map(payload)
    assert (balloon.trailing_caption, balloon.trailing_subcaption) == ("left", "right")


def test_non_string_values_are_ignored():
    payload = _archive(top={"an": 5}, user_info={"caption": ["x"]})
    balloon = AppMessage.from_map(payload)
    assert balloon.app_name is None
    assert balloon.caption is None


def test_missing_user_info_raises():
    with pytest.raises(PlistParseError) as info:
        AppMessage.from_map({"an": "Photos"})
    assert info.value.kind is PlistParseErrorKind.MISSING_KEY
    assert str(info.value) == "Expected key userInfo, found nothing!"


def test_non_dictionary_root_raises():
    with pytest.raises(PlistParseError) as info:
        AppMessage.from_map(["not", "a", "dict"])
    assert info.value.kind is PlistParseErrorKind.INVALID_TYPE


def test_query_string_without_url_is_empty():
    assert AppMessage().parse_query_string() == {}


def test_query_string_skips_malformed_pairs():
    balloon = AppMessage(url="?a=1&b&c=2=3&d=4")
    assert balloon.parse_query_string() == {"a": "1", "d": "4"}
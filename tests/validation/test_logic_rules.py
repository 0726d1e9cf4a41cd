from suimu.domain.models import MaybeMusic
from suimu.domain.platforms import Platform
from suimu.domain.validation.logic_rules import (
    check_datetime,
    check_logic,
    check_record,
    check_support,
    parse_datetime,
)


def _music(**overrides) -> MaybeMusic:
    values = {
        "datetime": "2021-06-25T22:30:00+09:00",
        "video_type": "YOUTUBE",
        "video_id": "ZfDYRy17CBY",
        "status": 0,
        "title": "Bluerose",
        "artist": "星街すいせい",
        "performer": "星街すいせい",
    }
    values.update(overrides)
    return MaybeMusic(**values)


def test_check_logic_clip_order():
    assert check_logic(_music()) == []
    assert check_logic(_music(clip_start=1.1)) == []
    assert check_logic(_music(clip_start=1.1, clip_end=2.2)) == []

    issues = check_logic(_music(clip_start=3.1, clip_end=2.2))
    assert [i.code for i in issues] == ["CLIP_ORDER"]
    assert issues[0].message == "clip_start is later than clip_end"


def test_check_support():
    assert check_support(_music(video_type="BILIBILI")) == []
    issues = check_support(_music(video_type="NICONICO"))
    assert [i.code for i in issues] == ["UNSUPPORTED_PLATFORM"]


def test_parse_datetime_formats():
    assert parse_datetime("2021-06-25T22:30:00+09:00") is not None
    assert parse_datetime("2020-01-31T19:58+09:00") is not None
    assert parse_datetime("2021-06-25T13:30:00Z") is not None
    assert parse_datetime("2021-06-25") is None
    assert parse_datetime("yesterday") is None


def test_check_datetime():
    assert check_datetime(_music()) == []
    assert [i.code for i in check_datetime(_music(datetime="not a date"))] == ["INVALID_DATETIME"]


def test_check_record_collects_all_warnings():
    record = _music(video_type="VIMEO", datetime="bad", clip_start=5.0, clip_end=1.0)
    codes = sorted(i.code for i in check_record(record))
    assert codes == ["CLIP_ORDER", "INVALID_DATETIME", "UNSUPPORTED_PLATFORM"]


def test_platform_parse_and_urls():
    assert Platform.parse("YOUTUBE") is Platform.YOUTUBE
    assert Platform.parse(" TWITTER ") is Platform.TWITTER
    assert Platform.parse("youtube") is None
    assert Platform.parse(None) is None
    assert Platform.YOUTUBE.video_url("ZfDYRy17CBY") == "https://www.youtube.com/watch?v=ZfDYRy17CBY"
    assert Platform.BILIBILI.video_url("BV1U7411s7X1") == "https://www.bilibili.com/video/BV1U7411s7X1"

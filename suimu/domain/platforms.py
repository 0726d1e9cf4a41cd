from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """
    Назначение:
        Поддерживаемые площадки-источники (значение video_type).
    """

    YOUTUBE = "YOUTUBE"
    TWITTER = "TWITTER"
    BILIBILI = "BILIBILI"

    @property
    def url_template(self) -> str:
        return PLATFORM_URL_TEMPLATES[self]

    def video_url(self, video_id: str) -> str:
        return self.url_template.format(video_id)

    @classmethod
    def parse(cls, video_type: str | None) -> "Platform | None":
        value = (video_type or "").strip()
        for member in cls:
            if member.value == value:
                return member
        return None


PLATFORM_URL_TEMPLATES: dict[Platform, str] = {
    Platform.YOUTUBE: "https://www.youtube.com/watch?v={}",
    Platform.TWITTER: "https://www.twitter.com/i/status/{}",
    Platform.BILIBILI: "https://www.bilibili.com/video/{}",
}

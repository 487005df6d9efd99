"""Known streaming platforms and their search deep links."""

from enum import Enum
from urllib.parse import quote


class Platform(Enum):
    NETFLIX = "Netflix"
    PRIME_VIDEO = "Prime Video"
    HOTSTAR = "Hotstar"
    YOUTUBE = "YouTube"
    APPLE_TV = "Apple TV"
    JIOCINEMA = "JioCinema"
    ZEE5 = "ZEE5"
    SONYLIV = "SonyLIV"


# Ordered: the first pattern contained in a provider name wins.
PLATFORM_PATTERNS: tuple[tuple[str, Platform], ...] = (
    ("netflix", Platform.NETFLIX),
    ("amazon prime", Platform.PRIME_VIDEO),
    ("prime video", Platform.PRIME_VIDEO),
    ("hotstar", Platform.HOTSTAR),
    ("disney", Platform.HOTSTAR),
    ("youtube", Platform.YOUTUBE),
    ("apple", Platform.APPLE_TV),
    ("jiocinema", Platform.JIOCINEMA),
    ("zee5", Platform.ZEE5),
    ("sonyliv", Platform.SONYLIV),
)

SEARCH_URLS: dict[Platform, str] = {
    Platform.NETFLIX: "https://www.netflix.com/search?q={title}",
    Platform.PRIME_VIDEO: "https://www.amazon.in/s?k={title}&i=instant-video",
    Platform.HOTSTAR: "https://www.hotstar.com/in/search?q={title}",
    Platform.YOUTUBE: "https://www.youtube.com/results?search_query={title}",
    Platform.APPLE_TV: "https://tv.apple.com/search?term={title}",
    Platform.JIOCINEMA: "https://www.jiocinema.com/search/{title}",
    Platform.ZEE5: "https://www.zee5.com/search?q={title}",
    Platform.SONYLIV: "https://www.sonyliv.com/search/{title}",
}


def match_platform(provider_name: str) -> Platform | None:
    """Map a provider display name onto a known platform."""
    name = provider_name.lower()
    for pattern, platform in PLATFORM_PATTERNS:
        if pattern in name:
            return platform
    return None


def search_link(platform: Platform, title: str) -> str:
    return SEARCH_URLS[platform].format(title=quote(title, safe=""))

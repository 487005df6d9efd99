"""TMDb data models."""

from attrs import define, field


@define
class TMDbVideo:
    """Represents a video attached to a TMDb movie."""

    key: str
    name: str
    site: str
    type: str


@define
class TMDbMovie:
    """Represents the movie details payload from TMDb."""

    id: int
    title: str
    overview: str | None = None
    runtime: int | None = None
    genres: list[str] = field(factory=list)
    release_date: str | None = None
    original_language: str | None = None
    vote_average: float | None = None
    popularity: float | None = None
    poster_path: str | None = None
    videos: list[TMDbVideo] = field(factory=list)
    similar: list[str] = field(factory=list)


@define
class TMDbProvider:
    """A single watch provider as listed by TMDb."""

    provider_name: str
    logo_path: str | None = None


@define
class TMDbRegionProviders:
    """Watch providers for one region, grouped by access bucket."""

    link: str | None = None
    flatrate: list[TMDbProvider] = field(factory=list)
    rent: list[TMDbProvider] = field(factory=list)
    buy: list[TMDbProvider] = field(factory=list)

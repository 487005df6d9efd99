"""Catalog data models and their JSON representation."""

from enum import Enum

from attrs import define, field


UNANNOUNCED_YEAR = "Coming Soon"


class AccessType(str, Enum):
    """How a provider offers a title."""

    STREAM = "Stream"
    RENT = "Rent"
    BUY = "Buy"


@define(frozen=True)
class TargetSpec:
    """One curated ingestion request."""

    name: str
    year: int | None = None
    category: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict, category: str | None = None) -> "TargetSpec":
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Target entry has no name: {data!r}")
        year = data.get("year")
        if year is not None and not isinstance(year, int):
            raise ValueError(f"Target year must be an integer: {data!r}")
        return cls(
            name=name,
            year=year,
            category=category if category is not None else data.get("category", ""),
            tags=tuple(dict.fromkeys(data.get("tags") or [])),
        )


@define
class ProviderEntry:
    """A watch/rent/buy platform offering a record."""

    name: str
    access_type: AccessType
    link: str | None = None
    logo_ref: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "accessType": self.access_type.value,
            "link": self.link,
            "logoRef": self.logo_ref,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProviderEntry":
        return cls(
            name=data["name"],
            access_type=AccessType(data.get("accessType", data.get("type", "Stream"))),
            link=data.get("link"),
            logo_ref=data.get("logoRef", data.get("logo")),
        )


@define
class MovieRecord:
    """The catalog's unit of persistence, keyed by slug."""

    id: int
    slug: str
    title: str
    year: int | str = UNANNOUNCED_YEAR
    genre_primary: str = "Unknown"
    genres: list[str] = field(factory=list)
    rating: str = "N/A"
    duration_text: str = "TBA"
    poster_ref: str | None = None
    trailer_embed_url: str = ""
    description: str = ""
    platforms: list[str] = field(factory=list)
    providers: list[ProviderEntry] = field(factory=list)
    language: str = ""
    tags: list[str] = field(factory=list)
    featured: bool = False

    def to_dict(self) -> dict:
        """Serialize using the field names the site reads."""
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "year": self.year,
            "genrePrimary": self.genre_primary,
            "genres": list(self.genres),
            "rating": self.rating,
            "durationText": self.duration_text,
            "posterRef": self.poster_ref,
            "trailerEmbedURL": self.trailer_embed_url,
            "description": self.description,
            "platforms": list(self.platforms),
            "providers": [p.to_dict() for p in self.providers],
            "language": self.language,
            "tags": list(self.tags),
            "featured": self.featured,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MovieRecord":
        """Parse a stored record, accepting the older key names as well."""
        return cls(
            id=int(data["id"]),
            slug=data["slug"],
            title=data.get("title", ""),
            year=data.get("year", UNANNOUNCED_YEAR),
            genre_primary=data.get("genrePrimary", data.get("genre", "Unknown")),
            genres=list(data.get("genres") or []),
            rating=data.get("rating", "N/A"),
            duration_text=data.get("durationText", data.get("duration", "TBA")),
            poster_ref=data.get("posterRef", data.get("poster")),
            trailer_embed_url=data.get("trailerEmbedURL", data.get("trailer", "")) or "",
            description=data.get("description", "") or "",
            platforms=list(data.get("platforms") or []),
            providers=[ProviderEntry.from_dict(p) for p in data.get("providers") or []],
            language=data.get("language", "") or "",
            tags=list(dict.fromkeys(data.get("tags") or [])),
            featured=bool(data.get("featured", False)),
        )

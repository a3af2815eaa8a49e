# normalize/schema.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List

MAX_SKILLS = 15
MAX_POSTS = 10
MAX_POST_CHARS = 200
MAX_REFERENCE_CHARS = 5000
UNKNOWN_DATE = "unknown"


@dataclass
class RawRecord:
    label: str                    # extractor name, e.g. 'profile_header'
    data: str


@dataclass
class Post:
    text: str                     # first 200 chars of the post
    date: str = UNKNOWN_DATE


@dataclass
class ProfileRecord:
    username: str
    display_name: str = ""
    bio: str = ""
    join_date: str = ""
    location: str = ""
    website: str = ""
    tweet_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    skills: List[str] = field(default_factory=list)
    recent_posts: List[Post] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "ProfileRecord":
        posts = [
            Post(text=str(p.get("text", "")), date=str(p.get("date") or UNKNOWN_DATE))
            for p in data.get("recent_posts", []) or []
        ]
        return cls(
            username=str(data.get("username", "")),
            display_name=str(data.get("display_name", "")),
            bio=str(data.get("bio", "")),
            join_date=str(data.get("join_date", "")),
            location=str(data.get("location", "")),
            website=str(data.get("website", "")),
            tweet_count=int(data.get("tweet_count", 0) or 0),
            followers_count=int(data.get("followers_count", 0) or 0),
            following_count=int(data.get("following_count", 0) or 0),
            skills=list(data.get("skills", []) or []),
            recent_posts=posts,
        )


@dataclass
class ReferenceRecord:
    url: str
    title: str
    content: str                  # truncated to MAX_REFERENCE_CHARS
    keywords: List[str] = field(default_factory=list)
    extracted_skills: List[str] = field(default_factory=list)
    last_scraped: str = ""        # ISO8601

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "ReferenceRecord":
        url = str(data.get("url", ""))
        return cls(
            url=url,
            title=str(data.get("title") or url),
            content=str(data.get("content", "")),
            keywords=list(data.get("keywords", []) or []),
            extracted_skills=list(data.get("extracted_skills", []) or []),
            last_scraped=str(data.get("last_scraped", "")),
        )


@dataclass
class AggregatedFetchResult:
    profile: ProfileRecord
    references: List[ReferenceRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "profile": self.profile.to_dict(),
            "references": [r.to_dict() for r in self.references],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "AggregatedFetchResult":
        return cls(
            profile=ProfileRecord.from_dict(data.get("profile", {}) or {}),
            references=[ReferenceRecord.from_dict(r) for r in data.get("references", []) or []],
        )

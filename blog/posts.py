"""Fixed blog post data served by the API."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    body: str
    author: str
    date: str


@dataclass(frozen=True)
class PostEntry:
    id: int
    title: str
    description: str
    author: str
    date: str


POST = Post(
    id=1,
    title="Hello World!",
    body="First ever post on this blog",
    author="rexxor",
    date="30th March 2019",
)

POST_ENTRIES = [
    PostEntry(
        id=1,
        title="Hello World!",
        description="First ever post on this blog",
        author="rexxor",
        date="30th March 2019",
    ),
    PostEntry(
        id=2,
        title="Hello Again!",
        description="Second ever post on this blog",
        author="rexxor",
        date="17th April 2019",
    ),
    PostEntry(
        id=3,
        title="Some stuff about frontends!",
        description="Third ever post on this blog",
        author="rexxor",
        date="17th April 2019",
    ),
]


def post_payload() -> Dict[str, Any]:
    return asdict(POST)


def post_list_payload() -> List[Dict[str, Any]]:
    # asdict keeps field order, which is the key order on the wire
    return [asdict(entry) for entry in POST_ENTRIES]

from dataclasses import dataclass
from typing import List

from aiohttp import ClientSession

from httpassist.client import Client
from httpassist.http.aiohttp import AIOHTTP
from httpassist.models import ErrorPolicy

URL = "https://jsonplaceholder.typicode.com"


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    body: str
    userId: int


async def example():
    async with ClientSession() as session:
        client = Client(AIOHTTP(session))

        # Create a post and decode the created resource
        created = await client.post(
            URL, "/posts", into=Post, body={"title": "foo", "body": "bar", "userId": 1}
        )
        print(created)
        # List posts
        posts = await client.get(URL, "/posts", into=List[Post])
        print(len(posts or []))
        # Update a post
        updated = await client.put(
            URL,
            "/posts/1",
            into=Post,
            body={"id": 1, "title": "foo", "body": "bar", "userId": 1},
        )
        print(updated)
        # Delete a post, ignoring a missing resource
        await client.delete(
            URL, "/posts/1", policy=ErrorPolicy(fail_on_response_error=False)
        )

"""Shared fixtures: GitHub search payloads shaped like the real API."""
import json

import pytest

from ghquery.services.decoder import decode_search_result


def repo_item(repo_id: int, name: str, owner: str = "octo", stars: int = 10, issues: int = 1, **extra) -> dict:
    item = {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {
            "login": owner,
            "avatar_url": f"https://avatars.example/{owner}.png",
            "url": f"https://api.github.com/users/{owner}",
        },
        "html_url": f"https://github.com/{owner}/{name}",
        "description": f"{name} description",
        "language": "Go",
        "open_issues_count": issues,
        "archived": False,
        "disabled": False,
        "private": False,
        "created_at": "2019-05-04T10:20:30Z",
        "stargazers_count": stars,
        "forks_count": 3,
    }
    item.update(extra)
    return item


def payload(total_count: int, items: list, incomplete: bool = False) -> dict:
    return {"total_count": total_count, "incomplete_results": incomplete, "items": items}


@pytest.fixture
def make_result():
    def _make(total_count: int, items: list, incomplete: bool = False):
        return decode_search_result(json.dumps(payload(total_count, items, incomplete)))

    return _make

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GitHubModel(BaseModel):
    """Read-only projection of a GitHub API object."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # GitHub sends null for unset fields; those fall back to the field default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Owner(GitHubModel):
    username: str = Field(default="", alias="login")
    avatar_url: str = ""
    html_url: str = Field(default="", alias="url")


class Repository(GitHubModel):
    id: int = 0
    name: str = ""
    full_name: str = ""
    owner: Owner = Field(default_factory=Owner)
    html_url: str = ""
    description: str = ""
    language: str = ""
    open_issues_count: int = 0
    archived: bool = False
    disabled: bool = False
    private: bool = False
    created_at: Optional[datetime] = None
    stars: int = Field(default=0, alias="stargazers_count")


class SearchResult(GitHubModel):
    total_count: int = Field(default=0, ge=0)
    incomplete_results: bool = False
    items: List[Repository] = Field(default_factory=list)

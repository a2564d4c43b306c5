"""Allow-lists for the enumerated search parameters.

Keys are the lower-cased values accepted on input and sent to GitHub,
values are the labels shown in the web form.
"""
from types import MappingProxyType

LANGUAGE_OPTIONS = MappingProxyType(
    {
        "python": "Python",
        "javascript": "JavaScript",
        "java": "Java",
        "c": "C",
        "cpp": "C++",
        "ruby": "Ruby",
        "go": "Go",
        "swift": "Swift",
    }
)

SORT_OPTIONS = MappingProxyType(
    {
        "stars": "Stars",
        "forks": "Forks",
        "help-wanted-issues": "Help Wanted",
        "updated": "Updated",
    }
)

SCOPE_OPTIONS = MappingProxyType(
    {
        "name": "Name",
        "description": "Description",
        "topics": "Topics",
        "readme": "README",
    }
)

ORDER_OPTIONS = MappingProxyType({"asc": "Ascending", "desc": "Descending"})

DEFAULT_SORT = "stars"
DEFAULT_ORDER = "desc"

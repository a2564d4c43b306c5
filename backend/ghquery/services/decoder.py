from typing import Union

from pydantic import ValidationError

from ..errors import DecodeError
from ..schemas import SearchResult


def decode_search_result(body: Union[bytes, str]) -> SearchResult:
    # malformed JSON and schema mismatches both surface as ValidationError
    try:
        return SearchResult.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(exc) from exc

from typing import Dict, List, Mapping, Sequence, Union
from urllib.parse import parse_qsl

from member_directory_filters.constants.app_constants import AppConstants

RawValue = Union[str, Sequence[str]]
RequestParams = Mapping[str, RawValue]


def parse_query_string(query_string: str) -> Dict[str, Union[str, List[str]]]:
    """
    Build request params from a URL/form-encoded query string.

    ``name[]=a&name[]=b`` collects into ``{"name": ["a", "b"]}``; a plain key
    given more than once keeps its last value.
    """
    params: Dict[str, Union[str, List[str]]] = {}
    if not query_string:
        return params

    for key, value in parse_qsl(query_string.lstrip('?'), keep_blank_values=True):
        if key.endswith(AppConstants.ARRAY_PARAM_SUFFIX):
            name = key[:-len(AppConstants.ARRAY_PARAM_SUFFIX)]
            existing = params.get(name)
            if not isinstance(existing, list):
                existing = []
                params[name] = existing
            existing.append(value)
        else:
            params[key] = value
    return params

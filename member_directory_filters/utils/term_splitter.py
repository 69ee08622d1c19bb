from typing import Any, List

from member_directory_filters.constants.app_constants import AppConstants


def split_terms(value: Any) -> List[str]:
    """
    Split a normalized field value into ordered search terms.

    Lists are taken element by element, strings are split on commas. Every
    term is trimmed and empty ones are dropped. Duplicates are kept.

        split_terms("a, ,b,  ")  -> ["a", "b"]
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        pieces = value
    else:
        pieces = str(value).split(AppConstants.TERM_SEPARATOR)

    terms: List[str] = []
    for piece in pieces:
        if not isinstance(piece, str):
            continue
        term = piece.strip()
        if term:
            terms.append(term)
    return terms

import logging
from typing import Any, List, Optional

from member_directory_filters.model.profile_query_model import (
    EMPTY_QUERY,
    ClauseGroup,
    CompiledQuery,
    MatchClause,
    OrGroup,
    ProfileQuery,
)
from member_directory_filters.registry.filter_registry import FilterRegistry
from member_directory_filters.utils.input_normalizer import normalize
from member_directory_filters.utils.request_params import RequestParams
from member_directory_filters.utils.term_splitter import split_terms

"""
================================================================================
Profile Query Compiler
================================================================================
Turns directory filter input into the profile query the listing engine runs.

    registry = {skills -> Skills, location -> Location}
    request  = {"skills": "JavaScript, Design", "location": "Berlin"}

    compile_profile_query(request, registry).to_dict()
    # {
    #   "relation": "AND",
    #   "groups": [
    #     {"relation": "OR", "clauses": [
    #         {"field": "Skills", "value": "JavaScript", "compare": "LIKE", "type": "CHAR"},
    #         {"field": "Skills", "value": "Design", "compare": "LIKE", "type": "CHAR"}]},
    #     {"field": "Location", "value": "Berlin", "compare": "LIKE", "type": "CHAR"}
    #   ]
    # }

Rules:
    - fields are visited in registry order, request keys outside the registry
      are ignored
    - an absent or empty parameter, or one with no terms left after
      splitting, contributes nothing
    - one term -> a single LIKE clause, several terms -> an OR group of LIKE
      clauses on the same attribute (duplicates are kept)
    - all groups are joined with AND; with no groups the result is EMPTY_QUERY
      and no query must be attached to the listing
================================================================================
"""

logger = logging.getLogger(__name__)


def _is_blank(raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, (str, list, tuple)):
        return len(raw) == 0
    return False


def _compile_terms(attribute_key: str, terms: List[str]) -> ClauseGroup:
    clauses = [MatchClause(attribute_key=attribute_key, value=term) for term in terms]
    if len(clauses) == 1:
        return clauses[0]
    return OrGroup(clauses=clauses)


def compile_profile_query(request_params: Optional[RequestParams], registry: FilterRegistry) -> ProfileQuery:
    """
    Compile request params into a profile query.

    :param request_params: mapping param name -> str | list[str], as submitted
    :param registry: the filterable fields, in compile order
    :return: CompiledQuery, or EMPTY_QUERY when no field produced a clause
    """
    groups: List[ClauseGroup] = []
    params = request_params or {}

    for field in registry:
        raw = params.get(field.param_name)
        if _is_blank(raw):
            continue

        terms = split_terms(normalize(raw))
        if not terms:
            logger.debug(f"Filter '{field.param_name}' has no usable terms, skipping")
            continue

        groups.append(_compile_terms(field.attribute_key, terms))

    if not groups:
        return EMPTY_QUERY

    query = CompiledQuery(groups=groups)
    logger.debug(f"Compiled profile query: {query.to_dict()}")
    return query


class ProfileQueryCompiler:
    """
    Compiler bound to one registry.
    """

    def __init__(self, registry: FilterRegistry):
        self.registry = registry

    def compile(self, request_params: Optional[RequestParams]) -> ProfileQuery:
        return compile_profile_query(request_params, self.registry)

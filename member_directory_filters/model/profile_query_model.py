from enum import Enum
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict

from member_directory_filters.constants.app_constants import AppConstants


class Relation(str, Enum):
    """Boolean combinator joining clauses or groups"""
    AND = "AND"
    OR = "OR"


class CompareMode(str, Enum):
    """Comparison applied to a profile attribute value"""
    PARTIAL_MATCH = "LIKE"


class ValueType(str, Enum):
    TEXT = "CHAR"


class MatchClause(BaseModel):
    """attribute_key's stored value contains value"""
    model_config = ConfigDict(frozen=True)

    attribute_key: str
    value: str
    compare: CompareMode = CompareMode.PARTIAL_MATCH
    type: ValueType = ValueType.TEXT

    def to_dict(self) -> Dict[str, Any]:
        return {
            AppConstants.FIELD: self.attribute_key,
            AppConstants.VALUE: self.value,
            AppConstants.COMPARE: self.compare.value,
            AppConstants.TYPE: self.type.value,
        }


class OrGroup(BaseModel):
    """Matches when the attribute contains ANY of the clause values"""
    model_config = ConfigDict(frozen=True)

    relation: Literal[Relation.OR] = Relation.OR
    clauses: List[MatchClause]

    def to_dict(self) -> Dict[str, Any]:
        return {
            AppConstants.RELATION: self.relation.value,
            AppConstants.CLAUSES: [clause.to_dict() for clause in self.clauses],
        }


ClauseGroup = Union[MatchClause, OrGroup]


class CompiledQuery(BaseModel):
    """
    Top-level profile query handed to the listing engine.

    Groups keep the order the fields were registered in. AND/OR are
    commutative, so the order only matters for the serialized form.
    """
    model_config = ConfigDict(frozen=True)

    relation: Literal[Relation.AND] = Relation.AND
    groups: List[ClauseGroup]

    def to_dict(self) -> Dict[str, Any]:
        return {
            AppConstants.RELATION: self.relation.value,
            AppConstants.GROUPS: [group.to_dict() for group in self.groups],
        }

    def __bool__(self) -> bool:
        return True


class EmptyQuery(BaseModel):
    """No filter was requested; the caller must not attach any query"""
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return {}

    def __bool__(self) -> bool:
        return False


EMPTY_QUERY = EmptyQuery()

ProfileQuery = Union[CompiledQuery, EmptyQuery]

import logging
from typing import Any, Dict, List, Optional, Tuple

from boto3.dynamodb.types import TypeDeserializer
from botocore.exceptions import ClientError

from member_directory_filters.constants.app_constants import AppConstants
from member_directory_filters.constants.db_constants import DBConstants
from member_directory_filters.model.member_model import MemberQueryResponse
from member_directory_filters.model.profile_query_model import (
    CompiledQuery,
    MatchClause,
    OrGroup,
    ProfileQuery,
)

logger = logging.getLogger(__name__)
deserializer = TypeDeserializer()


class MemberRepository:

    def __init__(self, client, table_name: str):
        self.dynamodb_client = client
        self.table_name = table_name
        logger.info(f"Initialized MemberRepository with table: {self.table_name}")

    def execute_partiql(self, statement: str, parameters: Optional[List[Dict[str, Any]]] = None,
                        limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Execute a PartiQL statement against DynamoDB, following NextToken.

        DynamoDB's own Limit caps items evaluated, not items matched, so it is
        never sent; ``limit`` is applied to the matched items instead.
        """
        try:
            request_params: Dict[str, Any] = {
                'Statement': statement
            }
            if parameters:
                request_params['Parameters'] = parameters

            logger.debug(f"Executing PartiQL: {statement}")
            logger.debug(f"With params: {parameters}")

            items: List[Dict[str, Any]] = []
            while True:
                response = self.dynamodb_client.execute_statement(**request_params)
                for item in response.get(AppConstants.DYNAMO_ITEMS, []):
                    items.append({k: deserializer.deserialize(v) for k, v in item.items()})
                    if limit and len(items) >= limit:
                        return items

                next_token = response.get(AppConstants.NEXT_TOKEN)
                if not next_token:
                    return items
                request_params['NextToken'] = next_token

        except ClientError as e:
            logger.error(f"Error executing PartiQL query: {str(e)}")
            logger.error(f"Statement: {statement}")
            logger.error(f"Parameters: {parameters}")
            raise

    @staticmethod
    def _format_attribute(attribute_key: str) -> str:
        # PartiQL identifiers are double-quoted, embedded quotes are doubled
        return '"' + attribute_key.replace('"', '""') + '"'

    def _compile_clause(self, clause: MatchClause, parameters: List[Dict[str, Any]]) -> str:
        # contains() is case-sensitive: "berlin" does not match "Berlin"
        parameters.append({'S': clause.value})
        return f"contains({self._format_attribute(clause.attribute_key)}, ?)"

    def build_where_clause(self, query: CompiledQuery) -> Tuple[str, List[Dict[str, Any]]]:
        """
        Translate a compiled profile query into a PartiQL WHERE fragment.

        Every term is bound as a parameter, never inlined:
            (contains("Skills", ?) OR contains("Skills", ?)) AND contains("Location", ?)
        """
        parameters: List[Dict[str, Any]] = []
        parts: List[str] = []
        for group in query.groups:
            if isinstance(group, OrGroup):
                ors = [self._compile_clause(clause, parameters) for clause in group.clauses]
                parts.append("(" + f" {group.relation.value} ".join(ors) + ")")
            else:
                parts.append(self._compile_clause(group, parameters))
        return f" {query.relation.value} ".join(parts), parameters

    def query_members(self, profile_query: Optional[ProfileQuery] = None, user_id: Optional[str] = None,
                      limit: Optional[int] = None) -> MemberQueryResponse:
        """
        List members, optionally narrowed by a profile query and/or a single user id.
        """
        conditions: List[str] = []
        parameters: List[Dict[str, Any]] = []

        if user_id:
            conditions.append(f"{DBConstants.USER_ID} = ?")
            parameters.append({'S': str(user_id)})

        if isinstance(profile_query, CompiledQuery):
            where_clause, query_params = self.build_where_clause(profile_query)
            conditions.append(f"({where_clause})" if user_id else where_clause)
            parameters.extend(query_params)

        statement = f'SELECT * FROM "{self.table_name}"'
        if conditions:
            statement += " WHERE " + " AND ".join(conditions)

        logger.info(f"Generated PartiQL: {statement}")
        items = self.execute_partiql(statement, parameters, limit=limit)
        return MemberQueryResponse(members=items, count=len(items))

from member_directory_filters.dependencies.aws_providers import get_dynamodb_client
from member_directory_filters.dependencies.config_provider import get_app_config
from member_directory_filters.repositories.member_repository import MemberRepository

# Create singleton instances
__member_repository = None


def get_member_repository() -> MemberRepository:
    global __member_repository
    if __member_repository is None:
        __member_repository = MemberRepository(client=get_dynamodb_client(),
                                               table_name=get_app_config().members_table)
    return __member_repository

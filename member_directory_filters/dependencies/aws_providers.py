import boto3

from member_directory_filters.dependencies.config_provider import get_app_config

# Singleton instance
__dynamodb_client = None


def get_dynamodb_client():
    global __dynamodb_client

    if __dynamodb_client is None:
        config = get_app_config()
        __dynamodb_client = boto3.client(
            'dynamodb',
            region_name=config.aws_region,
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
        )
    return __dynamodb_client

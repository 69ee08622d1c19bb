import logging
import os
from typing import List, Mapping, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from member_directory_filters.constants.app_message import AppMessage
from member_directory_filters.registry.filter_registry import FilterRegistry, default_registry

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


def parse_filter_fields(spec: str) -> List[Tuple[str, str]]:
    """
    Parse ``MEMBER_FILTER_FIELDS``, e.g. ``"skills=Skills, city=Location"``.

    Repeated params are kept so that building the registry rejects them.
    """
    pairs: List[Tuple[str, str]] = []
    for chunk in spec.split(','):
        chunk = chunk.strip()
        if not chunk:
            continue
        if '=' not in chunk:
            raise ConfigError(f"{AppMessage.INVALID_FIELD_SPEC}: '{chunk}'")
        param_name, _, attribute_key = chunk.partition('=')
        param_name, attribute_key = param_name.strip(), attribute_key.strip()
        if not param_name or not attribute_key:
            raise ConfigError(f"{AppMessage.EMPTY_FIELD_SPEC}: '{chunk}'")
        pairs.append((param_name, attribute_key))
    return pairs


def parse_page_size(value: str) -> int:
    try:
        page_size = int(value.strip())
    except ValueError:
        raise ConfigError(f"{AppMessage.INVALID_PAGE_SIZE}: '{value}'")
    if page_size <= 0:
        raise ConfigError(f"{AppMessage.INVALID_PAGE_SIZE}: '{value}'")
    return page_size


class AppConfig(BaseModel):
    filter_fields: Optional[List[Tuple[str, str]]] = None
    members_table: str = "members"
    aws_region: str = "ap-south-1"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    page_size: int = Field(default=20, gt=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AppConfig':
        """Read settings from the environment (and a .env file when environ is not given)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        fields_spec = environ.get("MEMBER_FILTER_FIELDS")
        config = cls(
            filter_fields=parse_filter_fields(fields_spec) if fields_spec else None,
            members_table=environ.get("DYNAMODB_TABLE_MEMBERS", "members"),
            aws_region=environ.get("AWS_REGION", "ap-south-1"),
            aws_access_key_id=environ.get("AWS_DYNAMODB_ACCESS_KEY_ID"),
            aws_secret_access_key=environ.get("AWS_DYNAMODB_SECRET_ACCESS_KEY"),
            page_size=parse_page_size(environ.get("MEMBER_LISTING_PAGE_SIZE", "20")),
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )
        logger.info(f"Loaded config: table={config.members_table}, region={config.aws_region}")
        return config

    def build_registry(self) -> FilterRegistry:
        """
        :raises DuplicateFieldError: if MEMBER_FILTER_FIELDS names a param twice
        """
        if self.filter_fields is None:
            return default_registry()
        registry = FilterRegistry()
        for param_name, attribute_key in self.filter_fields:
            registry.add_field(param_name, attribute_key)
        return registry

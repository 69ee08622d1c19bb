import pytest

from member_directory_filters.config.app_config import AppConfig, ConfigError, parse_filter_fields
from member_directory_filters.registry.filter_registry import DuplicateFieldError


def test_defaults_use_stock_registry():
    config = AppConfig.from_env({})
    assert config.members_table == "members"
    assert config.page_size == 20
    assert config.build_registry().param_names() == ["skills", "location", "interests"]

def test_env_overrides():
    config = AppConfig.from_env({
        "MEMBER_FILTER_FIELDS": "city=Location, skills=Skills",
        "DYNAMODB_TABLE_MEMBERS": "community_members",
        "MEMBER_LISTING_PAGE_SIZE": "50",
        "LOG_LEVEL": "debug",
    })
    assert config.members_table == "community_members"
    assert config.page_size == 50
    assert config.log_level == "DEBUG"
    assert [(f.param_name, f.attribute_key) for f in config.build_registry()] == [
        ("city", "Location"), ("skills", "Skills")
    ]

def test_parse_filter_fields_skips_blank_chunks():
    assert parse_filter_fields("skills=Skills,, ") == [("skills", "Skills")]

@pytest.mark.parametrize("spec", ["skills", "=Skills", "skills="])
def test_malformed_field_spec(spec):
    with pytest.raises(ConfigError):
        parse_filter_fields(spec)

def test_duplicate_field_fails_at_startup():
    config = AppConfig.from_env({"MEMBER_FILTER_FIELDS": "skills=Skills,skills=Tags"})
    with pytest.raises(DuplicateFieldError):
        config.build_registry()

@pytest.mark.parametrize("page_size", ["ten", "", "0", "-5"])
def test_bad_page_size_is_config_error(page_size):
    with pytest.raises(ConfigError) as excinfo:
        AppConfig.from_env({"MEMBER_LISTING_PAGE_SIZE": page_size})
    assert "page size" in str(excinfo.value)

from member_directory_filters.dependencies.config_provider import get_app_config
from member_directory_filters.dependencies.repositories_provider import get_member_repository
from member_directory_filters.registry.filter_registry import FilterRegistry
from member_directory_filters.services.filter_ui_renderer import FilterUiRenderer
from member_directory_filters.services.member_directory_service import MemberDirectoryService
from member_directory_filters.services.member_listing_service import MemberListingService
from member_directory_filters.utils.profile_query_compiler import ProfileQueryCompiler

__filter_registry = None
__member_directory_service = None
__member_listing_service = None
__filter_ui_renderer = None


def get_filter_registry() -> FilterRegistry:
    """Built once at startup; a duplicate field fails here, not per request."""
    global __filter_registry
    if __filter_registry is None:
        __filter_registry = get_app_config().build_registry()
    return __filter_registry


def get_member_directory_service() -> MemberDirectoryService:
    """Dependency provider for MemberDirectoryService (singleton)"""
    global __member_directory_service
    if __member_directory_service is None:
        __member_directory_service = MemberDirectoryService(compiler=ProfileQueryCompiler(get_filter_registry()))
    return __member_directory_service


def get_member_listing_service() -> MemberListingService:
    """Dependency provider for MemberListingService (singleton), with directory filters installed"""
    global __member_listing_service
    if __member_listing_service is None:
        config = get_app_config()
        __member_listing_service = MemberListingService(member_repo=get_member_repository(),
                                                        page_size=config.page_size)
        get_member_directory_service().install(__member_listing_service)
    return __member_listing_service


def get_filter_ui_renderer() -> FilterUiRenderer:
    global __filter_ui_renderer
    if __filter_ui_renderer is None:
        __filter_ui_renderer = FilterUiRenderer(get_filter_registry())
    return __filter_ui_renderer

import logging
from typing import Any, Dict, Optional

from member_directory_filters.constants.app_constants import AppConstants
from member_directory_filters.constants.app_message import AppMessage
from member_directory_filters.model.profile_query_model import ProfileQuery
from member_directory_filters.utils.profile_query_compiler import ProfileQueryCompiler
from member_directory_filters.utils.request_params import RequestParams

logger = logging.getLogger(__name__)


class MemberDirectoryService:
    """
    Connects the profile query compiler to a members listing engine.

    The engine only needs ``is_members_active()`` and
    ``register_query_augmenter(fn)``; see MemberListingService.
    """

    def __init__(self, compiler: ProfileQueryCompiler):
        self.compiler = compiler
        logger.info("Initialized MemberDirectoryService")

    def build_profile_query(self, request_params: Optional[RequestParams]) -> ProfileQuery:
        return self.compiler.compile(request_params)

    def augment_listing_args(self, args: Dict[str, Any], request_params: Optional[RequestParams]) -> Dict[str, Any]:
        """
        Attach the compiled profile query to the listing args.

        Args are returned untouched when no filter is requested. Otherwise the
        query goes under ``profile_query`` and any default single-user
        restriction is cleared so it cannot conflict with the filter.
        """
        profile_query = self.build_profile_query(request_params)
        if not profile_query:
            return args

        args[AppConstants.PROFILE_QUERY] = profile_query
        args[AppConstants.USER_ID] = None
        return args

    def install(self, engine: Any) -> bool:
        """
        Register the augmenter on a listing engine.

        A missing or inactive engine is not an error: filtering is simply
        left off and False is returned.
        """
        if engine is None or not hasattr(engine, 'register_query_augmenter'):
            logger.debug(AppMessage.ENGINE_UNAVAILABLE)
            return False

        is_active = getattr(engine, 'is_members_active', None)
        try:
            active = is_active() if callable(is_active) else True
        except Exception as e:
            logger.debug(f"{AppMessage.ENGINE_UNAVAILABLE}: {str(e)}")
            return False
        if not active:
            logger.debug(AppMessage.ENGINE_UNAVAILABLE)
            return False

        engine.register_query_augmenter(self.augment_listing_args)
        logger.info(AppMessage.FILTERS_INSTALLED)
        return True

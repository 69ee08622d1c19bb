import logging
from typing import Any, Callable, Dict, List, Optional

from member_directory_filters.constants.app_constants import AppConstants
from member_directory_filters.constants.app_message import AppMessage
from member_directory_filters.model.member_model import MemberQueryResponse
from member_directory_filters.repositories.member_repository import MemberRepository
from member_directory_filters.utils.request_params import RequestParams

logger = logging.getLogger(__name__)

ListingArgs = Dict[str, Any]
QueryAugmenter = Callable[[ListingArgs, RequestParams], ListingArgs]


class MemberListingService:
    """
    Members directory listing backed by DynamoDB.

    Other components narrow the listing by registering query augmenters,
    which receive the listing args and the request params and return the
    args to use.
    """

    def __init__(self, member_repo: MemberRepository, page_size: int = 20, active: bool = True):
        self.member_repo = member_repo
        self.page_size = page_size
        self.active = active
        self._augmenters: List[QueryAugmenter] = []
        logger.info("Initialized MemberListingService")

    def is_members_active(self) -> bool:
        return self.active

    def register_query_augmenter(self, augmenter: QueryAugmenter) -> None:
        self._augmenters.append(augmenter)

    def build_listing_args(self, request_params: Optional[RequestParams] = None,
                           args: Optional[ListingArgs] = None) -> ListingArgs:
        """Apply every registered augmenter, in registration order, to a copy of args."""
        listing_args: ListingArgs = {AppConstants.PER_PAGE: self.page_size}
        listing_args.update(args or {})
        params = request_params or {}

        for augmenter in self._augmenters:
            try:
                listing_args = augmenter(dict(listing_args), params)
            except Exception as e:
                logger.error(f"{AppMessage.AUGMENTER_FAILED}: {str(e)}", exc_info=True)
        return listing_args

    def list_members(self, request_params: Optional[RequestParams] = None,
                     args: Optional[ListingArgs] = None) -> MemberQueryResponse:
        listing_args = self.build_listing_args(request_params, args)
        try:
            return self.member_repo.query_members(
                profile_query=listing_args.get(AppConstants.PROFILE_QUERY),
                user_id=listing_args.get(AppConstants.USER_ID),
                limit=listing_args.get(AppConstants.PER_PAGE),
            )
        except Exception as e:
            logger.error(f"Error listing members: {str(e)}", exc_info=True)
            raise

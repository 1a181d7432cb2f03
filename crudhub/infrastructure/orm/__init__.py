"""Infrastructure ORM Models"""

from .account_model import (
    GuestModel, MemberModel, ModeratorModel, AdminModel, CustomerModel, SellerModel, ACCOUNT_MODELS
)
from .todo_model import TodoModel
from .board_model import (
    BoardTopicModel, BoardReplyModel, BoardReportModel, BoardModerationActionModel, BoardAppealModel
)
from .community_model import (
    CommunityModel,
    CommunitySubscriptionModel,
    CommunityModeratorAssignmentModel,
    CommunityPostModel,
    CommunityCommentModel,
    CommunityPostVoteModel,
    CommunityCommentVoteModel,
)
from .shop_model import (
    ShopProductModel,
    ShopAddressModel,
    ShopCartItemModel,
    ShopOrderModel,
    ShopOrderItemModel,
    ShopOrderStatusHistoryModel,
    ShopWishlistItemModel,
)

__all__ = [
    'GuestModel',
    'MemberModel',
    'ModeratorModel',
    'AdminModel',
    'CustomerModel',
    'SellerModel',
    'ACCOUNT_MODELS',
    'TodoModel',
    'BoardTopicModel',
    'BoardReplyModel',
    'BoardReportModel',
    'BoardModerationActionModel',
    'BoardAppealModel',
    'CommunityModel',
    'CommunitySubscriptionModel',
    'CommunityModeratorAssignmentModel',
    'CommunityPostModel',
    'CommunityCommentModel',
    'CommunityPostVoteModel',
    'CommunityCommentVoteModel',
    'ShopProductModel',
    'ShopAddressModel',
    'ShopCartItemModel',
    'ShopOrderModel',
    'ShopOrderItemModel',
    'ShopOrderStatusHistoryModel',
    'ShopWishlistItemModel',
]

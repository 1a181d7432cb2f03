"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class ActorRole(str, Enum):
    GUEST = "guest"
    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"
    CUSTOMER = "customer"
    SELLER = "seller"

    @property
    def has_credentials(self) -> bool:
        return self is not ActorRole.GUEST


class AccountStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class TodoSortField(str, Enum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    DUE_DATE = "due_date"
    TITLE = "title"


class ReportReason(str, Enum):
    SPAM = "spam"
    HARASSMENT = "harassment"
    OFF_TOPIC = "off_topic"
    INAPPROPRIATE = "inappropriate"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReportStatus(str, Enum):
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"

    @property
    def is_closed(self) -> bool:
        return self in (ReportStatus.RESOLVED, ReportStatus.DISMISSED)


class ModerationActionType(str, Enum):
    WARNING = "warning"
    CONTENT_REMOVAL = "content_removal"
    SUSPENSION = "suspension"
    BAN = "ban"


class AppealStatus(str, Enum):
    PENDING_REVIEW = "pending_review"
    UPHELD = "upheld"
    OVERTURNED = "overturned"


class AppealDecision(str, Enum):
    UPHELD = "upheld"
    OVERTURNED = "overturned"


class PostType(str, Enum):
    TEXT = "text"
    LINK = "link"


class CommunitySort(str, Enum):
    SUBSCRIBERS = "subscribers"
    NEW = "new"


class PostSort(str, Enum):
    NEW = "new"
    TOP = "top"


class ProductSort(str, Enum):
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME = "name"


class ShippingMethod(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    OVERNIGHT = "overnight"
    FREE_SHIPPING = "free_shipping"


class OrderStatus(str, Enum):
    PAYMENT_CONFIRMED = "payment_confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

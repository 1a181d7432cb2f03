"""Account ORM Models, one table per role"""

from sqlalchemy import Column, String

from ...db.models import Base, AccountMixin, CredentialsMixin
from ...domain.enums import ActorRole


class GuestModel(AccountMixin, Base):
    __tablename__ = 'guests'

    user_agent = Column(String(500), nullable=True)


class MemberModel(AccountMixin, CredentialsMixin, Base):
    __tablename__ = 'members'


class ModeratorModel(AccountMixin, CredentialsMixin, Base):
    __tablename__ = 'moderators'


class AdminModel(AccountMixin, CredentialsMixin, Base):
    __tablename__ = 'admins'


class CustomerModel(AccountMixin, CredentialsMixin, Base):
    __tablename__ = 'customers'

    phone = Column(String(40), nullable=True)


class SellerModel(AccountMixin, CredentialsMixin, Base):
    __tablename__ = 'sellers'

    business_name = Column(String(200), nullable=True)


ACCOUNT_MODELS = {
    ActorRole.GUEST: GuestModel,
    ActorRole.MEMBER: MemberModel,
    ActorRole.MODERATOR: ModeratorModel,
    ActorRole.ADMIN: AdminModel,
    ActorRole.CUSTOMER: CustomerModel,
    ActorRole.SELLER: SellerModel,
}

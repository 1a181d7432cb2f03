"""Initial schema: accounts, todos, board, community and shop tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _account_columns():
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('display_name', sa.String(length=120), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='active', nullable=False),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    ]


def _credential_columns():
    return [
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
    ]


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


ACCOUNT_TABLES = ['guests', 'members', 'moderators', 'admins', 'customers', 'sellers']

# Optional per-role string columns: (name, length)
ACCOUNT_EXTRA_COLUMNS = {
    'guests': ('user_agent', 500),
    'customers': ('phone', 40),
    'sellers': ('business_name', 200),
}


def upgrade() -> None:
    """Create every table of the four services"""

    # Accounts, one table per role
    for table in ACCOUNT_TABLES:
        columns = _account_columns()
        if table in ACCOUNT_EXTRA_COLUMNS:
            name, length = ACCOUNT_EXTRA_COLUMNS[table]
            columns.append(sa.Column(name, sa.String(length=length), nullable=True))
        if table != 'guests':
            columns += _credential_columns()
        op.create_table(table, *columns, sa.PrimaryKeyConstraint('id'))
        op.create_index(f'ix_{table}_id', table, ['id'])
        op.create_index(f'ix_{table}_deleted_at', table, ['deleted_at'])
        if table != 'guests':
            op.create_index(f'ix_{table}_email', table, ['email'], unique=True)

    # Todo service
    op.create_table('todos',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_todos_id', 'todos', ['id'])
    op.create_index('ix_todos_member_id', 'todos', ['member_id'])

    # Discussion board
    op.create_table('board_topics',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('is_locked', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_pinned', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('reply_count', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_board_topics_id', 'board_topics', ['id'])
    op.create_index('ix_board_topics_author_id', 'board_topics', ['author_id'])
    op.create_index('ix_board_topics_category', 'board_topics', ['category'])
    op.create_index('ix_board_topics_deleted_at', 'board_topics', ['deleted_at'])

    op.create_table('board_replies',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('topic_id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('parent_reply_id', sa.Uuid(), nullable=True),
        sa.Column('depth', sa.Integer(), server_default='0', nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['topic_id'], ['board_topics.id']),
        sa.ForeignKeyConstraint(['author_id'], ['members.id']),
        sa.ForeignKeyConstraint(['parent_reply_id'], ['board_replies.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_board_replies_id', 'board_replies', ['id'])
    op.create_index('ix_board_replies_topic_id', 'board_replies', ['topic_id'])
    op.create_index('ix_board_replies_author_id', 'board_replies', ['author_id'])
    op.create_index('ix_board_replies_deleted_at', 'board_replies', ['deleted_at'])

    op.create_table('board_reports',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reporter_id', sa.Uuid(), nullable=False),
        sa.Column('topic_id', sa.Uuid(), nullable=True),
        sa.Column('reply_id', sa.Uuid(), nullable=True),
        sa.Column('reason', sa.String(length=30), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('moderator_id', sa.Uuid(), nullable=True),
        sa.Column('resolution_note', sa.Text(), nullable=True),
        sa.Column('resolved_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['reporter_id'], ['members.id']),
        sa.ForeignKeyConstraint(['topic_id'], ['board_topics.id']),
        sa.ForeignKeyConstraint(['reply_id'], ['board_replies.id']),
        sa.ForeignKeyConstraint(['moderator_id'], ['moderators.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_board_reports_id', 'board_reports', ['id'])
    op.create_index('ix_board_reports_reporter_id', 'board_reports', ['reporter_id'])
    op.create_index('ix_board_reports_status', 'board_reports', ['status'])

    op.create_table('board_moderation_actions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('moderator_id', sa.Uuid(), nullable=False),
        sa.Column('target_member_id', sa.Uuid(), nullable=False),
        sa.Column('report_id', sa.Uuid(), nullable=True),
        sa.Column('action_type', sa.String(length=30), nullable=False),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('is_appealable', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['moderator_id'], ['moderators.id']),
        sa.ForeignKeyConstraint(['target_member_id'], ['members.id']),
        sa.ForeignKeyConstraint(['report_id'], ['board_reports.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_board_moderation_actions_id', 'board_moderation_actions', ['id'])
    op.create_index('ix_board_moderation_actions_target_member_id', 'board_moderation_actions', ['target_member_id'])

    op.create_table('board_appeals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.Column('moderation_action_id', sa.Uuid(), nullable=False),
        sa.Column('explanation', sa.Text(), nullable=False),
        sa.Column('evidence', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), server_default='pending_review', nullable=False),
        sa.Column('decision_reasoning', sa.Text(), nullable=True),
        sa.Column('reviewing_admin_id', sa.Uuid(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.ForeignKeyConstraint(['moderation_action_id'], ['board_moderation_actions.id']),
        sa.ForeignKeyConstraint(['reviewing_admin_id'], ['admins.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('member_id', 'moderation_action_id', name='uq_board_appeals_member_action')
    )
    op.create_index('ix_board_appeals_id', 'board_appeals', ['id'])
    op.create_index('ix_board_appeals_member_id', 'board_appeals', ['member_id'])
    op.create_index('ix_board_appeals_status', 'board_appeals', ['status'])

    # Community platform
    op.create_table('communities',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=21), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('creator_id', sa.Uuid(), nullable=False),
        sa.Column('subscriber_count', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['creator_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_communities_id', 'communities', ['id'])
    op.create_index('ix_communities_name', 'communities', ['name'], unique=True)
    op.create_index('ix_communities_deleted_at', 'communities', ['deleted_at'])

    op.create_table('community_subscriptions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('community_id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['community_id'], ['communities.id']),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('community_id', 'member_id', name='uq_community_subscriptions_member')
    )
    op.create_index('ix_community_subscriptions_id', 'community_subscriptions', ['id'])
    op.create_index('ix_community_subscriptions_community_id', 'community_subscriptions', ['community_id'])
    op.create_index('ix_community_subscriptions_member_id', 'community_subscriptions', ['member_id'])

    op.create_table('community_moderator_assignments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('community_id', sa.Uuid(), nullable=False),
        sa.Column('moderator_id', sa.Uuid(), nullable=False),
        sa.Column('assigned_by_admin_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['community_id'], ['communities.id']),
        sa.ForeignKeyConstraint(['moderator_id'], ['moderators.id']),
        sa.ForeignKeyConstraint(['assigned_by_admin_id'], ['admins.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('community_id', 'moderator_id', name='uq_community_moderator_assignments')
    )
    op.create_index('ix_community_moderator_assignments_id', 'community_moderator_assignments', ['id'])
    op.create_index(
        'ix_community_moderator_assignments_community_id', 'community_moderator_assignments', ['community_id']
    )
    op.create_index(
        'ix_community_moderator_assignments_moderator_id', 'community_moderator_assignments', ['moderator_id']
    )

    op.create_table('community_posts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('community_id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('post_type', sa.String(length=10), server_default='text', nullable=False),
        sa.Column('title', sa.String(length=300), nullable=False),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('url', sa.String(length=2000), nullable=True),
        sa.Column('score', sa.Integer(), server_default='0', nullable=False),
        sa.Column('upvote_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('downvote_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('comment_count', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['community_id'], ['communities.id']),
        sa.ForeignKeyConstraint(['author_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_community_posts_id', 'community_posts', ['id'])
    op.create_index('ix_community_posts_community_id', 'community_posts', ['community_id'])
    op.create_index('ix_community_posts_author_id', 'community_posts', ['author_id'])
    op.create_index('ix_community_posts_score', 'community_posts', ['score'])
    op.create_index('ix_community_posts_deleted_at', 'community_posts', ['deleted_at'])

    op.create_table('community_comments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('post_id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('parent_comment_id', sa.Uuid(), nullable=True),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('score', sa.Integer(), server_default='0', nullable=False),
        sa.Column('upvote_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('downvote_count', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['post_id'], ['community_posts.id']),
        sa.ForeignKeyConstraint(['author_id'], ['members.id']),
        sa.ForeignKeyConstraint(['parent_comment_id'], ['community_comments.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_community_comments_id', 'community_comments', ['id'])
    op.create_index('ix_community_comments_post_id', 'community_comments', ['post_id'])
    op.create_index('ix_community_comments_author_id', 'community_comments', ['author_id'])
    op.create_index('ix_community_comments_deleted_at', 'community_comments', ['deleted_at'])

    op.create_table('community_post_votes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('post_id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.Column('value', sa.SmallInteger(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['post_id'], ['community_posts.id']),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('post_id', 'member_id', name='uq_community_post_votes_member')
    )
    op.create_index('ix_community_post_votes_id', 'community_post_votes', ['id'])
    op.create_index('ix_community_post_votes_post_id', 'community_post_votes', ['post_id'])

    op.create_table('community_comment_votes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('comment_id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Uuid(), nullable=False),
        sa.Column('value', sa.SmallInteger(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['comment_id'], ['community_comments.id']),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('comment_id', 'member_id', name='uq_community_comment_votes_member')
    )
    op.create_index('ix_community_comment_votes_id', 'community_comment_votes', ['id'])
    op.create_index('ix_community_comment_votes_comment_id', 'community_comment_votes', ['comment_id'])

    # Shopping mall
    op.create_table('shop_products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=80), nullable=True),
        sa.Column('price_cents', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(length=3), server_default='USD', nullable=False),
        sa.Column('stock_quantity', sa.Integer(), server_default='0', nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_shop_products_id', 'shop_products', ['id'])
    op.create_index('ix_shop_products_seller_id', 'shop_products', ['seller_id'])
    op.create_index('ix_shop_products_category', 'shop_products', ['category'])
    op.create_index('ix_shop_products_deleted_at', 'shop_products', ['deleted_at'])

    op.create_table('shop_addresses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('recipient_name', sa.String(length=120), nullable=False),
        sa.Column('phone', sa.String(length=40), nullable=False),
        sa.Column('address_line1', sa.String(length=200), nullable=False),
        sa.Column('address_line2', sa.String(length=200), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('state_province', sa.String(length=100), nullable=True),
        sa.Column('postal_code', sa.String(length=20), nullable=False),
        sa.Column('country', sa.String(length=2), nullable=False),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_shop_addresses_id', 'shop_addresses', ['id'])
    op.create_index('ix_shop_addresses_customer_id', 'shop_addresses', ['customer_id'])
    op.create_index('ix_shop_addresses_deleted_at', 'shop_addresses', ['deleted_at'])

    op.create_table('shop_cart_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id']),
        sa.ForeignKeyConstraint(['product_id'], ['shop_products.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('customer_id', 'product_id', name='uq_shop_cart_items_product')
    )
    op.create_index('ix_shop_cart_items_id', 'shop_cart_items', ['id'])
    op.create_index('ix_shop_cart_items_customer_id', 'shop_cart_items', ['customer_id'])

    op.create_table('shop_orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('order_number', sa.String(length=32), nullable=False),
        sa.Column('checkout_transaction_id', sa.Uuid(), nullable=False),
        sa.Column('status', sa.String(length=30), server_default='payment_confirmed', nullable=False),
        sa.Column('shipping_method', sa.String(length=30), nullable=False),
        sa.Column('subtotal_cents', sa.Integer(), nullable=False),
        sa.Column('tax_cents', sa.Integer(), nullable=False),
        sa.Column('shipping_cents', sa.Integer(), nullable=False),
        sa.Column('total_cents', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(length=3), server_default='USD', nullable=False),
        sa.Column('delivery_recipient_name', sa.String(length=120), nullable=False),
        sa.Column('delivery_phone', sa.String(length=40), nullable=False),
        sa.Column('delivery_address_line1', sa.String(length=200), nullable=False),
        sa.Column('delivery_address_line2', sa.String(length=200), nullable=True),
        sa.Column('delivery_city', sa.String(length=100), nullable=False),
        sa.Column('delivery_state_province', sa.String(length=100), nullable=True),
        sa.Column('delivery_postal_code', sa.String(length=20), nullable=False),
        sa.Column('delivery_country', sa.String(length=2), nullable=False),
        sa.Column('payment_confirmed_at', sa.DateTime(), nullable=True),
        sa.Column('shipped_at', sa.DateTime(), nullable=True),
        sa.Column('delivered_at', sa.DateTime(), nullable=True),
        sa.Column('cancelled_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id']),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('order_number')
    )
    op.create_index('ix_shop_orders_id', 'shop_orders', ['id'])
    op.create_index('ix_shop_orders_customer_id', 'shop_orders', ['customer_id'])
    op.create_index('ix_shop_orders_seller_id', 'shop_orders', ['seller_id'])
    op.create_index('ix_shop_orders_checkout_transaction_id', 'shop_orders', ['checkout_transaction_id'])
    op.create_index('ix_shop_orders_status', 'shop_orders', ['status'])

    op.create_table('shop_order_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('product_name', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price_cents', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['shop_orders.id']),
        sa.ForeignKeyConstraint(['product_id'], ['shop_products.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_shop_order_items_id', 'shop_order_items', ['id'])
    op.create_index('ix_shop_order_items_order_id', 'shop_order_items', ['order_id'])

    op.create_table('shop_order_status_history',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('previous_status', sa.String(length=30), nullable=True),
        sa.Column('new_status', sa.String(length=30), nullable=False),
        sa.Column('change_reason', sa.Text(), nullable=True),
        sa.Column('changed_by_role', sa.String(length=20), nullable=False),
        sa.Column('changed_by_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['shop_orders.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_shop_order_status_history_id', 'shop_order_status_history', ['id'])
    op.create_index('ix_shop_order_status_history_order_id', 'shop_order_status_history', ['order_id'])

    op.create_table('shop_wishlist_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id']),
        sa.ForeignKeyConstraint(['product_id'], ['shop_products.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('customer_id', 'product_id', name='uq_shop_wishlist_items_product')
    )
    op.create_index('ix_shop_wishlist_items_id', 'shop_wishlist_items', ['id'])
    op.create_index('ix_shop_wishlist_items_customer_id', 'shop_wishlist_items', ['customer_id'])


def downgrade() -> None:
    """Drop every table in reverse dependency order"""
    for table in [
        'shop_wishlist_items',
        'shop_order_status_history',
        'shop_order_items',
        'shop_orders',
        'shop_cart_items',
        'shop_addresses',
        'shop_products',
        'community_comment_votes',
        'community_post_votes',
        'community_comments',
        'community_posts',
        'community_moderator_assignments',
        'community_subscriptions',
        'communities',
        'board_appeals',
        'board_moderation_actions',
        'board_reports',
        'board_replies',
        'board_topics',
        'todos',
    ]:
        op.drop_table(table)
    for table in reversed(ACCOUNT_TABLES):
        op.drop_table(table)

# =============================================================================
# tests/test_board.py - Discussion board: topics, replies, reports, appeals
# =============================================================================

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from crudhub.core.config import settings
from crudhub.infrastructure.orm.board_model import BoardModerationActionModel

from tests.conftest import API

BOARD = f"{API}/board"


def create_topic(client, account, **fields):
    payload = {"title": "Welcome", "body": "Say hello", **fields}
    response = client.post(f"{BOARD}/member/topics", json=payload, headers=account.headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_reply(client, account, topic_id, **fields):
    payload = {"body": "Hello!", **fields}
    return client.post(f"{BOARD}/member/topics/{topic_id}/replies", json=payload, headers=account.headers)


def issue_action(client, moderator, member_id, **fields):
    payload = {"target_member_id": member_id, "action_type": "warning", "reason": "Spam links", **fields}
    response = client.post(f"{BOARD}/moderator/moderation-actions", json=payload, headers=moderator.headers)
    assert response.status_code == 201, response.text
    return response.json()


def appeal(client, member, action_id):
    return client.post(
        f"{BOARD}/member/appeals",
        json={"moderation_action_id": action_id, "explanation": "That was not spam"},
        headers=member.headers,
    )


class TestTopics:

    def test_create_and_read_publicly(self, client, member):
        topic = create_topic(client, member, category="general")

        response = client.get(f"{BOARD}/topics/{topic['id']}")

        assert response.status_code == 200
        assert response.json()["author_id"] == member.id
        assert response.json()["reply_count"] == 0

    def test_listing_puts_pinned_first(self, client, member, moderator):
        old = create_topic(client, member, title="old")
        create_topic(client, member, title="new")
        client.put(f"{BOARD}/moderator/topics/{old['id']}/flags", json={"is_pinned": True}, headers=moderator.headers)

        titles = [topic["title"] for topic in client.get(f"{BOARD}/topics").json()["data"]]

        assert titles[0] == "old"

    def test_listing_filters_by_category(self, client, member):
        create_topic(client, member, title="a", category="help")
        create_topic(client, member, title="b", category="news")

        body = client.get(f"{BOARD}/topics", params={"category": "help"}).json()

        assert [topic["title"] for topic in body["data"]] == ["a"]

    def test_search_matches_literally(self, client, member):
        create_topic(client, member, title="snake_case or camelCase?", body="naming")
        create_topic(client, member, title="snake case basics", body="naming")

        body = client.get(f"{BOARD}/topics", params={"search": "snake_case"}).json()

        assert [topic["title"] for topic in body["data"]] == ["snake_case or camelCase?"]

    def test_only_author_may_update(self, client, join):
        author, other = join("member"), join("member")
        topic = create_topic(client, author)

        response = client.put(f"{BOARD}/member/topics/{topic['id']}", json={"title": "hijack"}, headers=other.headers)

        assert response.status_code == 403

    def test_locked_topic_cannot_be_edited(self, client, member, moderator):
        topic = create_topic(client, member)
        client.put(f"{BOARD}/moderator/topics/{topic['id']}/flags", json={"is_locked": True}, headers=moderator.headers)

        response = client.put(f"{BOARD}/member/topics/{topic['id']}", json={"title": "edit"}, headers=member.headers)

        assert response.status_code == 403

    def test_soft_deleted_topic_disappears(self, client, member):
        topic = create_topic(client, member)

        assert client.delete(f"{BOARD}/member/topics/{topic['id']}", headers=member.headers).status_code == 204
        assert client.get(f"{BOARD}/topics/{topic['id']}").status_code == 404
        assert client.get(f"{BOARD}/topics").json()["pagination"]["records"] == 0

    def test_moderator_deletes_any_topic(self, client, member, moderator):
        topic = create_topic(client, member)

        response = client.delete(f"{BOARD}/moderator/topics/{topic['id']}", headers=moderator.headers)

        assert response.status_code == 204

    def test_member_cannot_set_flags(self, client, member):
        topic = create_topic(client, member)

        response = client.put(
            f"{BOARD}/moderator/topics/{topic['id']}/flags", json={"is_pinned": True}, headers=member.headers
        )

        assert response.status_code == 403


class TestReplies:

    def test_reply_increments_count(self, client, member):
        topic = create_topic(client, member)

        response = create_reply(client, member, topic["id"])

        assert response.status_code == 201
        assert response.json()["depth"] == 0
        assert client.get(f"{BOARD}/topics/{topic['id']}").json()["reply_count"] == 1

    def test_reply_to_missing_topic(self, client, member):
        response = create_reply(client, member, uuid4())

        assert response.status_code == 404

    def test_locked_topic_rejects_replies(self, client, member, moderator):
        topic = create_topic(client, member)
        client.put(f"{BOARD}/moderator/topics/{topic['id']}/flags", json={"is_locked": True}, headers=moderator.headers)

        response = create_reply(client, member, topic["id"])

        assert response.status_code == 403

    def test_parent_must_belong_to_topic(self, client, member):
        first, second = create_topic(client, member), create_topic(client, member)
        parent = create_reply(client, member, first["id"]).json()

        response = create_reply(client, member, second["id"], parent_reply_id=parent["id"])

        assert response.status_code == 404

    def test_nesting_is_limited(self, client, member):
        topic = create_topic(client, member)
        parent = create_reply(client, member, topic["id"]).json()
        for _ in range(settings.MAX_REPLY_DEPTH):
            parent = create_reply(client, member, topic["id"], parent_reply_id=parent["id"]).json()
        assert parent["depth"] == settings.MAX_REPLY_DEPTH

        response = create_reply(client, member, topic["id"], parent_reply_id=parent["id"])

        assert response.status_code == 400

    def test_replies_listed_oldest_first(self, client, member):
        topic = create_topic(client, member)
        create_reply(client, member, topic["id"], body="first")
        create_reply(client, member, topic["id"], body="second")

        body = client.get(f"{BOARD}/topics/{topic['id']}/replies").json()

        assert [reply["body"] for reply in body["data"]] == ["first", "second"]

    def test_delete_reply_decrements_count(self, client, member):
        topic = create_topic(client, member)
        reply = create_reply(client, member, topic["id"]).json()

        response = client.delete(f"{BOARD}/member/replies/{reply['id']}", headers=member.headers)

        assert response.status_code == 204
        assert client.get(f"{BOARD}/topics/{topic['id']}").json()["reply_count"] == 0
        assert client.get(f"{BOARD}/topics/{topic['id']}/replies").json()["data"] == []

    def test_moderator_removes_any_reply(self, client, join, moderator):
        author, other = join("member"), join("member")
        topic = create_topic(client, author)
        create_reply(client, author, topic["id"], body="kept")
        spam = create_reply(client, other, topic["id"], body="buy now").json()

        response = client.delete(f"{BOARD}/moderator/replies/{spam['id']}", headers=moderator.headers)

        assert response.status_code == 204
        replies = client.get(f"{BOARD}/topics/{topic['id']}/replies").json()["data"]
        assert [reply["body"] for reply in replies] == ["kept"]
        assert client.get(f"{BOARD}/topics/{topic['id']}").json()["reply_count"] == 1

    def test_member_cannot_use_moderator_reply_removal(self, client, join):
        author, other = join("member"), join("member")
        topic = create_topic(client, author)
        reply = create_reply(client, author, topic["id"]).json()

        response = client.delete(f"{BOARD}/moderator/replies/{reply['id']}", headers=other.headers)

        assert response.status_code == 403
        assert client.get(f"{BOARD}/topics/{topic['id']}").json()["reply_count"] == 1

    def test_only_author_may_edit_reply(self, client, join):
        author, other = join("member"), join("member")
        topic = create_topic(client, author)
        reply = create_reply(client, author, topic["id"]).json()

        response = client.put(f"{BOARD}/member/replies/{reply['id']}", json={"body": "x"}, headers=other.headers)

        assert response.status_code == 403


class TestReports:

    def test_report_flow(self, client, join, moderator):
        author, reporter = join("member"), join("member")
        topic = create_topic(client, author)

        created = client.post(
            f"{BOARD}/member/reports",
            json={"topic_id": topic["id"], "reason": "spam"},
            headers=reporter.headers,
        )
        assert created.status_code == 201
        report_id = created.json()["id"]

        listed = client.get(f"{BOARD}/moderator/reports", params={"status": "pending"}, headers=moderator.headers)
        assert [report["id"] for report in listed.json()["data"]] == [report_id]

        resolved = client.put(
            f"{BOARD}/moderator/reports/{report_id}",
            json={"status": "resolved", "resolution_note": "Removed"},
            headers=moderator.headers,
        )
        assert resolved.status_code == 200
        assert resolved.json()["moderator_id"] == moderator.id
        assert resolved.json()["resolved_at"] is not None

        reopened = client.put(
            f"{BOARD}/moderator/reports/{report_id}", json={"status": "pending"}, headers=moderator.headers
        )
        assert reopened.status_code == 409

    def test_exactly_one_target(self, client, member):
        response = client.post(f"{BOARD}/member/reports", json={"reason": "spam"}, headers=member.headers)

        assert response.status_code == 400

    def test_missing_target(self, client, member):
        response = client.post(
            f"{BOARD}/member/reports", json={"reply_id": str(uuid4()), "reason": "spam"}, headers=member.headers
        )

        assert response.status_code == 404

    def test_cannot_report_own_content(self, client, member):
        topic = create_topic(client, member)

        response = client.post(
            f"{BOARD}/member/reports", json={"topic_id": topic["id"], "reason": "spam"}, headers=member.headers
        )

        assert response.status_code == 400

    def test_duplicate_open_report(self, client, join):
        author, reporter = join("member"), join("member")
        topic = create_topic(client, author)
        payload = {"topic_id": topic["id"], "reason": "harassment"}

        client.post(f"{BOARD}/member/reports", json=payload, headers=reporter.headers)
        response = client.post(f"{BOARD}/member/reports", json=payload, headers=reporter.headers)

        assert response.status_code == 409


class TestModerationActions:

    def test_action_against_missing_member(self, client, moderator):
        response = client.post(
            f"{BOARD}/moderator/moderation-actions",
            json={"target_member_id": str(uuid4()), "action_type": "ban", "reason": "x"},
            headers=moderator.headers,
        )

        assert response.status_code == 404

    def test_action_with_missing_report(self, client, member, moderator):
        response = client.post(
            f"{BOARD}/moderator/moderation-actions",
            json={"target_member_id": member.id, "action_type": "ban", "reason": "x", "report_id": str(uuid4())},
            headers=moderator.headers,
        )

        assert response.status_code == 404

    def test_actions_are_appealable_by_default(self, client, member, moderator):
        action = issue_action(client, moderator, member.id)

        assert action["is_appealable"] is True
        assert action["moderator_id"] == moderator.id


class TestAppeals:

    def test_appeal_and_decision(self, client, member, moderator, admin):
        action = issue_action(client, moderator, member.id)

        created = appeal(client, member, action["id"])
        assert created.status_code == 201
        assert created.json()["status"] == "pending_review"

        mine = client.get(f"{BOARD}/member/appeals", headers=member.headers).json()
        assert mine["pagination"]["records"] == 1

        decided = client.put(
            f"{BOARD}/admin/appeals/{created.json()['id']}",
            json={"decision": "overturned", "decision_reasoning": "Link was legitimate"},
            headers=admin.headers,
        )
        assert decided.status_code == 200
        assert decided.json()["status"] == "overturned"
        assert decided.json()["reviewing_admin_id"] == admin.id

        again = client.put(
            f"{BOARD}/admin/appeals/{created.json()['id']}",
            json={"decision": "upheld", "decision_reasoning": "Changed my mind"},
            headers=admin.headers,
        )
        assert again.status_code == 409

    def test_admin_filters_appeals_by_status(self, client, member, moderator, admin):
        appeal(client, member, issue_action(client, moderator, member.id)["id"])

        pending = client.get(f"{BOARD}/admin/appeals", params={"status": "pending_review"}, headers=admin.headers)
        upheld = client.get(f"{BOARD}/admin/appeals", params={"status": "upheld"}, headers=admin.headers)

        assert pending.json()["pagination"]["records"] == 1
        assert upheld.json()["pagination"]["records"] == 0

    def test_missing_action(self, client, member):
        assert appeal(client, member, str(uuid4())).status_code == 404

    def test_action_against_someone_else(self, client, join, moderator):
        target, bystander = join("member"), join("member")
        action = issue_action(client, moderator, target.id)

        assert appeal(client, bystander, action["id"]).status_code == 403

    def test_unappealable_action(self, client, member, moderator):
        action = issue_action(client, moderator, member.id, is_appealable=False)

        assert appeal(client, member, action["id"]).status_code == 403

    def test_appeal_window(self, client, member, moderator, db_session):
        action = issue_action(client, moderator, member.id)
        row = db_session.get(BoardModerationActionModel, UUID(action["id"]))
        row.created_at = datetime.utcnow() - timedelta(days=settings.APPEAL_WINDOW_DAYS + 1)
        db_session.commit()

        assert appeal(client, member, action["id"]).status_code == 400

    def test_duplicate_appeal(self, client, member, moderator):
        action = issue_action(client, moderator, member.id)
        appeal(client, member, action["id"])

        assert appeal(client, member, action["id"]).status_code == 409

    def test_pending_appeal_limit(self, client, member, moderator):
        for _ in range(settings.MAX_PENDING_APPEALS):
            action = issue_action(client, moderator, member.id)
            assert appeal(client, member, action["id"]).status_code == 201

        action = issue_action(client, moderator, member.id)

        assert appeal(client, member, action["id"]).status_code == 400

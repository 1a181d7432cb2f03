# =============================================================================
# tests/test_community.py - Communities, subscriptions, posts, comments, votes
# =============================================================================

from uuid import uuid4

from tests.conftest import API

COMMUNITY = f"{API}/community"


def create_community(client, account, name="python_fans", **fields):
    payload = {"name": name, "title": "Python Fans", **fields}
    response = client.post(f"{COMMUNITY}/member/communities", json=payload, headers=account.headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_post(client, account, community_id, **fields):
    payload = {"title": "Hello world", "body": "First!", **fields}
    return client.post(f"{COMMUNITY}/member/communities/{community_id}/posts", json=payload, headers=account.headers)


def create_comment(client, account, post_id, **fields):
    payload = {"body": "Nice post", **fields}
    return client.post(f"{COMMUNITY}/member/posts/{post_id}/comments", json=payload, headers=account.headers)


def vote(client, account, kind, target_id, value):
    return client.put(f"{COMMUNITY}/member/{kind}/{target_id}/vote", json={"value": value}, headers=account.headers)


class TestCommunities:

    def test_creator_is_subscribed(self, client, member):
        community = create_community(client, member)

        subscriptions = client.get(f"{COMMUNITY}/member/subscriptions", headers=member.headers).json()

        assert community["subscriber_count"] == 1
        assert community["creator_id"] == member.id
        assert [sub["community_id"] for sub in subscriptions["data"]] == [community["id"]]

    def test_name_is_unique_ignoring_case(self, client, join):
        create_community(client, join("member"), name="gardening")

        response = client.post(
            f"{COMMUNITY}/member/communities",
            json={"name": "Gardening", "title": "Other"},
            headers=join("member").headers,
        )

        assert response.status_code == 409

    def test_name_format(self, client, member):
        response = client.post(
            f"{COMMUNITY}/member/communities", json={"name": "no spaces!", "title": "Bad"}, headers=member.headers
        )

        assert response.status_code == 422

    def test_list_sorted_by_subscribers(self, client, join):
        owner, fan = join("member"), join("member")
        create_community(client, owner, name="quiet")
        busy = create_community(client, owner, name="busy")
        client.post(f"{COMMUNITY}/member/communities/{busy['id']}/subscription", headers=fan.headers)

        body = client.get(f"{COMMUNITY}/communities", params={"sort": "subscribers"}).json()

        assert [c["name"] for c in body["data"]] == ["busy", "quiet"]

    def test_search(self, client, member):
        create_community(client, member, name="rustaceans")
        create_community(client, member, name="gophers")

        body = client.get(f"{COMMUNITY}/communities", params={"search": "rust"}).json()

        assert [c["name"] for c in body["data"]] == ["rustaceans"]

    def test_search_underscore_is_not_a_wildcard(self, client, member):
        create_community(client, member, name="py_fans")
        create_community(client, member, name="pyxfans")

        body = client.get(f"{COMMUNITY}/communities", params={"search": "py_"}).json()

        assert [c["name"] for c in body["data"]] == ["py_fans"]

    def test_only_creator_may_update_or_delete(self, client, join):
        creator, other = join("member"), join("member")
        community = create_community(client, creator)
        url = f"{COMMUNITY}/member/communities/{community['id']}"

        assert client.put(url, json={"title": "Mine"}, headers=other.headers).status_code == 403
        assert client.delete(url, headers=other.headers).status_code == 403
        assert client.put(url, json={"title": "Renamed"}, headers=creator.headers).json()["title"] == "Renamed"

    def test_deleted_community_is_hidden(self, client, member):
        community = create_community(client, member)

        client.delete(f"{COMMUNITY}/member/communities/{community['id']}", headers=member.headers)

        assert client.get(f"{COMMUNITY}/communities/{community['id']}").status_code == 404


class TestSubscriptions:

    def test_subscribe_and_unsubscribe_adjust_counter(self, client, join):
        owner, fan = join("member"), join("member")
        community = create_community(client, owner)
        url = f"{COMMUNITY}/member/communities/{community['id']}/subscription"

        assert client.post(url, headers=fan.headers).status_code == 201
        assert client.get(f"{COMMUNITY}/communities/{community['id']}").json()["subscriber_count"] == 2

        assert client.delete(url, headers=fan.headers).status_code == 204
        assert client.get(f"{COMMUNITY}/communities/{community['id']}").json()["subscriber_count"] == 1

    def test_double_subscribe_is_conflict(self, client, member):
        community = create_community(client, member)

        response = client.post(f"{COMMUNITY}/member/communities/{community['id']}/subscription", headers=member.headers)

        assert response.status_code == 409

    def test_unsubscribe_without_subscription(self, client, join):
        owner, stranger = join("member"), join("member")
        community = create_community(client, owner)

        response = client.delete(
            f"{COMMUNITY}/member/communities/{community['id']}/subscription", headers=stranger.headers
        )

        assert response.status_code == 404


class TestModeratorAssignments:

    def test_assign_and_unassign(self, client, member, moderator, admin):
        community = create_community(client, member)
        url = f"{COMMUNITY}/admin/communities/{community['id']}/moderators"

        created = client.post(url, json={"moderator_id": moderator.id}, headers=admin.headers)
        duplicate = client.post(url, json={"moderator_id": moderator.id}, headers=admin.headers)
        removed = client.delete(f"{url}/{moderator.id}", headers=admin.headers)

        assert created.status_code == 201
        assert created.json()["assigned_by_admin_id"] == admin.id
        assert duplicate.status_code == 409
        assert removed.status_code == 204
        assert client.delete(f"{url}/{moderator.id}", headers=admin.headers).status_code == 404

    def test_assign_missing_moderator(self, client, member, admin):
        community = create_community(client, member)

        response = client.post(
            f"{COMMUNITY}/admin/communities/{community['id']}/moderators",
            json={"moderator_id": str(uuid4())},
            headers=admin.headers,
        )

        assert response.status_code == 404


class TestPosts:

    def test_text_post_needs_body(self, client, member):
        community = create_community(client, member)

        response = create_post(client, member, community["id"], body=None)

        assert response.status_code == 400

    def test_link_post_needs_url(self, client, member):
        community = create_community(client, member)

        missing = create_post(client, member, community["id"], post_type="link", body=None)
        ok = create_post(client, member, community["id"], post_type="link", body=None, url="https://example.com")

        assert missing.status_code == 400
        assert ok.status_code == 201
        assert ok.json()["score"] == 0

    def test_post_in_missing_community(self, client, member):
        assert create_post(client, member, uuid4()).status_code == 404

    def test_top_sort_uses_score(self, client, join):
        author, voter = join("member"), join("member")
        community = create_community(client, author)
        popular = create_post(client, author, community["id"], title="popular").json()
        create_post(client, author, community["id"], title="newest")
        vote(client, voter, "posts", popular["id"], 1)

        top = client.get(f"{COMMUNITY}/communities/{community['id']}/posts", params={"sort": "top"}).json()
        new = client.get(f"{COMMUNITY}/communities/{community['id']}/posts", params={"sort": "new"}).json()

        assert [post["title"] for post in top["data"]] == ["popular", "newest"]
        assert [post["title"] for post in new["data"]][0] == "newest"

    def test_author_updates_and_deletes(self, client, join):
        author, other = join("member"), join("member")
        community = create_community(client, author)
        post = create_post(client, author, community["id"]).json()
        url = f"{COMMUNITY}/member/posts/{post['id']}"

        assert client.put(url, json={"title": "Edited"}, headers=other.headers).status_code == 403
        assert client.put(url, json={"title": "Edited"}, headers=author.headers).json()["title"] == "Edited"
        assert client.delete(url, headers=other.headers).status_code == 403
        assert client.delete(url, headers=author.headers).status_code == 204
        assert client.get(f"{COMMUNITY}/posts/{post['id']}").status_code == 404

    def test_only_assigned_moderator_may_remove(self, client, member, moderator, admin):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()
        url = f"{COMMUNITY}/moderator/posts/{post['id']}"

        assert client.delete(url, headers=moderator.headers).status_code == 403

        client.post(
            f"{COMMUNITY}/admin/communities/{community['id']}/moderators",
            json={"moderator_id": moderator.id},
            headers=admin.headers,
        )
        assert client.delete(url, headers=moderator.headers).status_code == 204

    def test_admin_removes_any_post(self, client, member, admin):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()

        response = client.delete(f"{COMMUNITY}/admin/posts/{post['id']}", headers=admin.headers)

        assert response.status_code == 204
        assert client.get(f"{COMMUNITY}/posts/{post['id']}").status_code == 404


class TestComments:

    def test_comment_counter(self, client, member):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()

        comment = create_comment(client, member, post["id"])
        assert comment.status_code == 201
        assert client.get(f"{COMMUNITY}/posts/{post['id']}").json()["comment_count"] == 1

        client.delete(f"{COMMUNITY}/member/comments/{comment.json()['id']}", headers=member.headers)
        assert client.get(f"{COMMUNITY}/posts/{post['id']}").json()["comment_count"] == 0
        assert client.get(f"{COMMUNITY}/posts/{post['id']}/comments").json()["data"] == []

    def test_parent_must_belong_to_post(self, client, member):
        community = create_community(client, member)
        first = create_post(client, member, community["id"]).json()
        second = create_post(client, member, community["id"]).json()
        parent = create_comment(client, member, first["id"]).json()

        response = create_comment(client, member, second["id"], parent_comment_id=parent["id"])

        assert response.status_code == 404

    def test_threaded_reply(self, client, member):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()
        parent = create_comment(client, member, post["id"]).json()

        child = create_comment(client, member, post["id"], parent_comment_id=parent["id"])

        assert child.status_code == 201
        assert child.json()["parent_comment_id"] == parent["id"]

    def test_only_author_may_edit(self, client, join):
        author, other = join("member"), join("member")
        community = create_community(client, author)
        post = create_post(client, author, community["id"]).json()
        comment = create_comment(client, author, post["id"]).json()

        response = client.put(f"{COMMUNITY}/member/comments/{comment['id']}", json={"body": "x"}, headers=other.headers)

        assert response.status_code == 403

    def test_unassigned_moderator_cannot_remove(self, client, member, moderator):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()
        comment = create_comment(client, member, post["id"]).json()

        response = client.delete(f"{COMMUNITY}/moderator/comments/{comment['id']}", headers=moderator.headers)

        assert response.status_code == 403


class TestVotes:

    def test_vote_switch_and_remove(self, client, join):
        author, alice, bob = join("member"), join("member"), join("member")
        community = create_community(client, author)
        post = create_post(client, author, community["id"]).json()

        vote(client, alice, "posts", post["id"], 1)
        both = vote(client, bob, "posts", post["id"], 1).json()
        assert (both["score"], both["upvote_count"], both["downvote_count"]) == (2, 2, 0)

        switched = vote(client, bob, "posts", post["id"], -1).json()
        assert (switched["score"], switched["upvote_count"], switched["downvote_count"]) == (0, 1, 1)

        url = f"{COMMUNITY}/member/posts/{post['id']}/vote"
        assert client.get(url, headers=bob.headers).json()["value"] == -1
        assert client.delete(url, headers=bob.headers).status_code == 204
        assert client.get(url, headers=bob.headers).status_code == 404
        assert client.get(f"{COMMUNITY}/posts/{post['id']}").json()["score"] == 1

    def test_remove_is_idempotent(self, client, member):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()
        url = f"{COMMUNITY}/member/posts/{post['id']}/vote"

        assert client.delete(url, headers=member.headers).status_code == 204
        assert client.delete(url, headers=member.headers).status_code == 204

    def test_invalid_vote_value(self, client, member):
        community = create_community(client, member)
        post = create_post(client, member, community["id"]).json()

        assert vote(client, member, "posts", post["id"], 2).status_code == 422

    def test_vote_on_missing_post(self, client, member):
        assert vote(client, member, "posts", uuid4(), 1).status_code == 404

    def test_comment_votes(self, client, join):
        author, voter = join("member"), join("member")
        community = create_community(client, author)
        post = create_post(client, author, community["id"]).json()
        comment = create_comment(client, author, post["id"]).json()

        response = vote(client, voter, "comments", comment["id"], -1)

        assert response.status_code == 200
        assert response.json()["score"] == -1
        assert client.delete(
            f"{COMMUNITY}/member/comments/{comment['id']}/vote", headers=voter.headers
        ).status_code == 204

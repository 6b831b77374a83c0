from sqlalchemy import event, text

from fitdiet import db
from fitdiet.models import CommunityPost, PostLike


def create_post(client, **overrides):
    payload = {"content": "New 5k PR!", "workout_type": "Running", "calories_burned": 350}
    payload.update(overrides)
    return client.post("/api/community/posts", json=payload)


class TestPosts:
    def test_create_post(self, auth_client):
        res = create_post(auth_client, achievement="First 5k")
        assert res.status_code == 201
        post = res.get_json()
        assert post["content"] == "New 5k PR!"
        assert post["username"] == "alice"
        assert post["likes"] == 0
        assert post["user_liked"] is False
        assert post["achievement"] == "First 5k"

    def test_content_required(self, auth_client):
        res = create_post(auth_client, content="   ")
        assert res.status_code == 400
        assert res.get_json()["error"] == "Content is required"

    def test_feed_is_newest_first_and_capped(self, auth_client):
        for i in range(52):
            create_post(auth_client, content=f"post {i}")

        feed = auth_client.get("/api/community/posts").get_json()
        assert len(feed) == 50
        assert feed[0]["content"] == "post 51"

    def test_routes_require_session(self, client):
        assert client.get("/api/community/posts").status_code == 401
        assert create_post(client).status_code == 401
        assert client.post("/api/community/posts/1/like").status_code == 401

    def test_delete_own_post(self, auth_client):
        post_id = create_post(auth_client).get_json()["id"]
        assert auth_client.delete(f"/api/community/posts/{post_id}").status_code == 200
        assert auth_client.get("/api/community/posts").get_json() == []

    def test_delete_other_users_post(self, app, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        post_id = create_post(alice).get_json()["id"]

        res = bob.delete(f"/api/community/posts/{post_id}")
        assert res.status_code == 404

        with app.app_context():
            assert db.session.get(CommunityPost, post_id) is not None

    def test_delete_removes_likes(self, app, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        post_id = create_post(alice).get_json()["id"]
        bob.post(f"/api/community/posts/{post_id}/like")

        alice.delete(f"/api/community/posts/{post_id}")

        with app.app_context():
            assert PostLike.query.filter_by(post_id=post_id).count() == 0


class TestLikes:
    def test_like_then_unlike(self, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        post_id = create_post(alice).get_json()["id"]

        liked = bob.post(f"/api/community/posts/{post_id}/like").get_json()
        assert liked == {"likes": 1, "user_liked": True}

        unliked = bob.post(f"/api/community/posts/{post_id}/like").get_json()
        assert unliked == {"likes": 0, "user_liked": False}

    def test_feed_reflects_viewer_like(self, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        post_id = create_post(alice).get_json()["id"]
        bob.post(f"/api/community/posts/{post_id}/like")

        bob_view = bob.get("/api/community/posts").get_json()[0]
        alice_view = alice.get("/api/community/posts").get_json()[0]
        assert bob_view["likes"] == alice_view["likes"] == 1
        assert bob_view["user_liked"] is True
        assert alice_view["user_liked"] is False

    def test_counter_matches_like_rows(self, app, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        carol = make_user("carol")
        post_id = create_post(alice).get_json()["id"]

        for c in (alice, bob, carol, bob):
            c.post(f"/api/community/posts/{post_id}/like")

        with app.app_context():
            post = db.session.get(CommunityPost, post_id)
            assert post.likes == 2
            assert PostLike.query.filter_by(post_id=post_id).count() == 2

    def test_like_missing_post(self, auth_client):
        assert auth_client.post("/api/community/posts/999/like").status_code == 404

    def test_concurrent_unlike_rolls_back(self, app, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        post_id = create_post(alice).get_json()["id"]
        bob.post(f"/api/community/posts/{post_id}/like")

        fired = []

        # a second unlike lands between the toggle's read and its DELETE
        def other_unlike(state):
            if state.is_delete and not fired:
                fired.append(True)
                conn = state.session.connection()
                conn.execute(text("DELETE FROM post_likes WHERE post_id = :p"), {"p": post_id})
                conn.execute(
                    text("UPDATE community_posts SET likes = likes - 1 WHERE id = :p"),
                    {"p": post_id},
                )

        event.listen(db.session, "do_orm_execute", other_unlike)
        try:
            res = bob.post(f"/api/community/posts/{post_id}/like")
        finally:
            event.remove(db.session, "do_orm_execute", other_unlike)

        assert fired
        assert res.status_code == 400
        assert res.get_json()["error"] == "Like changed concurrently, please retry"

        with app.app_context():
            post = db.session.get(CommunityPost, post_id)
            assert post.likes == PostLike.query.filter_by(post_id=post_id).count()

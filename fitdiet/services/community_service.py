# fitdiet/services/community_service.py
from typing import Any, Dict, List

from sqlalchemy import and_, exists
from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import CommunityPost, PostLike, User
from ..utils import is_blank, parse_optional_number

FEED_LIMIT = 50
LIKE_CONFLICT = "Like changed concurrently, please retry"


class LikeRaceError(Exception):
    """Another request removed the like between our read and our delete."""


def _optional_text(value):
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class CommunityService:
    def __init__(self, db):
        self.db = db

    def list_posts(self, viewer_id) -> List[Dict[str, Any]]:
        """Newest-first feed, each post flagged with whether the viewer liked it."""
        liked = exists().where(
            and_(PostLike.post_id == CommunityPost.id, PostLike.user_id == viewer_id)
        )
        rows = (
            self.db.session.query(CommunityPost, User.username, liked.label("user_liked"))
            .join(User, CommunityPost.user_id == User.id)
            .order_by(CommunityPost.created_at.desc(), CommunityPost.id.desc())
            .limit(FEED_LIMIT)
            .all()
        )
        return [post.to_dict(username=username, user_liked=user_liked) for post, username, user_liked in rows]

    def create_post(self, user_id, data) -> Dict[str, Any]:
        content = data.get("content")
        if is_blank(content) or not isinstance(content, str):
            raise ValidationError("Content is required")

        post = CommunityPost(
            user_id=user_id,
            content=content.strip(),
            workout_type=_optional_text(data.get("workout_type")),
            calories_burned=parse_optional_number(
                data.get("calories_burned"), "calories_burned", cast=int
            ),
            achievement=_optional_text(data.get("achievement")),
            likes=0,
        )

        session = self.db.session
        try:
            session.add(post)
            session.commit()
        except Exception:
            session.rollback()
            raise

        author = session.get(User, user_id)
        return post.to_dict(username=author.username if author else None, user_liked=False)

    def delete_post(self, user_id, post_id) -> None:
        post = CommunityPost.query.filter_by(id=post_id, user_id=user_id).first()
        if not post:
            raise NotFoundError("Post not found or unauthorized")

        session = self.db.session
        try:
            session.delete(post)
            session.commit()
        except Exception:
            session.rollback()
            raise

    def toggle_like(self, user_id, post_id) -> Dict[str, Any]:
        """
        Like or unlike ``post_id`` for ``user_id``.

        The Like row and the post's counter change in a single transaction;
        the counter moves through a SQL expression so concurrent toggles on
        other rows cannot be lost. A racing duplicate insert trips the
        (user_id, post_id) unique constraint, and a racing unlike leaves our
        DELETE with nothing to remove; either way the toggle is rolled back.
        """
        session = self.db.session
        post_exists = session.query(CommunityPost.id).filter_by(id=post_id).first()
        if not post_exists:
            raise NotFoundError("Post not found")

        try:
            existing = (
                session.query(PostLike.id).filter_by(user_id=user_id, post_id=post_id).first()
            )
            if existing:
                removed = PostLike.query.filter_by(
                    user_id=user_id, post_id=post_id
                ).delete(synchronize_session=False)
                if removed != 1:
                    raise LikeRaceError()
                delta, user_liked = -1, False
            else:
                session.add(PostLike(user_id=user_id, post_id=post_id))
                session.flush()
                delta, user_liked = 1, True

            CommunityPost.query.filter_by(id=post_id).update(
                {CommunityPost.likes: CommunityPost.likes + delta},
                synchronize_session=False,
            )
            likes = session.query(CommunityPost.likes).filter_by(id=post_id).scalar()
            session.commit()
        except (IntegrityError, LikeRaceError):
            session.rollback()
            raise ConflictError(LIKE_CONFLICT)
        except Exception:
            session.rollback()
            raise

        return {"likes": likes or 0, "user_liked": user_liked}

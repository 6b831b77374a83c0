# fitdiet/models/community.py
from .. import db
from ..utils import iso, utcnow


# -----------------------------
# Posts
# -----------------------------
class CommunityPost(db.Model):
    __tablename__ = "community_posts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = db.Column(db.Text, nullable=False)
    workout_type = db.Column(db.String(100))
    calories_burned = db.Column(db.Integer)
    achievement = db.Column(db.String(255))
    # denormalized; kept in step with post_likes inside the toggle transaction
    likes = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    like_rows = db.relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def to_dict(self, username=None, user_liked=False):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "content": self.content,
            "workout_type": self.workout_type,
            "calories_burned": self.calories_burned,
            "achievement": self.achievement,
            "likes": self.likes or 0,
            "created_at": iso(self.created_at),
            "username": username,
            "user_liked": bool(user_liked),
        }


# -----------------------------
# Likes
# -----------------------------
class PostLike(db.Model):
    __tablename__ = "post_likes"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    post_id = db.Column(
        db.Integer, db.ForeignKey("community_posts.id", ondelete="CASCADE"), nullable=False
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "post_id", name="uq_post_likes_user_post"),
    )

    post = db.relationship("CommunityPost", back_populates="like_rows")

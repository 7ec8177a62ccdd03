# backend/models.py
from flask_sqlalchemy import SQLAlchemy

# Single shared SQLAlchemy instance for the whole app.
# Imported by app.py (to init_app) and by routes/seed (to query).
db = SQLAlchemy()


def _iso(value):
    return value.isoformat() if value is not None else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())


class Game(TimestampMixin, db.Model):
    __tablename__ = "games"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(150), unique=True, nullable=False)
    genre = db.Column(db.String(80))
    platform = db.Column(db.String(80))
    price = db.Column(db.Integer)

    reviews = db.relationship(
        "Review", back_populates="game", cascade="all, delete-orphan"
    )

    def to_dict(self, include_reviews=False):
        data = {
            "id": self.id,
            "title": self.title,
            "genre": self.genre,
            "platform": self.platform,
            "price": self.price,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }
        if include_reviews:
            data["reviews"] = [r.to_dict() for r in self.reviews]
        return data

    def __repr__(self):
        return f"<Game {self.id} {self.title!r}>"


class User(TimestampMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)

    reviews = db.relationship(
        "Review", back_populates="user", cascade="all, delete-orphan"
    )

    def to_dict(self, include_reviews=False):
        data = {
            "id": self.id,
            "name": self.name,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }
        if include_reviews:
            data["reviews"] = [r.to_dict() for r in self.reviews]
        return data

    def __repr__(self):
        return f"<User {self.id} {self.name!r}>"


class Review(TimestampMixin, db.Model):
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    score = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.String)

    game_id = db.Column(db.Integer, db.ForeignKey("games.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    game = db.relationship("Game", back_populates="reviews")
    user = db.relationship("User", back_populates="reviews")

    def to_dict(self):
        return {
            "id": self.id,
            "score": self.score,
            "comment": self.comment,
            "game_id": self.game_id,
            "user_id": self.user_id,
            "game": {"id": self.game.id, "title": self.game.title} if self.game else None,
            "user": {"id": self.user.id, "name": self.user.name} if self.user else None,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }

    def __repr__(self):
        return f"<Review {self.id} score={self.score} game={self.game_id} user={self.user_id}>"

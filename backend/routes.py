# backend/routes.py
from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import IntegrityError

from core.forms import MAX_ID, FormError, parse_review, read_payload
from models import Game, Review, User, db

# games / users are read-only; reviews get full CRUD
bp = Blueprint("api", __name__)


def not_found(kind, id):
    return jsonify({"error": f"{kind} {id} not found."}), 404


def get_or_none(model, id):
    # ids past the INTEGER range cannot exist and overflow the sqlite driver
    if not 1 <= id <= MAX_ID:
        return None
    return db.session.get(model, id)


def check_references(fields):
    """
    Return a 404 response if game_id / user_id point at missing rows,
    otherwise None.
    """
    if "game_id" in fields and get_or_none(Game, fields["game_id"]) is None:
        return not_found("Game", fields["game_id"])
    if "user_id" in fields and get_or_none(User, fields["user_id"]) is None:
        return not_found("User", fields["user_id"])
    return None


@bp.errorhandler(FormError)
def handle_form_error(e):
    current_app.logger.warning("[REVIEWS] rejected %s %s: %s", request.method, request.path, e.message)
    return jsonify(e.to_dict()), 400


@bp.errorhandler(IntegrityError)
def handle_integrity_error(e):
    db.session.rollback()
    current_app.logger.warning("[REVIEWS] integrity error on %s %s: %s", request.method, request.path, e.orig)
    return jsonify({"error": "Request conflicts with existing data."}), 400


@bp.route("/", methods=["GET"])
def index():
    return jsonify({
        "message": "Game Reviews API",
        "resources": ["/games", "/users", "/reviews"],
    }), 200


# -----------------------------
# Games
# -----------------------------
@bp.route("/games", methods=["GET"])
def games():
    rows = Game.query.order_by(Game.title).all()
    return jsonify([g.to_dict() for g in rows]), 200


@bp.route("/games/<int:id>", methods=["GET"])
def game_by_id(id):
    game = get_or_none(Game, id)
    if game is None:
        return not_found("Game", id)
    return jsonify(game.to_dict(include_reviews=True)), 200


@bp.route("/games/users/<int:id>", methods=["GET"])
def game_users_by_id(id):
    """Users who have reviewed game `id`, each listed once."""
    game = get_or_none(Game, id)
    if game is None:
        return not_found("Game", id)

    users = {r.user.id: r.user for r in game.reviews}
    return jsonify([u.to_dict() for _, u in sorted(users.items())]), 200


# -----------------------------
# Users
# -----------------------------
@bp.route("/users", methods=["GET"])
def users():
    rows = User.query.order_by(User.id).all()
    return jsonify([u.to_dict() for u in rows]), 200


@bp.route("/users/<int:id>", methods=["GET"])
def user_by_id(id):
    user = get_or_none(User, id)
    if user is None:
        return not_found("User", id)
    return jsonify(user.to_dict(include_reviews=True)), 200


# -----------------------------
# Reviews
# -----------------------------
@bp.route("/reviews", methods=["GET", "POST"])
def reviews():
    if request.method == "GET":
        rows = Review.query.order_by(Review.id.desc()).all()
        return jsonify([r.to_dict() for r in rows]), 200

    fields = parse_review(read_payload(request))

    missing = check_references(fields)
    if missing is not None:
        return missing

    review = Review(**fields)
    db.session.add(review)
    db.session.commit()

    current_app.logger.info("[REVIEWS] created review %s (game=%s user=%s)", review.id, review.game_id, review.user_id)
    return jsonify(review.to_dict()), 201


@bp.route("/reviews/<int:id>", methods=["GET", "PATCH", "DELETE"])
def review_by_id(id):
    review = get_or_none(Review, id)
    if review is None:
        return not_found("Review", id)

    if request.method == "GET":
        return jsonify(review.to_dict()), 200

    if request.method == "PATCH":
        fields = parse_review(read_payload(request), partial=True)

        missing = check_references(fields)
        if missing is not None:
            return missing

        for attr, value in fields.items():
            setattr(review, attr, value)
        db.session.commit()

        current_app.logger.info("[REVIEWS] updated review %s: %s", id, ", ".join(fields))
        return jsonify(review.to_dict()), 200

    db.session.delete(review)
    db.session.commit()

    current_app.logger.info("[REVIEWS] deleted review %s", id)
    return jsonify({
        "delete_successful": True,
        "message": "Review deleted.",
    }), 200

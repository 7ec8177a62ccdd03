# backend/tests/conftest.py
import pytest

from app import create_app
from models import Game, Review, User, db


@pytest.fixture
def app():
    """App bound to a fresh in-memory sqlite database."""
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "CREATE_TABLES": True,
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Two games, two users, three reviews. Returns their ids."""
    zelda = Game(title="Breath of the Wild", genre="Adventure", platform="Switch", price=60)
    hades = Game(title="Hades", genre="Roguelike", platform="PC", price=25)
    ada = User(name="Ada Lovelace")
    grace = User(name="Grace Hopper")
    db.session.add_all([zelda, hades, ada, grace])
    db.session.flush()

    reviews = [
        Review(score=10, comment="Still finding shrines.", game_id=zelda.id, user_id=ada.id),
        Review(score=9, comment="One more run.", game_id=hades.id, user_id=ada.id),
        Review(score=7, comment=None, game_id=zelda.id, user_id=grace.id),
    ]
    db.session.add_all(reviews)
    db.session.commit()

    return {
        "games": [zelda.id, hades.id],
        "users": [ada.id, grace.id],
        "reviews": [r.id for r in reviews],
    }

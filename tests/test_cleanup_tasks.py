from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from hanuram.models.password_reset import ResetToken
from hanuram.tasks.cleanup_tasks import purge_expired_reset_tokens

NOW = datetime(2025, 6, 2, 9, 0, 0)


@pytest.fixture
def db():
    engine = create_engine("sqlite://")
    ResetToken.__table__.create(engine)
    session = sessionmaker(bind=engine)()
    yield session
    session.close()
    engine.dispose()


def add_token(db, email, expires_at, used=False):
    db.add(ResetToken(email=email, pin="AB12CD", expires_at=expires_at, used=used))
    db.commit()


def test_purge_removes_only_expired_tokens(db):
    add_token(db, "old@x.com", NOW - timedelta(minutes=1))
    add_token(db, "used@x.com", NOW - timedelta(hours=2), used=True)
    add_token(db, "live@x.com", NOW + timedelta(minutes=5))

    removed = purge_expired_reset_tokens(db, now=NOW)

    assert removed == 2
    remaining = db.execute(select(ResetToken.email)).scalars().all()
    assert remaining == ["live@x.com"]


def test_purge_keeps_token_expiring_exactly_now(db):
    add_token(db, "edge@x.com", NOW)

    assert purge_expired_reset_tokens(db, now=NOW) == 0


def test_purge_on_empty_table(db):
    assert purge_expired_reset_tokens(db, now=NOW) == 0

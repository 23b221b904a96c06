import json

import pytest

from songboard.core.errors import ValidationError
from songboard.db.models.like import Like
from songboard.db.models.song import Song
from songboard.db.models.user import User
from songboard.db.snapshot import export_snapshot, import_snapshot, load_seed_file

LEGACY_DOCUMENT = {
    "users": [
        {"id": 1, "nickname": "mina", "created_at": "2024-05-01T10:00:00.000Z"},
        {"id": 4, "nickname": "joon", "created_at": "2024-05-02T10:00:00.000Z"},
    ],
    "sessions": [
        {"id": 2, "user_id": 4, "token": "abc123", "created_at": "2024-05-02T10:00:01.000Z"},
    ],
    "songs": [
        {
            "id": 3,
            "title": "Ditto",
            "artist": "NewJeans",
            "genre": "POP",
            "youtube_url": "https://www.youtube.com/watch?v=abcDE12345",
            "owner_id": 1,
            "created_at": "2024-05-03T09:30:00.000Z",
        },
    ],
    "likes": [
        {"id": 1, "user_id": 4, "song_id": 3, "created_at": "2024-05-04T08:00:00.000Z"},
    ],
}


def test_import_preserves_ids(db_session):
    imported = import_snapshot(db_session, LEGACY_DOCUMENT)
    assert imported == {"users": 2, "sessions": 1, "songs": 1, "likes": 1}

    assert [u.id for u in db_session.query(User).order_by(User.id)] == [1, 4]
    song = db_session.get(Song, 3)
    assert song.title == "Ditto"
    assert song.created_at.isoformat() == "2024-05-03T09:30:00"
    assert db_session.query(Like).one().song_id == 3


def test_export_round_trip(db_session):
    import_snapshot(db_session, LEGACY_DOCUMENT)
    document = export_snapshot(db_session)

    assert list(document) == ["users", "sessions", "songs", "likes"]
    assert [u["id"] for u in document["users"]] == [1, 4]
    assert document["songs"][0]["created_at"] == "2024-05-03T09:30:00"
    assert document["sessions"][0]["token"] == "abc123"


def test_ids_continue_after_import(client, db_session, login_as):
    import_snapshot(db_session, LEGACY_DOCUMENT)
    user = login_as("newbie")
    assert user["id"] == 5


def test_import_into_populated_database(db_session):
    import_snapshot(db_session, LEGACY_DOCUMENT)
    with pytest.raises(ValidationError) as exc:
        import_snapshot(db_session, LEGACY_DOCUMENT)
    assert exc.value.code == "database_not_empty"


@pytest.mark.parametrize("document", [
    [],
    {"users": "nope"},
    {"users": [{"id": 1}]},
    {"users": [{"id": 1, "nickname": "x", "created_at": "yesterday"}]},
    {
        "users": [
            {"id": 1, "nickname": "x", "created_at": "2024-05-01T10:00:00Z"},
            {"id": 2, "nickname": "x", "created_at": "2024-05-01T10:00:00Z"},
        ],
    },
])
def test_import_rejects_malformed(db_session, document):
    with pytest.raises(ValidationError):
        import_snapshot(db_session, document)
    assert db_session.query(User).count() == 0


def test_load_seed_file(db_session, tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps(LEGACY_DOCUMENT), encoding="utf-8")

    assert load_seed_file(db_session, str(path)) is True
    assert load_seed_file(db_session, str(path)) is False
    assert load_seed_file(db_session, str(tmp_path / "missing.json")) is False


def test_duplicate_like_reports_invalid_snapshot(db_session):
    document = {
        **LEGACY_DOCUMENT,
        "likes": [
            {"id": 1, "user_id": 4, "song_id": 3, "created_at": "2024-05-04T08:00:00Z"},
            {"id": 2, "user_id": 4, "song_id": 3, "created_at": "2024-05-04T09:00:00Z"},
        ],
    }
    with pytest.raises(ValidationError) as exc:
        import_snapshot(db_session, document)
    assert exc.value.code == "invalid_snapshot"
    assert db_session.query(Like).count() == 0

from datetime import timedelta

from songboard.db.models.song import Song
from songboard.db.utils import utcnow
from songboard.services.recommendation_service import recommendation_service


def age_song(db_session, song_id, days):
    db_session.get(Song, song_id).created_at = utcnow() - timedelta(days=days)
    db_session.commit()


def test_cold_start_orders_by_popularity(client, login_as, submit_song, db_session):
    login_as("owner")
    a = submit_song(title="A", video_id="songAAAAA")
    b = submit_song(title="B", video_id="songBBBBB")
    c = submit_song(title="C", video_id="songCCCCC")
    age_song(db_session, a["id"], 3)
    age_song(db_session, b["id"], 2)

    login_as("fan")
    client.post(f"/api/v1/songs/{a['id']}/like")

    login_as("newcomer")
    result = client.get("/api/v1/recommendations").json()
    assert [s["id"] for s in result] == [a["id"], c["id"], b["id"]]
    assert all("score" not in s for s in result)
    assert result[0]["like_count"] == 1


def test_cold_start_is_capped_at_twenty(client, login_as, submit_song):
    login_as("owner")
    for i in range(25):
        submit_song(title=f"Song {i}", video_id=f"video{i:05d}")

    assert len(client.get("/api/v1/recommendations").json()) == 20


def test_personalized_recommendations(client, login_as, submit_song):
    login_as("owner")
    liked = submit_song(title="Liked", genre="Indie", video_id="likedSong")
    same_genre = submit_song(title="Same", genre="Indie", video_id="sameGenre")
    other = submit_song(title="Other", genre="Dance", video_id="otherGenre")

    user = login_as("fan")
    client.post(f"/api/v1/songs/{liked['id']}/like")

    result = client.get("/api/v1/recommendations").json()
    assert [s["id"] for s in result] == [same_genre["id"], other["id"]]
    assert result[0]["score"] == 5
    assert result[1]["score"] == 2
    assert liked["id"] not in [s["id"] for s in result]
    assert user["id"] == 2


def test_recommendations_require_login(client):
    response = client.get("/api/v1/recommendations")
    assert response.status_code == 401


def test_service_uses_given_time(login_as, submit_song, client, db_session):
    login_as("owner")
    liked = submit_song(title="Liked", genre="POP", video_id="likedSong")
    fresh = submit_song(title="Fresh", genre="POP", video_id="freshSong")
    user = login_as("fan")
    client.post(f"/api/v1/songs/{liked['id']}/like")

    later = utcnow() + timedelta(days=5)
    result = recommendation_service.get_recommendations(db_session, user["id"], now=later)
    assert [(s["id"], s["score"]) for s in result] == [(fresh["id"], 4)]

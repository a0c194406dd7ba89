from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from sqlmodel import Session, select
from models import Gig, Set, SetSong, Song
from app.services.gig_app_service import GigAppService

API = "/api/v1"

def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)

def test_create_gig(client: TestClient, session: Session):
    payload = {"name": "Summer Fest", "date": "2030-07-20T18:30:00", "venue": "Riverside Park"}
    response = client.post(f"{API}/gigs", json=payload)
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Summer Fest"
    assert data["venue"] == "Riverside Park"
    # オフセットなしの日時は UTC とみなされる
    assert datetime.fromisoformat(data["date"]) == utc(2030, 7, 20, 18, 30)
    assert data["sets"] == []
    assert response.headers["location"] == f"{API}/gigs/{data['id']}"
    assert session.get(Gig, data["id"]) is not None

def test_create_gig_requires_date(client: TestClient):
    response = client.post(f"{API}/gigs", json={"name": "No Date"})
    assert response.status_code == 422

def test_get_gig_includes_sets_and_songs(client: TestClient, session: Session, factory):
    a, b = factory.song(session, "A"), factory.song(session, "B")
    gig = factory.gig(session, name="Club Night")
    factory.set(session, gig, name="First", songs=[b, a])
    factory.set(session, gig, name="Second")

    response = client.get(f"{API}/gigs/{gig.id}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert [s["name"] for s in data["sets"]] == ["First", "Second"]
    assert [s["song_id"] for s in data["sets"][0]["songs"]] == [b.id, a.id]
    assert data["sets"][1]["songs"] == []

def test_get_missing_gig(client: TestClient, session: Session):
    response = client.get(f"{API}/gigs/9999")
    assert response.status_code == 404

    result = GigAppService(session).get_gig(9999)
    assert result.is_success is True
    assert result.data is None

def test_get_gigs_newest_first(client: TestClient, session: Session, factory):
    factory.gig(session, name="Old", date=utc(2020, 1, 1))
    factory.gig(session, name="Future", date=utc(2031, 1, 1))
    factory.gig(session, name="Middle", date=utc(2025, 6, 1))

    response = client.get(f"{API}/gigs", params={"page_size": 2})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_count"] == 3
    assert data["total_pages"] == 2
    assert [g["name"] for g in data["items"]] == ["Future", "Middle"]

def test_get_upcoming_gigs(client: TestClient, session: Session, factory):
    now = datetime.now(timezone.utc)
    factory.gig(session, name="Past", date=now - timedelta(days=3))
    factory.gig(session, name="Later", date=now + timedelta(days=30))
    factory.gig(session, name="Soon", date=now + timedelta(days=2))

    response = client.get(f"{API}/gigs/upcoming")
    assert response.status_code == 200
    assert [g["name"] for g in response.json()["data"]] == ["Soon", "Later"]

def test_get_upcoming_gigs_with_fixed_clock(session: Session, factory):
    factory.gig(session, name="Before", date=utc(2029, 12, 31))
    factory.gig(session, name="Exactly", date=utc(2030, 1, 1))

    result = GigAppService(session).get_upcoming_gigs(now=utc(2030, 1, 1))
    assert [g.name for g in result.data] == ["Exactly"]

def test_update_gig(client: TestClient, session: Session, factory):
    gig = factory.gig(session, name="Draft", updated_date=utc(2020, 1, 1))
    payload = {"name": "Confirmed", "date": "2030-03-03T21:00:00", "venue": "The Basement", "notes": "Load-in 18:00"}
    response = client.put(f"{API}/gigs/{gig.id}", json=payload)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Confirmed"
    assert data["venue"] == "The Basement"
    assert data["notes"] == "Load-in 18:00"
    assert datetime.fromisoformat(data["updated_date"]) > utc(2020, 1, 1)

def test_update_missing_gig(client: TestClient):
    payload = {"name": "Ghost", "date": "2030-03-03T21:00:00"}
    response = client.put(f"{API}/gigs/9999", json=payload)
    assert response.status_code == 404
    assert response.json()["error_message"] == "Gig not found"

def test_delete_gig_cascades_to_sets(client: TestClient, session: Session, factory):
    a, b = factory.song(session, "A"), factory.song(session, "B")
    gig = factory.gig(session)
    other = factory.gig(session, name="Keep Me")
    s1 = factory.set(session, gig, name="One", songs=[a, b])
    s2 = factory.set(session, gig, name="Two", songs=[b])
    kept = factory.set(session, other, name="Kept", songs=[a])
    gig_id, set_ids = gig.id, [s1.id, s2.id]

    response = client.delete(f"{API}/gigs/{gig_id}")
    assert response.status_code == 204

    session.expire_all()
    assert session.get(Gig, gig_id) is None
    for set_id in set_ids:
        assert session.get(Set, set_id) is None
        assert session.exec(select(SetSong).where(SetSong.set_id == set_id)).all() == []

    # 曲と他のGigは残る
    assert session.get(Song, a.id) is not None
    assert session.get(Song, b.id) is not None
    assert factory.orders(session, kept.id) == {a.id: 1}

def test_delete_missing_gig(client: TestClient):
    response = client.delete(f"{API}/gigs/9999")
    assert response.status_code == 404
    assert response.json()["is_success"] is False

# --- Timezones ---

def test_gig_date_with_offset_is_stored_as_utc(client: TestClient, session: Session):
    payload = {"name": "Tokyo Show", "date": "2030-01-01T10:00:00+09:00"}
    data = client.post(f"{API}/gigs", json=payload).json()["data"]

    stored = datetime.fromisoformat(data["date"])
    assert stored == utc(2030, 1, 1, 1, 0)
    assert stored.utcoffset() == timedelta(0)

    fetched = client.get(f"{API}/gigs/{data['id']}").json()["data"]
    assert datetime.fromisoformat(fetched["date"]) == utc(2030, 1, 1, 1, 0)

    session.expire_all()
    assert session.get(Gig, data["id"]).date == utc(2030, 1, 1, 1, 0)

def test_upcoming_gigs_compare_in_utc(client: TestClient, session: Session):
    # 2029-12-31T23:00Z と 2030-01-01T01:00Z
    client.post(f"{API}/gigs", json={"name": "Eve", "date": "2030-01-01T08:00:00+09:00"})
    client.post(f"{API}/gigs", json={"name": "Morning", "date": "2030-01-01T02:00:00+01:00"})

    result = GigAppService(session).get_upcoming_gigs(now=utc(2030, 1, 1))
    assert [g.name for g in result.data] == ["Morning"]

def test_gig_timestamps_round_trip(client: TestClient, session: Session):
    before = datetime.now(timezone.utc)
    created = client.post(f"{API}/gigs", json={"name": "Stamp", "date": "2030-05-05T20:00:00Z"}).json()["data"]
    after = datetime.now(timezone.utc)

    created_date = datetime.fromisoformat(created["created_date"])
    assert created_date.tzinfo is not None
    assert before <= created_date <= after

    fetched = client.get(f"{API}/gigs/{created['id']}").json()["data"]
    assert fetched["created_date"] == created["created_date"]
    assert fetched["updated_date"] == created["updated_date"]

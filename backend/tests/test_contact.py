from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import select

from portfolio_api.crud.contact_submission import create_contact_submission
from portfolio_api.models.contact_submission import ContactSubmission


def test_create_contact_submission_stores_input_verbatim(db):
    submission = create_contact_submission(
        db,
        name="John Doe",
        email="john@example.com",
        message="Hello, I would like to talk about a project.",
    )

    assert submission.id is not None
    assert submission.name == "John Doe"
    assert submission.email == "john@example.com"
    assert submission.message == "Hello, I would like to talk about a project."
    assert submission.created_at is not None

    rows = db.execute(select(ContactSubmission)).scalars().all()
    assert len(rows) == 1
    assert rows[0].id == submission.id


def test_each_submission_gets_a_new_row(db):
    first = create_contact_submission(db, name="A", email="a@example.com", message="First message here.")
    second = create_contact_submission(db, name="A", email="a@example.com", message="First message here.")

    assert first.id != second.id
    assert len(db.execute(select(ContactSubmission)).scalars().all()) == 2


def test_post_contact(client):
    response = client.post(
        "/api/contact/",
        json={"name": "A", "email": "a@b.co", "message": "Short msg."},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] >= 1
    assert data["name"] == "A"
    assert data["email"] == "a@b.co"
    assert data["message"] == "Short msg."
    assert data["created_at"]


def test_post_contact_rejects_empty_name(client):
    response = client.post(
        "/api/contact/",
        json={"name": "", "email": "a@b.co", "message": "Short msg."},
    )

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "name"]


def test_post_contact_rejects_short_message(client):
    response = client.post(
        "/api/contact/",
        json={"name": "A", "email": "a@b.co", "message": "Too short"},
    )

    assert response.status_code == 422


def test_post_contact_rejects_invalid_email(client):
    response = client.post(
        "/api/contact/",
        json={"name": "A", "email": "not-an-email", "message": "Long enough message."},
    )

    assert response.status_code == 422


def test_post_contact_rejects_long_fields(client):
    response = client.post(
        "/api/contact/",
        json={"name": "x" * 101, "email": "a@b.co", "message": "Long enough message."},
    )
    assert response.status_code == 422

    response = client.post(
        "/api/contact/",
        json={"name": "A", "email": "a@b.co", "message": "m" * 1001},
    )
    assert response.status_code == 422

    response = client.post(
        "/api/contact/",
        json={"name": "A", "email": "a" * 250 + "@example.com", "message": "Long enough message."},
    )
    assert response.status_code == 422


def test_post_contact_keeps_email_as_submitted(client):
    response = client.post(
        "/api/contact/",
        json={"name": "Jane", "email": "Jane@Example.COM", "message": "Mixed case domain here."},
    )

    assert response.status_code == 201
    assert response.json()["email"] == "Jane@Example.COM"


def test_post_contact_rejects_display_name_email(client):
    response = client.post(
        "/api/contact/",
        json={"name": "Jane", "email": "Jane Doe <jane@example.com>", "message": "Long enough message."},
    )

    assert response.status_code == 422


def test_post_contact_created_at_is_utc(client):
    response = client.post(
        "/api/contact/",
        json={"name": "A", "email": "a@b.co", "message": "Short msg."},
    )

    created_at = datetime.fromisoformat(response.json()["created_at"].replace("Z", "+00:00"))
    assert created_at.utcoffset() == timedelta(0)

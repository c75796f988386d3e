# /tests/test_messages_api.py

import pytest


def thread_ids(response):
    return [t["id"] for t in response.json()["threads"]]


def test_requests_without_user_header_are_rejected(client):
    response = client.get("/api/messages/threads")
    assert response.status_code == 401


@pytest.mark.parametrize("user_id, expected_ids, can_create", [
    ("D1", ["MT3", "MT2", "MT1"], True),
    ("T1", ["MT2", "MT1"], True),
    ("T2", ["MT1"], True),
    ("G1", ["MT2", "MT1"], False),
    ("G3", [], False),
    ("nobody", [], False),
])
def test_thread_list_is_scoped_and_newest_first(client, as_user, user_id, expected_ids, can_create):
    response = client.get("/api/messages/threads", headers=as_user(user_id))

    assert response.status_code == 200
    assert thread_ids(response) == expected_ids
    assert response.json()["can_create"] is can_create


def test_thread_list_filters(client, as_user):
    general = client.get("/api/messages/threads", params={"classroom": "general"}, headers=as_user("D1"))
    by_classroom = client.get("/api/messages/threads", params={"classroom": "C2"}, headers=as_user("D1"))
    out_of_scope = client.get("/api/messages/threads", params={"classroom": "C2"}, headers=as_user("T1"))

    assert thread_ids(general) == ["MT1"]
    assert thread_ids(by_classroom) == ["MT3"]
    assert out_of_scope.status_code == 200
    assert thread_ids(out_of_scope) == []


def test_thread_summary_carries_classroom_name_and_last_message(client, as_user):
    response = client.get("/api/messages/threads", headers=as_user("T1"))

    first = response.json()["threads"][0]
    assert first["classroom_name"] == "Primero A"
    assert first["last_message"]["body"] == "Traer cuaderno nuevo"


def test_thread_details_for_guardian(client, as_user):
    general = client.get("/api/messages/threads/MT1", headers=as_user("G1"))
    classroom = client.get("/api/messages/threads/MT2", headers=as_user("G1"))

    assert general.status_code == 200
    assert general.json()["can_post"] is False
    assert classroom.status_code == 200
    assert classroom.json()["can_post"] is True
    assert classroom.json()["messages"][0]["sender"]["id"] == "T1"


@pytest.mark.parametrize("user_id, thread_id", [
    ("G1", "MT3"),
    ("D1", "MT4"),
    ("T1", "MT3"),
    ("D1", "does-not-exist"),
])
def test_unreadable_and_missing_threads_look_the_same(client, as_user, user_id, thread_id):
    response = client.get(f"/api/messages/threads/{thread_id}", headers=as_user(user_id))
    assert response.status_code == 404


def test_teacher_creates_classroom_thread(client, as_user):
    payload = {"kind": "classroom", "title": "Examen", "body": "El lunes hay examen de lectura", "classroom_id": "C1"}

    response = client.post("/api/messages/threads", json=payload, headers=as_user("T1"))

    assert response.status_code == 201
    data = response.json()
    assert data["thread"]["classroom_id"] == "C1"
    assert data["thread"]["school_id"] == "S1"
    assert [m["body"] for m in data["messages"]] == ["El lunes hay examen de lectura"]
    assert data["can_post"] is True

    # The guardian of a C1 student now sees it too.
    listing = client.get("/api/messages/threads", params={"classroom": "C1"}, headers=as_user("G1"))
    assert data["thread"]["id"] in thread_ids(listing)


def test_director_creates_general_thread(client, as_user):
    payload = {"kind": "general", "title": "Reunion", "body": "Reunion de padres el jueves"}

    response = client.post("/api/messages/threads", json=payload, headers=as_user("D1"))

    assert response.status_code == 201
    assert response.json()["thread"]["classroom_id"] is None


@pytest.mark.parametrize("user_id, payload", [
    ("T1", {"kind": "general", "title": "Aviso", "body": "Solo la direccion publica"}),
    ("T1", {"kind": "classroom", "title": "Aviso", "body": "Clase ajena al maestro", "classroom_id": "C2"}),
    ("G1", {"kind": "classroom", "title": "Aviso", "body": "Los padres no crean hilos", "classroom_id": "C1"}),
    ("D1", {"kind": "classroom", "title": "Aviso", "body": "Salon de otra escuela", "classroom_id": "C3"}),
])
def test_thread_creation_outside_permissions_is_forbidden(client, as_user, user_id, payload):
    response = client.post("/api/messages/threads", json=payload, headers=as_user(user_id))
    assert response.status_code == 403


def test_thread_creation_validates_lengths(client, as_user):
    payload = {"kind": "general", "title": "Hi", "body": "Mensaje valido"}

    response = client.post("/api/messages/threads", json=payload, headers=as_user("D1"))

    assert response.status_code == 422


def test_classroom_thread_without_classroom_is_bad_request(client, as_user):
    payload = {"kind": "classroom", "title": "Aviso", "body": "Falta el salon"}

    response = client.post("/api/messages/threads", json=payload, headers=as_user("T1"))

    assert response.status_code == 400


def test_guardian_replies_in_ward_classroom_thread(client, as_user):
    response = client.post("/api/messages/threads/MT2/messages", json={"body": "  Gracias, maestra  "}, headers=as_user("G1"))

    assert response.status_code == 201
    assert response.json()["body"] == "Gracias, maestra"
    assert response.json()["sender"]["id"] == "G1"

    details = client.get("/api/messages/threads/MT2", headers=as_user("T1")).json()
    assert [m["body"] for m in details["messages"]] == ["Traer cuaderno nuevo", "Gracias, maestra"]


def test_guardian_cannot_reply_to_general_thread(client, as_user):
    response = client.post("/api/messages/threads/MT1/messages", json={"body": "Hola"}, headers=as_user("G1"))
    assert response.status_code == 403


def test_reply_to_unreadable_thread_is_not_found(client, as_user):
    response = client.post("/api/messages/threads/MT3/messages", json={"body": "Hola"}, headers=as_user("G1"))
    assert response.status_code == 404


def test_blank_reply_is_bad_request(client, as_user):
    response = client.post("/api/messages/threads/MT2/messages", json={"body": "   "}, headers=as_user("T1"))
    assert response.status_code == 400

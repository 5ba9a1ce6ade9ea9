from cornerstones.assessments.vark.calculations import calculate_scores
from cornerstones.assessments.vark.types import Response
from cornerstones.core.config import settings
from cornerstones.db.database import SessionLocal
from cornerstones.models.lms import Profile


def _set_scores(profile_id, **weights):
    scores = calculate_scores(Response(None, None, style, w) for style, w in weights.items())
    with SessionLocal() as db:
        profile = db.get(Profile, profile_id)
        profile.apply_vark_scores(scores, profile.created_at)
        db.commit()
    return scores


def _create_class(client, teacher, name="Biology 101"):
    r = client.post("/classes", json={"name": name, "description": "Cells"}, headers=teacher.headers)
    assert r.status_code == 201, r.text
    return r.json()


def _join(client, student, join_code):
    return client.post("/classes/join", json={"join_code": join_code}, headers=student.headers)


def test_create_class_generates_join_code(client, teacher):
    body = _create_class(client, teacher)
    assert len(body["join_code"]) == 6
    assert body["join_code"] == body["join_code"].upper()
    assert body["join_code"].isalnum()
    listed = client.get("/classes", headers=teacher.headers).json()
    assert [c["id"] for c in listed] == [body["id"]]


def test_student_cannot_create_class(client, student):
    r = client.post("/classes", json={"name": "Nope"}, headers=student.headers)
    assert r.status_code == 403
    assert r.json()["error"] == "permission_denied"


def test_join_class_flow(client, teacher, student):
    classroom = _create_class(client, teacher)
    r = _join(client, student, classroom["join_code"].lower())
    assert r.status_code == 201, r.text
    assert r.json()["class_id"] == classroom["id"]

    again = _join(client, student, classroom["join_code"])
    assert again.status_code == 409

    assert _join(client, student, "ZZZZZZ").status_code == 404
    assert [c["id"] for c in client.get("/classes", headers=student.headers).json()] == [classroom["id"]]


def test_class_students_lists_vectors(client, teacher, make_account):
    classroom = _create_class(client, teacher)
    assessed = make_account("student", "Alice")
    fresh = make_account("student", "Bob")
    _join(client, assessed, classroom["join_code"])
    _join(client, fresh, classroom["join_code"])
    _set_scores(assessed.id, auditory=3.0, visual=1.0)

    r = client.get(f"/classes/{classroom['id']}/students", headers=teacher.headers)
    assert r.status_code == 200
    rows = {row["full_name"]: row for row in r.json()}
    assert rows["Alice"]["dominant_style"] == "auditory"
    assert rows["Alice"]["vark_auditory"] == 75
    assert rows["Bob"]["dominant_style"] is None
    assert rows["Alice"]["dominant_styles"] == ["auditory"]
    assert rows["Bob"]["dominant_styles"] == []


def test_dominant_styles_follow_configured_threshold(client, teacher, student, monkeypatch):
    classroom = _create_class(client, teacher)
    _join(client, student, classroom["join_code"])
    _set_scores(student.id, visual=35.0, auditory=65.0)
    url = f"/classes/{classroom['id']}/students"

    assert client.get(url, headers=teacher.headers).json()[0]["dominant_styles"] == ["auditory", "visual"]

    monkeypatch.setattr(settings, "dominant_style_threshold", 40)
    assert client.get("/styles").json()["dominant_threshold"] == 40
    assert client.get(url, headers=teacher.headers).json()[0]["dominant_styles"] == ["auditory"]


def test_other_teacher_cannot_view_students(client, teacher, make_account):
    classroom = _create_class(client, teacher)
    other = make_account("teacher")
    r = client.get(f"/classes/{classroom['id']}/students", headers=other.headers)
    assert r.status_code == 403
    assert client.get("/classes/9999/students", headers=teacher.headers).status_code == 404


def _material(client, teacher, variants=None):
    r = client.post(
        "/materials",
        json={
            "title": "Photosynthesis",
            "subject": "Biology",
            "original_content": "Plants convert light into chemical energy.",
            "variants": variants
            if variants is not None
            else [
                {"learning_style": "visual", "content": "Diagram: sun -> leaf -> glucose"},
                {"learning_style": "kinesthetic", "content": "Experiment: cover a leaf with foil"},
            ],
        },
        headers=teacher.headers,
    )
    return r


def test_material_variants_are_validated(client, teacher):
    r = _material(client, teacher, variants=[{"learning_style": "smell", "content": "x"}])
    assert r.status_code == 400
    r = _material(
        client,
        teacher,
        variants=[
            {"learning_style": "visual", "content": "a"},
            {"learning_style": "visual", "content": "b"},
        ],
    )
    assert r.status_code == 400
    r = _material(client, teacher)
    assert r.status_code == 201
    assert {t["learning_style"] for t in r.json()["transformations"]} == {"visual", "kinesthetic"}
    assert len(client.get("/materials", headers=teacher.headers).json()) == 1


def test_assigned_material_uses_dominant_style_variant(client, teacher, make_account):
    classroom = _create_class(client, teacher)
    material = _material(client, teacher).json()
    r = client.post(
        f"/materials/{material['id']}/assign",
        json={"class_id": classroom["id"]},
        headers=teacher.headers,
    )
    assert r.status_code == 201, r.text
    dup = client.post(
        f"/materials/{material['id']}/assign",
        json={"class_id": classroom["id"]},
        headers=teacher.headers,
    )
    assert dup.status_code == 409

    kinesthetic = make_account("student")
    auditory = make_account("student")
    untested = make_account("student")
    for account in (kinesthetic, auditory, untested):
        _join(client, account, classroom["join_code"])
    _set_scores(kinesthetic.id, kinesthetic=2.0, visual=1.0)
    _set_scores(auditory.id, auditory=1.0)

    item = client.get("/materials/assigned", headers=kinesthetic.headers).json()[0]
    assert item["preferred_style"] == "kinesthetic"
    assert item["variant_style"] == "kinesthetic"
    assert item["is_original"] is False
    assert item["content"].startswith("Experiment")
    assert item["class_name"] == "Biology 101"

    item = client.get("/materials/assigned", headers=auditory.headers).json()[0]
    assert item["preferred_style"] == "auditory"
    assert item["is_original"] is True
    assert item["content"] == "Plants convert light into chemical energy."

    item = client.get("/materials/assigned", headers=untested.headers).json()[0]
    assert item["preferred_style"] is None
    assert item["is_original"] is True


def test_tied_vector_prefers_visual_variant(client, teacher, student):
    classroom = _create_class(client, teacher)
    material = _material(client, teacher).json()
    client.post(f"/materials/{material['id']}/assign", json={"class_id": classroom["id"]}, headers=teacher.headers)
    _join(client, student, classroom["join_code"])
    _set_scores(student.id, visual=1.0, kinesthetic=1.0)

    item = client.get("/materials/assigned", headers=student.headers).json()[0]
    assert item["preferred_style"] == "visual"
    assert item["content"].startswith("Diagram")


def test_hidden_assignments_are_not_listed(client, teacher, student):
    classroom = _create_class(client, teacher)
    material = _material(client, teacher).json()
    client.post(
        f"/materials/{material['id']}/assign",
        json={"class_id": classroom["id"], "is_visible": False},
        headers=teacher.headers,
    )
    _join(client, student, classroom["join_code"])
    assert client.get("/materials/assigned", headers=student.headers).json() == []


def test_completion_upsert_accumulates_time(client, teacher, student, make_account):
    classroom = _create_class(client, teacher)
    material = _material(client, teacher).json()
    assignment = client.post(
        f"/materials/{material['id']}/assign",
        json={"class_id": classroom["id"]},
        headers=teacher.headers,
    ).json()
    _join(client, student, classroom["join_code"])
    url = f"/materials/assigned/{assignment['id']}/completion"

    r = client.put(
        url,
        json={"status": "in_progress", "progress_percentage": 40, "time_spent_seconds": 120},
        headers=student.headers,
    )
    assert r.status_code == 200, r.text
    assert r.json()["time_spent_seconds"] == 120
    assert r.json()["completed_at"] is None

    r = client.put(url, json={"status": "completed", "time_spent_seconds": 30}, headers=student.headers)
    body = r.json()
    assert body["status"] == "completed"
    assert body["progress_percentage"] == 100
    assert body["time_spent_seconds"] == 150
    assert body["completed_at"] is not None

    listed = client.get("/materials/assigned", headers=student.headers).json()[0]
    assert listed["completion"]["status"] == "completed"

    outsider = make_account("student")
    r = client.put(url, json={"status": "in_progress"}, headers=outsider.headers)
    assert r.status_code == 403
    r = client.put("/materials/assigned/9999/completion", json={"status": "in_progress"}, headers=student.headers)
    assert r.status_code == 404

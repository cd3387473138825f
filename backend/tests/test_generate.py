import json

import pytest


@pytest.mark.parametrize("path", ["/api/ai", "/api/generate"])
def test_generate_returns_shaped_form(admin_client, fake_openai, path):
    fake_openai.completions.content = json.dumps({
        "title": "Feedback",
        "description": "Tell us how we did",
        "sections": [
            {"title": "Rating", "fields": [
                {"label": "Score", "type": "number", "required": True},
                {"label": "Comment", "type": "text", "required": False},
            ]},
        ],
    })

    response = admin_client.post(path, json={"prompt": "customer feedback"})

    assert response.status_code == 200
    assert response.json() == {
        "title": "Feedback",
        "description": "Tell us how we did",
        "sections": [
            {"title": "Rating", "order": 0, "fields": [
                {"label": "Score", "type": "NUMBER", "required": True, "order": 0},
                {"label": "Comment", "type": "TEXT", "required": False, "order": 1},
            ]},
        ],
    }


def test_generate_never_exceeds_caps(admin_client, fake_openai):
    fake_openai.completions.content = json.dumps({
        "title": "Huge",
        "sections": [
            {"title": f"S{s}", "fields": [{"label": f"F{f}", "type": "text"} for f in range(6)]}
            for s in range(5)
        ],
    })

    body = admin_client.post("/api/ai", json={"prompt": "everything"}).json()

    assert len(body["sections"]) == 2
    assert all(len(section["fields"]) == 3 for section in body["sections"])


def test_generate_surfaces_unparseable_output_as_500(admin_client, fake_openai):
    fake_openai.completions.content = "I cannot do that."

    response = admin_client.post("/api/ai", json={"prompt": "a form"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate form. Please try again."


def test_generate_requires_prompt(admin_client):
    response = admin_client.post("/api/ai", json={"prompt": "   "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Prompt is required"


def test_generate_requires_session(client):
    assert client.post("/api/ai", json={"prompt": "a form"}).status_code == 401

from fastapi.testclient import TestClient

from flashdeck.main import create_app
from flashdeck.services.chat_service import DefinitionService


def test_initial_screen(test_client):
    r = test_client.get("/api/study")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["layout"] == "default"
    assert data["title"] == "Design System Components"
    assert data["card"]["term"] == "Component"
    assert data["card"]["face"] == "front"
    assert data["sidebar"]["count"] == 8
    assert [v["variant"] for v in data["variants"]] == ["default", "panel", "journey", "table", "panel-alt"]


def test_navigation_and_flip(test_client):
    r = test_client.post("/api/study/next")
    assert r.json()["card"]["position"] == 2

    test_client.post("/api/study/prev")
    r = test_client.post("/api/study/prev")
    assert r.json()["card"]["position"] == 8

    r = test_client.post("/api/study/flip")
    assert r.json()["card"]["face"] == "back"
    r = test_client.post("/api/study/goto", json={"index": 2})
    card = r.json()["card"]
    assert (card["position"], card["face"]) == (3, "front")


def test_star_affordance_does_not_navigate(test_client):
    test_client.post("/api/study/layout", json={"variant": "panel"})
    test_client.post("/api/study/goto", json={"index": 1})

    r = test_client.post("/api/study/actions", json={"type": "toggleStar", "index": 4})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["card"]["position"] == 2
    assert data["panel"]["items"][4]["starred"] is True

    r = test_client.post("/api/study/actions", json=data["panel"]["items"][6]["select"])
    assert r.json()["card"]["position"] == 7


def test_star_current_card(test_client):
    r = test_client.post("/api/study/star", json={})
    assert r.json()["card"]["starred"] is True
    r = test_client.post("/api/study/star", json={"index": 0})
    assert r.json()["card"]["starred"] is False


def test_star_unknown_index(test_client):
    r = test_client.post("/api/study/star", json={"index": 99})
    assert r.status_code == 404
    r = test_client.post("/api/study/actions", json={"type": "toggleSelect", "index": 99})
    assert r.status_code == 404


def test_goto_action_out_of_range_is_rejected(test_client):
    test_client.post("/api/study/goto", json={"index": 2})

    r = test_client.post("/api/study/actions", json={"type": "goTo", "index": 99})
    assert r.status_code == 404
    assert test_client.get("/api/study").json()["card"]["position"] == 3

    # la route goto, elle, garde le modulo
    r = test_client.post("/api/study/goto", json={"index": 99})
    assert r.status_code == 200
    assert r.json()["card"]["position"] == 4


def test_layout_switch_and_unknown_variant(test_client):
    r = test_client.post("/api/study/layout", json={"variant": "table"})
    data = r.json()
    assert data["layout"] == "table"
    assert data["table"] is not None and data["sidebar"] is None

    r = test_client.post("/api/study/layout", json={"variant": "option-z"})
    assert r.status_code == 200
    assert r.json()["layout"] == "table"


def test_table_selection(test_client):
    test_client.post("/api/study/layout", json={"variant": "table"})
    r = test_client.post("/api/study/actions", json={"type": "toggleSelect", "index": 2})
    data = r.json()
    assert data["table"]["selectedCount"] == 1
    assert data["table"]["rows"][2]["selected"] is True
    assert data["card"]["position"] == 1


def test_import_flow(test_client):
    test_client.post("/api/study/next")
    r = test_client.post("/api/study/import", json={"title": "ABC", "text": "A,1\nB,2\nC,3"})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["title"] == "ABC"
    assert data["card"]["term"] == "A"
    assert data["card"]["total"] == 3
    assert [e["term"] for e in data["sidebar"]["entries"]] == ["A", "B", "C"]


def test_import_failure_leaves_deck(test_client):
    before = test_client.get("/api/study").json()
    for text in ("", "   ", "OnlyOneColumn"):
        r = test_client.post("/api/study/import", json={"text": text})
        assert r.status_code == 400
        assert r.json()["detail"]
    assert test_client.get("/api/study").json() == before


def test_keyboard_and_search(test_client):
    r = test_client.post("/api/study/key", json={"key": "ArrowRight"})
    assert r.json()["card"]["position"] == 2
    r = test_client.post("/api/study/key", json={"key": "ArrowRight", "target": "INPUT"})
    assert r.json()["card"]["position"] == 2

    r = test_client.post("/api/study/search", json={"query": "grid"})
    assert [e["term"] for e in r.json()["sidebar"]["entries"]] == ["Grid System"]


def test_state_survives_app_restart(test_client):
    test_client.post("/api/study/goto", json={"index": 5})
    test_client.post("/api/study/star", json={"index": 3})
    test_client.post("/api/study/layout", json={"variant": "journey"})

    restarted = TestClient(create_app())
    data = restarted.get("/api/study").json()
    assert data["card"]["position"] == 6
    assert data["layout"] == "journey"
    assert [i["label"] for i in data["journey"]["items"]][3] == "Color System"


def test_definition_suggestion(test_client, make_openai):
    r = test_client.get("/api/study/cards/1/suggestion")
    assert r.status_code == 200
    assert r.json() == {"term": "Design Token", "definition": None, "available": False}

    test_client.app.state.definition_service = DefinitionService(client=make_openai(reply="Named values."))
    r = test_client.get("/api/study/cards/1/suggestion")
    assert r.json() == {"term": "Design Token", "definition": "Named values.", "available": True}

    assert test_client.get("/api/study").json()["card"]["position"] == 1
    assert test_client.get("/api/study/cards/42/suggestion").status_code == 404

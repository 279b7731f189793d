import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
from fastapi.testclient import TestClient

from project_panel.main import app
from project_panel.registry import get_registry
from project_panel.schemas.summary import ProjectViewRequest
from project_panel.services.panel_registry import PanelRegistry

NOW = "2025-06-25T00:00:00Z"

PAYLOAD = {
    "project": {
        "id": "p-1",
        "name": "Mobile app",
        "client": "Globex",
        "description": "iOS and Android",
        "status": "Planning",
        "budget": 98000.5,
        "startDate": "2025-06-01",
        "endDate": "2025-07-10",
    },
    "requirements": [
        {"id": "r-1", "projectId": "p-1", "title": "A", "status": "Done", "priority": "High", "createdAt": "2025-06-02"},
        {"id": "r-2", "projectId": "p-2", "title": "B", "status": "Done", "priority": "Low", "createdAt": "2025-06-02"},
        {"id": "r-3", "projectId": "p-1", "title": "C", "status": "To Do", "priority": "Low", "createdAt": "2025-06-02"},
    ],
    "now": NOW,
}


@pytest.fixture
def registry(scheduler):
    return PanelRegistry(5.0, scheduler)


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def open_panel(client):
    response = client.post("/panels/", json=PAYLOAD)
    assert response.status_code == 201
    return response.json()


def test_open_panel_returns_hidden_summary(client, registry):
    data = open_panel(client)
    summary = data["summary"]
    assert data["panel_id"]
    assert len(registry) == 1
    assert summary["budget_revealed"] is False
    assert summary["budget_display"] == "*****"
    assert summary["status_category"] == "planning"
    assert summary["start_date"] == "Jun 1, 2025"
    assert summary["deadline"] == "Jul 10, 2025"
    assert summary["days_left"] == "15 days"
    assert summary["progress_percentage"] == 50
    assert [r["id"] for r in summary["requirements"]] == ["r-1", "r-3"]
    assert [r["id"] for r in summary["milestones"]] == ["r-1"]


def test_toggle_reveals_then_hides(client, scheduler):
    panel_id = open_panel(client)["panel_id"]

    resp = client.post(f"/panels/{panel_id}/budget/toggle", params={"now": NOW})
    assert resp.status_code == 200
    summary = resp.json()["summary"]
    assert summary["budget_revealed"] is True
    assert summary["budget_display"] == "৳98,000.5"
    assert len(scheduler.pending) == 1

    resp = client.post(f"/panels/{panel_id}/budget/toggle")
    assert resp.json()["summary"]["budget_revealed"] is False
    assert scheduler.pending == []


def test_auto_hide_after_timer_fires(client, scheduler):
    panel_id = open_panel(client)["panel_id"]
    client.post(f"/panels/{panel_id}/budget/toggle")

    scheduler.fire_all()

    resp = client.get(f"/panels/{panel_id}", params={"now": NOW})
    assert resp.status_code == 200
    assert resp.json()["summary"]["budget_revealed"] is False
    assert resp.json()["summary"]["days_left"] == "15 days"


def test_close_panel_cancels_timer_and_404_after(client, scheduler, registry):
    panel_id = open_panel(client)["panel_id"]
    client.post(f"/panels/{panel_id}/budget/toggle")
    timer = scheduler.pending[0]

    resp = client.delete(f"/panels/{panel_id}")
    assert resp.status_code == 204
    assert timer.cancelled
    assert len(registry) == 0

    assert client.delete(f"/panels/{panel_id}").status_code == 404
    assert client.get(f"/panels/{panel_id}").status_code == 404
    assert client.post(f"/panels/{panel_id}/budget/toggle").status_code == 404


def test_registry_close_all_cancels_pending_timers(registry, scheduler):
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as c:
        panel_id = c.post("/panels/", json=PAYLOAD).json()["panel_id"]
        c.post(f"/panels/{panel_id}/budget/toggle")
    app.dependency_overrides.clear()

    registry.close_all()
    assert len(registry) == 0
    assert scheduler.timers[0].cancelled


def test_registry_evicts_oldest_panel_over_limit(scheduler):
    registry = PanelRegistry(5.0, scheduler, max_panels=2)
    view = ProjectViewRequest(**PAYLOAD)
    first = registry.open(view.project, view.requirements)
    first.budget.toggle()
    second = registry.open(view.project, view.requirements)
    third = registry.open(view.project, view.requirements)

    assert len(registry) == 2
    assert registry.get(first.panel_id) is None
    assert registry.get(second.panel_id) is second
    assert registry.get(third.panel_id) is third
    assert scheduler.timers[0].cancelled
    assert not first.budget.revealed

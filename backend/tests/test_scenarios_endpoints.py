"""
HTTP tests for the scenario screen, the analysis hand-off and the dashboard.
"""


def _add(client, title="Login", description="desc", priority="High"):
    return client.post("/scenarios", json={"title": title, "description": description, "priority": priority})


def test_add_and_list_scenario(client):
    response = _add(client)

    assert response.status_code == 201
    created = response.json()
    assert created["id"].startswith("SCN-")
    assert created["testCases"] == []
    assert created["areTestsGenerating"] is False
    assert client.get("/scenarios").json() == [created]


def test_add_requires_title(client):
    assert client.post("/scenarios", json={"title": "", "description": "d"}).status_code == 422


def test_generate_test_cases(client, flows):
    scenario_id = _add(client).json()["id"]

    body = client.post(f"/scenarios/{scenario_id}/generate").json()

    assert [tc["testCaseId"] for tc in body["testCases"]] == ["TC-001", "TC-002"]
    assert body["testCases"][0]["steps"] == ["open", "check"]
    assert body["areTestsGenerating"] is False
    assert flows.calls["generateTestCases"] == [("desc", ["FDA", "GDPR"], "High")]


def test_generation_failure_is_502(client, flows):
    scenario_id = _add(client).json()["id"]
    flows.fail.add("generateTestCases")

    response = client.post(f"/scenarios/{scenario_id}/generate")

    assert response.status_code == 502
    assert response.json()["code"] == "TEST_CASE_GENERATION_FAILED"
    assert client.get(f"/scenarios/{scenario_id}").json()["areTestsGenerating"] is False


def test_edit_without_test_cases_is_applied(client, flows):
    scenario_id = _add(client).json()["id"]

    body = client.put(f"/scenarios/{scenario_id}", json={"title": "Sign in", "description": "d2", "priority": "Low"}).json()

    assert body["status"] == "applied"
    assert body["scenario"]["title"] == "Sign in"
    assert flows.count("analyzeImpactOnChange") == 0


def test_edit_confirm_flow(client, flows):
    scenario_id = _add(client).json()["id"]
    client.post(f"/scenarios/{scenario_id}/generate")

    body = client.put(f"/scenarios/{scenario_id}", json={"title": "Sign in", "description": "d2", "priority": "Low"}).json()
    assert body["status"] == "pending_confirmation"
    assert body["impactAnalysis"] == flows.impact
    assert body["scenario"]["title"] == "Login"

    confirmed = client.post(f"/scenarios/{scenario_id}/edit/confirm").json()
    assert confirmed["title"] == "Sign in"
    assert confirmed["testCases"] == []

    assert client.post(f"/scenarios/{scenario_id}/edit/confirm").status_code == 404


def test_edit_cancel_flow(client):
    scenario_id = _add(client).json()["id"]
    client.post(f"/scenarios/{scenario_id}/generate")
    client.put(f"/scenarios/{scenario_id}", json={"title": "Sign in", "description": "d2", "priority": "Low"})

    cancelled = client.post(f"/scenarios/{scenario_id}/edit/cancel").json()

    assert cancelled["title"] == "Login"
    assert len(cancelled["testCases"]) == 2


def test_delete_then_not_found(client):
    scenario_id = _add(client).json()["id"]

    assert client.delete(f"/scenarios/{scenario_id}").status_code == 200
    assert client.get("/scenarios").json() == []
    for response in (
        client.delete(f"/scenarios/{scenario_id}"),
        client.post(f"/scenarios/{scenario_id}/generate"),
        client.put(f"/scenarios/{scenario_id}", json={"title": "x", "description": "y"}),
    ):
        assert response.status_code == 404
        assert response.json()["code"] == "SCENARIO_NOT_FOUND"


def test_analysis_handoff_peek_and_consume(client, flows):
    assert client.get("/scenarios/analysis").json() is None

    client.post("/requirements/sources/transcript", json={"transcript": "Doses are logged.", "listening": False})
    client.post("/requirements/analyze", json={"standards": ["GDPR"]})

    peeked = client.get("/scenarios/analysis").json()
    assert peeked["requirements"] == "Doses are logged."
    assert peeked["compliance"]["suggestions"] == flows.compliance.suggestions

    assert client.post("/scenarios/analysis/consume").json() == peeked
    assert client.post("/scenarios/analysis/consume").json() is None


def test_scenarios_from_project_details(client):
    client.post("/requirements/sources/transcript", json={"transcript": "MedTrack spec", "listening": False})

    response = client.post("/scenarios/from-project-details")

    assert response.status_code == 201
    created = response.json()
    assert [s["title"] for s in created] == ["Login", "Dose reminders"]
    assert created[0]["requirementId"] == "FEAT-001"
    assert created[0]["requirementType"] == "Feature"
    assert created[0]["requirementSource"] == "MedTrack"


def test_scenarios_from_explicit_project_details(client, flows):
    response = client.post(
        "/scenarios/from-project-details",
        json={"appName": "Clinic", "objective": "o", "features": ["Booking"], "techStack": []},
    )

    assert [s["requirementSource"] for s in response.json()] == ["Clinic"]
    assert flows.count("parseProjectDetails") == 0


def test_dashboard_summary(client):
    scenario_id = _add(client).json()["id"]
    _add(client, title="Other", priority="Medium")
    client.post(f"/scenarios/{scenario_id}/generate")

    summary = client.get("/dashboard/summary").json()

    assert summary["totalScenarios"] == 2
    assert summary["totalTestCases"] == 2
    assert summary["scenariosByPriority"] == {"High": 1, "Medium": 1, "Low": 0}
    assert summary["handoffAvailable"] is False


def test_models_and_health(client):
    models = client.get("/models").json()
    assert "gemini-2.5-flash" in [m["id"] for m in models["models"]]
    assert client.get("/health").json() == {"status": "ok"}


def test_notifications_clear(client):
    _add(client)
    assert client.get("/notifications").json()[0]["title"] == "Scenario Added"

    client.delete("/notifications")
    assert client.get("/notifications").json() == []

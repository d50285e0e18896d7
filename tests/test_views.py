"""Tests for adminpanel/views.py: the panel HTTP endpoints."""

from __future__ import annotations

import json

import pytest
from rest_framework.test import APIClient

from adminpanel.models import PanelSession
from api.models import StoredValue

pytestmark = pytest.mark.django_db


def shop_ids(response) -> list:
    return [shop["id"] for shop in response.data["shops"]]


def issue_ids(response) -> list:
    return [issue["id"] for issue in response.data["issues"]]


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------


class TestAccess:
    @pytest.mark.parametrize(
        "url", ["/api/admin-panel/", "/api/shops/", "/api/issues/", "/api/feedback/"]
    )
    def test_anonymous_rejected(self, url: str) -> None:
        assert APIClient().get(url).status_code == 401

    def test_non_staff_forbidden(self, django_user_model) -> None:
        user = django_user_model.objects.create_user(username="shopkeeper", password="pw-123456")
        client = APIClient()
        client.force_authenticate(user=user)

        assert client.get("/api/admin-panel/").status_code == 403


class TestBearerToken:
    @pytest.fixture
    def token_client(self, staff_user) -> APIClient:
        response = APIClient().post(
            "/api/auth/token/", {"username": "ops", "password": "ops-pass-123"}, format="json"
        )
        assert response.status_code == 200

        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        return client

    def test_toggle_kept_between_requests(self, token_client, seeded_storage) -> None:
        token_client.post("/api/shops/u1/toggle-status/")
        token_client.cookies.clear()

        rows = {shop["id"]: shop for shop in token_client.get("/api/shops/").data["shops"]}
        assert rows["u1"]["status"] == "Suspended"

    def test_note_editor_across_requests(self, token_client) -> None:
        token_client.post("/api/issues/ISS-101/edit-note/")
        token_client.cookies.clear()
        token_client.patch("/api/issues/note-draft/", {"text": "Asked for a recording"}, format="json")
        token_client.cookies.clear()

        response = token_client.post("/api/issues/ISS-101/save-note/")

        assert response.status_code == 200
        assert response.data["issue"]["admin_note"] == "Asked for a recording"

    def test_state_shared_with_session_login(self, token_client, staff_user, seeded_storage) -> None:
        token_client.post("/api/admin-panel/tab/", {"tab": "issues"}, format="json")

        browser = APIClient()
        browser.force_authenticate(user=staff_user)
        assert browser.get("/api/admin-panel/").data["state"]["active_tab"] == "issues"


# ---------------------------------------------------------------------------
# Panel shell
# ---------------------------------------------------------------------------


class TestPanel:
    def test_default_tab_is_dashboard(self, api_client, seeded_storage) -> None:
        response = api_client.get("/api/admin-panel/")

        assert response.status_code == 200
        assert response.data["state"] == {
            "active_tab": "dashboard",
            "filter_category": "All",
            "editing_issue_id": None,
            "note_draft": "",
        }
        assert response.data["content"]["total_shops"] == 4
        assert response.data["content"]["active_today"] == 2

    def test_empty_storage_still_renders(self, api_client) -> None:
        response = api_client.get("/api/admin-panel/dashboard/")

        assert response.status_code == 200
        assert response.data["total_shops"] == 0
        assert response.data["active_today"] == 1

    def test_switch_to_shops(self, api_client, seeded_storage) -> None:
        response = api_client.post("/api/admin-panel/tab/", {"tab": "shops"}, format="json")

        assert response.status_code == 200
        assert response.data["state"]["active_tab"] == "shops"
        assert response.data["content"]["total"] == 4
        assert "admin1" not in [shop["id"] for shop in response.data["content"]["shops"]]

    def test_switch_to_issues(self, api_client, seeded_storage) -> None:
        response = api_client.post("/api/admin-panel/tab/", {"tab": "issues"}, format="json")

        content = response.data["content"]
        assert content["feedback"]["total"] == 2
        assert content["issues"]["category"] == "All"
        assert content["issues"]["total"] == 6

    def test_tab_persists_across_requests(self, api_client, seeded_storage) -> None:
        api_client.post("/api/admin-panel/tab/", {"tab": "issues"}, format="json")
        assert api_client.get("/api/admin-panel/").data["state"]["active_tab"] == "issues"

    def test_invalid_tab(self, api_client) -> None:
        response = api_client.post("/api/admin-panel/tab/", {"tab": "billing"}, format="json")

        assert response.status_code == 400
        assert "tab" in response.data

    def test_reload_discards_working_changes(self, api_client, seeded_storage) -> None:
        api_client.post("/api/shops/u1/toggle-status/")
        api_client.post("/api/admin-panel/tab/", {"tab": "shops"}, format="json")

        response = api_client.post("/api/admin-panel/reload/")

        assert response.data["state"]["active_tab"] == "dashboard"
        shops = {shop["id"]: shop for shop in api_client.get("/api/shops/").data["shops"]}
        assert shops["u1"]["status"] == "Active"

    def test_reload_picks_up_storage_changes(self, api_client, seeded_storage, store_value) -> None:
        api_client.get("/api/admin-panel/")
        store_value("dukaan-users", "[]")

        assert api_client.get("/api/admin-panel/").data["content"]["total_shops"] == 4
        api_client.post("/api/admin-panel/reload/")
        assert api_client.get("/api/admin-panel/").data["content"]["total_shops"] == 0


# ---------------------------------------------------------------------------
# Shop registry
# ---------------------------------------------------------------------------


class TestShopRegistry:
    def test_list_excludes_admins(self, api_client, seeded_storage) -> None:
        response = api_client.get("/api/shops/")

        assert response.status_code == 200
        assert response.data["total"] == 4
        assert shop_ids(response) == ["u1", "u2", "u3"]

    def test_row_fields(self, api_client, seeded_storage) -> None:
        rows = {shop["id"]: shop for shop in api_client.get("/api/shops/").data["shops"]}

        assert rows["u1"]["shop_name"] == "Asha's Store"
        assert rows["u1"]["phone"] == "+91 98765 43210"
        assert rows["u1"]["registration_date"] is None
        assert rows["u1"]["action_label"] == "Suspend"
        assert rows["u2"]["action_label"] == "Activate"
        assert rows["u2"]["registration_date"] == "2024-01-05T10:00:00+00:00"

    def test_toggle(self, api_client, seeded_storage) -> None:
        response = api_client.post("/api/shops/u1/toggle-status/")

        assert response.status_code == 200
        assert response.data["shop"]["status"] == "Suspended"
        assert response.data["shop"]["action_label"] == "Activate"

        rows = {shop["id"]: shop for shop in api_client.get("/api/shops/").data["shops"]}
        assert rows["u1"]["status"] == "Suspended"
        assert rows["u2"]["status"] == "Suspended"
        assert rows["u3"]["status"] == "Active"

    def test_toggle_twice(self, api_client, seeded_storage) -> None:
        api_client.post("/api/shops/u2/toggle-status/")
        response = api_client.post("/api/shops/u2/toggle-status/")
        assert response.data["shop"]["status"] == "Suspended"

    def test_toggle_unknown(self, api_client, seeded_storage) -> None:
        before = api_client.get("/api/shops/").data

        response = api_client.post("/api/shops/nobody/toggle-status/")

        assert response.status_code == 404
        assert response.data == {"error": "Shop not found"}
        assert api_client.get("/api/shops/").data == before

    def test_toggle_stays_in_working_copy(self, api_client, seeded_storage, raw_shops) -> None:
        api_client.post("/api/shops/u1/toggle-status/")
        assert json.loads(StoredValue.objects.get(key="dukaan-users").value) == raw_shops

    def test_toggle_persisted_when_enabled(self, api_client, seeded_storage, persist_mutations) -> None:
        api_client.post("/api/shops/u1/toggle-status/")

        stored = {shop["id"]: shop for shop in json.loads(
            StoredValue.objects.get(key="dukaan-users").value
        )}
        assert stored["u1"]["status"] == "Suspended"
        assert stored["u1"]["shopName"] == "Asha's Store"
        assert stored["admin1"]["role"] == "admin"

    def test_operators_are_isolated(self, api_client, seeded_storage, django_user_model) -> None:
        api_client.post("/api/shops/u1/toggle-status/")

        other = APIClient()
        other.force_authenticate(
            user=django_user_model.objects.create_user(username="ops2", password="pw-123456", is_staff=True)
        )
        rows = {shop["id"]: shop for shop in other.get("/api/shops/").data["shops"]}
        assert rows["u1"]["status"] == "Active"


# ---------------------------------------------------------------------------
# Feedback
# ---------------------------------------------------------------------------


class TestFeedback:
    def test_list(self, api_client, seeded_storage) -> None:
        response = api_client.get("/api/feedback/")

        assert response.status_code == 200
        assert response.data["total"] == 2
        assert response.data["feedback"][0] == {
            "id": "fb1", "user_name": "Asha Verma", "date": "2024-05-12", "rating": 5, "comment": "Great"
        }

    def test_empty(self, api_client) -> None:
        assert api_client.get("/api/feedback/").data == {"total": 0, "feedback": []}

    def test_read_only(self, api_client) -> None:
        assert api_client.post("/api/feedback/", {}, format="json").status_code == 405


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------


class TestIssueFilter:
    def test_all_by_default(self, api_client) -> None:
        response = api_client.get("/api/issues/")

        assert response.data["category"] == "All"
        assert issue_ids(response) == [
            "ISS-101", "ISS-102", "ISS-103", "ISS-104", "ISS-105", "ISS-106"
        ]

    def test_select_category(self, api_client) -> None:
        response = api_client.post("/api/issues/filter/", {"category": "Voice"}, format="json")

        assert response.status_code == 200
        assert issue_ids(response) == ["ISS-101", "ISS-105"]
        assert issue_ids(api_client.get("/api/issues/")) == ["ISS-101", "ISS-105"]

    def test_switching_category_keeps_mutations(self, api_client) -> None:
        api_client.post("/api/issues/filter/", {"category": "Voice"}, format="json")
        api_client.post("/api/issues/ISS-101/status/", {"status": "Resolved"}, format="json")

        response = api_client.post("/api/issues/filter/", {"category": "UI"}, format="json")
        assert issue_ids(response) == ["ISS-104"]

    def test_unknown_category(self, api_client) -> None:
        response = api_client.post("/api/issues/filter/", {"category": "Billing"}, format="json")

        assert response.status_code == 400
        assert "category" in response.data


class TestIssueStatus:
    @pytest.mark.parametrize("status", ["Open", "In-Progress", "Resolved", "Rejected"])
    def test_set_status(self, api_client, status: str) -> None:
        response = api_client.post("/api/issues/ISS-103/status/", {"status": status}, format="json")

        assert response.status_code == 200
        assert response.data["issue"]["status"] == status

    def test_only_target_changes(self, api_client) -> None:
        before = {issue["id"]: issue for issue in api_client.get("/api/issues/").data["issues"]}

        api_client.post("/api/issues/ISS-102/status/", {"status": "Resolved"}, format="json")

        after = {issue["id"]: issue for issue in api_client.get("/api/issues/").data["issues"]}
        assert after["ISS-102"] == {**before["ISS-102"], "status": "Resolved"}
        del before["ISS-102"], after["ISS-102"]
        assert after == before

    def test_invalid_status(self, api_client) -> None:
        response = api_client.post("/api/issues/ISS-101/status/", {"status": "Closed"}, format="json")

        assert response.status_code == 400
        assert api_client.get("/api/issues/").data["issues"][0]["status"] == "Open"

    def test_unknown_issue(self, api_client) -> None:
        response = api_client.post("/api/issues/ISS-999/status/", {"status": "Resolved"}, format="json")

        assert response.status_code == 404
        assert response.data == {"error": "Issue not found"}


class TestIssueNotes:
    def test_open_editor_seeds_draft(self, api_client) -> None:
        response = api_client.post("/api/issues/ISS-102/edit-note/")

        assert response.status_code == 200
        assert response.data["editing_issue_id"] == "ISS-102"
        assert response.data["note_draft"] == "Reproduced on v1.4. Fix scheduled for next build."

    def test_edit_save_flow(self, api_client) -> None:
        api_client.post("/api/issues/ISS-101/edit-note/")
        draft = api_client.patch("/api/issues/note-draft/", {"text": "Asked for a recording"}, format="json")
        assert draft.data["note_draft"] == "Asked for a recording"

        response = api_client.post("/api/issues/ISS-101/save-note/")

        assert response.status_code == 200
        assert response.data["issue"]["admin_note"] == "Asked for a recording"
        assert response.data["state"]["editing_issue_id"] is None
        assert response.data["state"]["note_draft"] == ""

    def test_save_unmodified_keeps_note(self, api_client) -> None:
        api_client.post("/api/issues/ISS-104/edit-note/")
        response = api_client.post("/api/issues/ISS-104/save-note/")
        assert response.data["issue"]["admin_note"] == "Shortened labels in 1.4.2."

    def test_cancel_leaves_note(self, api_client) -> None:
        api_client.post("/api/issues/ISS-104/edit-note/")
        api_client.patch("/api/issues/note-draft/", {"text": "scratch that"}, format="json")

        response = api_client.post("/api/issues/cancel-note/")

        assert response.data["editing_issue_id"] is None
        issues = {issue["id"]: issue for issue in api_client.get("/api/issues/").data["issues"]}
        assert issues["ISS-104"]["admin_note"] == "Shortened labels in 1.4.2."

    def test_second_editor_replaces_first(self, api_client) -> None:
        api_client.post("/api/issues/ISS-101/edit-note/")
        api_client.patch("/api/issues/note-draft/", {"text": "unsaved"}, format="json")

        response = api_client.post("/api/issues/ISS-106/edit-note/")

        assert response.data["editing_issue_id"] == "ISS-106"
        assert response.data["note_draft"] == "Alert threshold was set to 500 by the user."

    def test_draft_whitespace_kept(self, api_client) -> None:
        api_client.post("/api/issues/ISS-101/edit-note/")
        response = api_client.patch("/api/issues/note-draft/", {"text": "  spaced  "}, format="json")
        assert response.data["note_draft"] == "  spaced  "

    def test_draft_without_editor(self, api_client) -> None:
        response = api_client.patch("/api/issues/note-draft/", {"text": "x"}, format="json")

        assert response.status_code == 400
        assert response.data == {"error": "No issue note is being edited"}

    def test_edit_unknown_issue(self, api_client) -> None:
        assert api_client.post("/api/issues/ISS-999/edit-note/").status_code == 404

    def test_save_without_editor_keeps_note(self, api_client) -> None:
        response = api_client.post("/api/issues/ISS-102/save-note/")

        assert response.status_code == 400
        assert response.data == {"error": "This issue note is not being edited"}
        issues = {issue["id"]: issue for issue in api_client.get("/api/issues/").data["issues"]}
        assert issues["ISS-102"]["admin_note"] == "Reproduced on v1.4. Fix scheduled for next build."

    def test_save_other_issue_rejected(self, api_client) -> None:
        api_client.post("/api/issues/ISS-102/edit-note/")

        response = api_client.post("/api/issues/ISS-104/save-note/")

        assert response.status_code == 400
        issues = {issue["id"]: issue for issue in api_client.get("/api/issues/").data["issues"]}
        assert issues["ISS-104"]["admin_note"] == "Shortened labels in 1.4.2."
        state = api_client.get("/api/admin-panel/").data["state"]
        assert state["editing_issue_id"] == "ISS-102"
        assert state["note_draft"] == "Reproduced on v1.4. Fix scheduled for next build."

    def test_save_unknown_issue_rejected(self, api_client) -> None:
        api_client.post("/api/issues/ISS-101/edit-note/")
        assert api_client.post("/api/issues/ISS-999/save-note/").status_code == 400

    def test_editor_state_on_overview(self, api_client) -> None:
        api_client.post("/api/issues/ISS-101/edit-note/")
        api_client.patch("/api/issues/note-draft/", {"text": "half typed"}, format="json")

        state = api_client.get("/api/admin-panel/").data["state"]
        assert state["editing_issue_id"] == "ISS-101"
        assert state["note_draft"] == "half typed"


# ---------------------------------------------------------------------------
# Stored panel state
# ---------------------------------------------------------------------------


class TestPanelSession:
    def test_first_request_stores_state(self, api_client, staff_user, seeded_storage) -> None:
        api_client.get("/api/admin-panel/")

        record = PanelSession.objects.get(user=staff_user)
        assert len(record.state["users"]) == 4
        assert record.state["active_tab"] == "dashboard"

    def test_mutation_written_to_row(self, api_client, staff_user, seeded_storage) -> None:
        api_client.post("/api/shops/u1/toggle-status/")

        users = {user["id"]: user for user in PanelSession.objects.get(user=staff_user).state["users"]}
        assert users["u1"]["status"] == "Suspended"

    def test_cleared_row_remounts(self, api_client, staff_user, seeded_storage) -> None:
        api_client.post("/api/shops/u1/toggle-status/")
        PanelSession.objects.filter(user=staff_user).update(state={})

        rows = {shop["id"]: shop for shop in api_client.get("/api/shops/").data["shops"]}
        assert rows["u1"]["status"] == "Active"

    def test_admin_changelist(self, admin_client, admin_user) -> None:
        PanelSession.objects.create(user=admin_user, state={"active_tab": "shops"})

        response = admin_client.get("/admin/adminpanel/panelsession/")

        assert response.status_code == 200
        assert str(PanelSession.objects.get(user=admin_user)) == f"Panel session for {admin_user}"

"""Tests for the owner-scoped environment routes and access layer."""

import pytest

from saafi.core.exceptions import NotFoundError, ValidationError
from saafi.modules.environments.schemas import EnvironmentCreate
from saafi.modules.environments.service import EnvironmentService

from tests.conftest import make_token


def seed_environment(fake_supabase, name, owner_id="user-1", **fields):
    row = {"name": name, "status": "pending", "cloud_provider": "aws", "owner_id": owner_id}
    row.update(fields)
    return fake_supabase.seed("environments", **row)


class TestEnvironmentEndpoints:
    def test_create_sets_owner_from_token(self, client, fake_supabase, auth_headers):
        response = client.post(
            "/api/environments",
            json={"name": "staging", "cloud_provider": "gcp", "owner_id": "intruder"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()
        assert data["owner_id"] == "user-1"
        assert data["status"] == "pending"
        assert data["cloud_provider"] == "gcp"
        assert fake_supabase.tables["environments"][0]["owner_id"] == "user-1"

    def test_empty_name_is_rejected(self, client, fake_supabase, auth_headers):
        response = client.post("/api/environments", json={"name": ""}, headers=auth_headers)
        assert response.status_code == 400
        assert fake_supabase.calls == []

    def test_unknown_status_is_rejected(self, client, auth_headers):
        response = client.post(
            "/api/environments",
            json={"name": "x", "status": "running"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_list_only_returns_callers_environments_newest_first(self, client, fake_supabase, auth_headers):
        seed_environment(fake_supabase, "first")
        seed_environment(fake_supabase, "not mine", owner_id="user-2")
        seed_environment(fake_supabase, "second")

        response = client.get("/api/environments", headers=auth_headers)
        assert response.status_code == 200
        assert [env["name"] for env in response.json()] == ["second", "first"]

    def test_get_other_users_environment_is_404(self, client, fake_supabase, auth_headers):
        row = seed_environment(fake_supabase, "theirs", owner_id="user-2")
        response = client.get(f"/api/environments/{row['id']}", headers=auth_headers)
        assert response.status_code == 404

    def test_delete_environment(self, client, fake_supabase, auth_headers):
        row = seed_environment(fake_supabase, "doomed")
        response = client.delete(f"/api/environments/{row['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert fake_supabase.tables["environments"] == []

    def test_delete_leaves_other_owners_rows(self, client, fake_supabase):
        row = seed_environment(fake_supabase, "theirs", owner_id="user-2")
        headers = {"Authorization": f"Bearer {make_token(sub='user-1')}"}
        response = client.delete(f"/api/environments/{row['id']}", headers=headers)
        assert response.status_code == 204
        assert len(fake_supabase.tables["environments"]) == 1

    def test_repeated_delete_is_accepted(self, client, fake_supabase, auth_headers):
        row = seed_environment(fake_supabase, "twice")
        assert client.delete(f"/api/environments/{row['id']}", headers=auth_headers).status_code == 204
        assert client.delete(f"/api/environments/{row['id']}", headers=auth_headers).status_code == 204

    def test_delete_failure_is_500(self, client, fake_supabase, auth_headers):
        row = seed_environment(fake_supabase, "stuck")
        fake_supabase.fail_next("environments", "delete", "permission denied")
        response = client.delete(f"/api/environments/{row['id']}", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"detail": "permission denied"}


class TestEnvironmentService:
    def test_github_repo_is_stored_when_given(self, fake_supabase):
        service = EnvironmentService(fake_supabase)
        env = service.create_environment(
            EnvironmentCreate(name="app", github_repo="octo/app"), "user-1"
        )
        assert env.github_repo == "octo/app"

    def test_insert_failure_carries_message(self, fake_supabase):
        fake_supabase.fail_next("environments", "insert", "violates check constraint")
        service = EnvironmentService(fake_supabase)
        with pytest.raises(ValidationError) as excinfo:
            service.create_environment(EnvironmentCreate(name="app"), "user-1")
        assert excinfo.value.detail == "violates check constraint"

    def test_get_missing(self, fake_supabase):
        with pytest.raises(NotFoundError):
            EnvironmentService(fake_supabase).get_environment("nope", "user-1")

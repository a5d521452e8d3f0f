"""
API tests for sign up / sign in / sign out, profile and rate limiting
"""
from storefront.core.config import settings


class TestAuthAPI:

    def test_sign_up_and_sign_in(self, api_client):
        response = api_client.post("/api/v1/auth/sign-up", json={
            "email": "new@example.com", "password": "secret1", "confirm_password": "secret1",
        })
        assert response.status_code == 201
        assert response.json()["data"]["user"]["email"] == "new@example.com"

        response = api_client.post("/api/v1/auth/sign-in", json={"email": "new@example.com", "password": "secret1"})
        assert response.status_code == 200
        assert response.json()["message"] == "Welcome back!"
        assert response.json()["data"]["access_token"]

    def test_sign_up_password_mismatch(self, api_client):
        response = api_client.post("/api/v1/auth/sign-up", json={
            "email": "new@example.com", "password": "secret1", "confirm_password": "secret2",
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "Passwords do not match"

    def test_sign_in_wrong_password(self, api_client):
        response = api_client.post("/api/v1/auth/sign-in", json={"email": "nobody@example.com", "password": "x"})

        assert response.status_code == 400

    def test_sign_in_rate_limited(self, api_client, monkeypatch):
        monkeypatch.setattr(settings, "AUTH_RATE_LIMIT", 2)
        credentials = {"email": "nobody@example.com", "password": "x"}

        api_client.post("/api/v1/auth/sign-in", json=credentials)
        api_client.post("/api/v1/auth/sign-in", json=credentials)
        response = api_client.post("/api/v1/auth/sign-in", json=credentials)

        assert response.status_code == 429
        assert "Retry-After" in response.headers

    def test_sign_out(self, user_client, fake_supabase):
        response = user_client.post("/api/v1/auth/sign-out")

        assert response.status_code == 200
        assert fake_supabase.auth.admin.signed_out == ["token-user"]

    def test_sign_out_requires_token(self, api_client):
        assert api_client.post("/api/v1/auth/sign-out").status_code == 401


class TestProfileAPI:

    def test_get_profile(self, user_client):
        data = user_client.get("/api/v1/auth/profile").json()["data"]

        assert data["full_name"] == "Nimal Perera"

    def test_update_profile(self, user_client):
        response = user_client.patch("/api/v1/auth/profile", json={"city": "Galle", "phone": "0719876543"})

        assert response.json()["data"]["city"] == "Galle"
        assert user_client.get("/api/v1/auth/profile").json()["data"]["phone"] == "0719876543"

"""
Unit tests for AuthService (sign up rules, sign in, sign out)
"""
from unittest.mock import MagicMock

import pytest

from storefront.domain.exceptions import AuthenticationError, SignUpError
from storefront.services.auth_service import AuthService, validate_sign_up


@pytest.fixture
def service(fake_supabase):
    return AuthService(auth_client_factory=lambda: fake_supabase, admin_client=fake_supabase)


class TestValidateSignUp:

    def test_passwords_must_match(self):
        with pytest.raises(SignUpError, match="Passwords do not match"):
            validate_sign_up("secret1", "secret2")

    def test_minimum_length(self):
        with pytest.raises(SignUpError, match="at least 6 characters"):
            validate_sign_up("abc", "abc")

    def test_valid(self):
        validate_sign_up("secret", "secret")


class TestAuthService:

    def test_sign_up_then_sign_in(self, service):
        created = service.sign_up("new@example.com", "secret1", "secret1")
        session = service.sign_in("new@example.com", "secret1")

        assert created["user"]["email"] == "new@example.com"
        assert session["user"]["id"] == created["user"]["id"]
        assert session["access_token"]

    def test_sign_up_rejects_mismatch_before_calling_backend(self):
        factory = MagicMock()
        service = AuthService(auth_client_factory=factory, admin_client=MagicMock())

        with pytest.raises(SignUpError):
            service.sign_up("new@example.com", "secret1", "secret2")

        factory.assert_not_called()

    def test_duplicate_email(self, service):
        service.sign_up("new@example.com", "secret1", "secret1")

        with pytest.raises(SignUpError, match="already registered"):
            service.sign_up("new@example.com", "secret1", "secret1")

    def test_wrong_password(self, service):
        service.sign_up("new@example.com", "secret1", "secret1")

        with pytest.raises(AuthenticationError, match="Invalid login credentials"):
            service.sign_in("new@example.com", "wrong")

    def test_sign_out_and_session(self, service, fake_supabase):
        token = service.sign_up("new@example.com", "secret1", "secret1")["access_token"]

        assert service.get_session_user(token)["email"] == "new@example.com"
        assert service.get_session_user("unknown") is None

        service.sign_out(token)
        assert fake_supabase.auth.admin.signed_out == [token]

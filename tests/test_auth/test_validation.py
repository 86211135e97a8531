"""Tests for form validation rules."""

from __future__ import annotations

import pytest

from loginprefs.auth import validation as v


class TestEmail:
    @pytest.mark.parametrize(
        "email",
        ["a@b.com", "first.last+tag@mail.example.org", "  padded@example.com  ", "x_y%z@d-1.io"],
    )
    def test_valid(self, email: str) -> None:
        assert v.email_error(email) is None
        assert v.is_valid_email(email) is True

    @pytest.mark.parametrize("email", ["", "   ", None])
    def test_required(self, email: str | None) -> None:
        assert v.email_error(email) == v.EMAIL_REQUIRED

    @pytest.mark.parametrize("email", ["bad", "a@b", "@example.com", "a b@example.com", "a@.com"])
    def test_invalid_format(self, email: str) -> None:
        assert v.email_error(email) == v.EMAIL_INVALID


class TestPassword:
    def test_too_short(self) -> None:
        assert v.password_error("abc") == "Password must be at least 6 characters"

    def test_bounds(self) -> None:
        assert v.password_error("abcdef") is None
        assert v.password_error("a" * 20) is None
        assert v.password_error("a" * 21) == "Password must be less than 20 characters"

    def test_required(self) -> None:
        assert v.password_error("") == v.PASSWORD_REQUIRED
        assert v.password_error(None) == v.PASSWORD_REQUIRED

    def test_whitespace_counts(self) -> None:
        assert v.password_error("      ") is None

    def test_is_valid_password(self) -> None:
        assert v.is_valid_password("secret") is True
        assert v.is_valid_password("short") is False
        assert v.is_valid_password(None) is False


class TestName:
    def test_valid(self) -> None:
        assert v.name_error("Ada Lovelace") is None
        assert v.is_valid_name("  Al  ") is True

    def test_required(self) -> None:
        assert v.name_error("   ") == v.NAME_REQUIRED

    def test_length_uses_trimmed_value(self) -> None:
        assert v.name_error(" A ") == v.NAME_TOO_SHORT
        assert v.name_error("A" * 50) is None
        assert v.name_error("A" * 51) == v.NAME_TOO_LONG

    @pytest.mark.parametrize("name", ["Ada2", "O'Brien", "Jean-Luc", "Zoë"])
    def test_invalid_characters(self, name: str) -> None:
        assert v.name_error(name) == v.NAME_INVALID_CHARS


class TestConfirmPassword:
    def test_required(self) -> None:
        assert v.confirm_password_error("secret1", "") == v.CONFIRM_REQUIRED

    def test_mismatch_is_case_sensitive(self) -> None:
        assert v.confirm_password_error("Secret1", "secret1") == v.PASSWORD_MISMATCH

    def test_match(self) -> None:
        assert v.confirm_password_error("secret1", "secret1") is None
        assert v.do_passwords_match(None, "x") is False


class TestTrim:
    def test_strips_control_chars_and_space(self) -> None:
        assert v.trim("\x00\t Ada \r\n") == "Ada"
        assert v.trim(None) == ""

    def test_keeps_non_breaking_space(self) -> None:
        assert v.trim("\u00a0Ada\u00a0") == "\u00a0Ada\u00a0"

    def test_name_with_non_breaking_space_rejected(self) -> None:
        assert v.name_error("\u00a0Ada") == v.NAME_INVALID_CHARS
        assert v.name_error("\x0bAda\x1f") is None

    def test_email_with_non_breaking_space_rejected(self) -> None:
        assert v.email_error("\u00a0a@b.com") == v.EMAIL_INVALID
        assert v.email_error("\u00a0") == v.EMAIL_INVALID

    def test_blank_is_only_ascii_blank(self) -> None:
        assert v.is_not_empty("\u2003") is True
        assert v.is_not_empty(" \t\x00") is False


class TestIsNotEmpty:
    def test_values(self) -> None:
        assert v.is_not_empty("x") is True
        assert v.is_not_empty("  ") is False
        assert v.is_not_empty(None) is False


# ── Aggregates ───────────────────────────────────────────────────────────────


class TestValidateLogin:
    def test_valid(self) -> None:
        result = v.validate_login("a@b.com", "x")
        assert result.is_valid is True
        assert result.errors() == {}

    def test_no_length_check_at_login(self) -> None:
        assert v.validate_login("a@b.com", "abc").is_valid is True

    def test_errors(self) -> None:
        result = v.validate_login("bad", "")
        assert result.is_valid is False
        assert result.email_error == v.EMAIL_INVALID
        assert result.password_error == v.PASSWORD_REQUIRED
        assert result.name_error is None


class TestValidateRegistration:
    def test_valid(self) -> None:
        result = v.validate_registration("Ada Lovelace", "ada@example.com", "secret1", "secret1")
        assert result.is_valid is True

    def test_reports_every_field(self) -> None:
        result = v.validate_registration("", "bad", "abc", "abd")
        assert result.is_valid is False
        assert set(result.errors()) == {"name", "email", "password", "confirm_password"}
        assert result.confirm_password_error == v.PASSWORD_MISMATCH

    def test_single_error_invalidates(self) -> None:
        result = v.validate_registration("Ada", "ada@example.com", "secret1", "secret2")
        assert result.is_valid is False
        assert result.errors() == {"confirm_password": v.PASSWORD_MISMATCH}

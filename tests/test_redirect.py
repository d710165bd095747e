import pytest

from propcalc.utils.redirect import ALLOWED_PATHS, safe_path, safe_url

CANDIDATES = [
    None,
    "",
    "/",
    "/dashboard",
    "/calculator",
    "/calculations",
    "/calculations/123?tab=notes",
    "/settings/profile",
    "/reset-password?token=abc",
    "/admin/secret",
    "http://evil.com",
    "https://app.example.com/dashboard",
    "javascript:alert(1)",
    "dashboard",
    "//evil.com/x",
    "///evil.com",
    "/dashboard@evil.com",
    "/@evil.com",
    "/\\evil.com",
    "/dashboard\\..\\admin",
    "/dashboard/../admin",
    "/calculations/%2e%2e/admin",
    "/dashboard/%zz",
    "/dashboard/\t/evil.com",
    "/dashboard\r\nSet-Cookie: x=1",
    "/dashboards",
    "/dashboard#top",
    "/?next=//evil.com",
]


def test_absent_candidate():
    assert safe_path(None, "/dashboard") == "/dashboard"
    assert safe_path("", "/dashboard") == "/dashboard"
    assert safe_path(None) == "/dashboard"


def test_non_string_candidate():
    assert safe_path(42, "/dashboard") == "/dashboard"
    assert safe_path(["/settings"], "/dashboard") == "/dashboard"
    assert safe_path(b"/settings", "/dashboard") == "/dashboard"


@pytest.mark.parametrize("candidate", CANDIDATES)
def test_result_is_local_path(candidate):
    result = safe_path(candidate, "/dashboard")

    assert result.startswith("/")
    assert not result.startswith("//")


@pytest.mark.parametrize("candidate", CANDIDATES)
def test_idempotent(candidate):
    once = safe_path(candidate, "/dashboard")

    assert safe_path(once, "/dashboard") == once


def test_rejects_absolute_urls():
    assert safe_path("http://evil.com", "/dashboard") == "/dashboard"
    assert safe_path("https://app.example.com/settings", "/dashboard") == "/dashboard"
    assert safe_path("javascript:alert(1)", "/dashboard") == "/dashboard"
    assert safe_path("settings", "/dashboard") == "/dashboard"


def test_rejects_protocol_relative():
    assert safe_path("//evil.com/x", "/dashboard") == "/dashboard"
    assert safe_path("//evil.com", "/dashboard") == "/dashboard"
    assert safe_path("///evil.com", "/dashboard") == "/dashboard"


def test_rejects_at_sign():
    assert safe_path("/dashboard@evil.com", "/dashboard") == "/dashboard"
    assert safe_path("/@evil.com", "/dashboard") == "/dashboard"
    assert safe_path("/settings?user=a@b.c", "/dashboard") == "/dashboard"


def test_rejects_backslash():
    assert safe_path("/\\evil.com", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard\\evil", "/dashboard") == "/dashboard"


def test_allowed_paths_pass_unchanged():
    assert safe_path("/calculations", "/dashboard") == "/calculations"
    assert (
        safe_path("/calculations/123?tab=notes", "/dashboard")
        == "/calculations/123?tab=notes"
    )

    for prefix in ALLOWED_PATHS:
        assert safe_path(prefix, "/fallback") == prefix
        assert safe_path(f"{prefix}/nested/page", "/fallback") == f"{prefix}/nested/page"


def test_root_passes():
    assert safe_path("/", "/dashboard") == "/"
    assert safe_path("/?welcome=1", "/dashboard") == "/?welcome=1"


def test_query_is_not_inspected():
    assert safe_path("/?next=//evil.com", "/dashboard") == "/?next=//evil.com"


def test_rejects_unlisted_paths():
    assert safe_path("/admin/secret", "/dashboard") == "/dashboard"
    assert safe_path("/dashboards", "/dashboard") == "/dashboard"
    assert safe_path("/calculatorx/1", "/dashboard") == "/dashboard"
    assert safe_path("/login", "/dashboard") == "/dashboard"


def test_rejects_fragments():
    assert safe_path("/dashboard#top", "/dashboard") == "/dashboard"


def test_rejects_dot_segment_escapes():
    assert safe_path("/dashboard/../admin", "/dashboard") == "/dashboard"
    assert safe_path("/calculations/%2e%2e/admin", "/dashboard") == "/dashboard"
    assert safe_path("/calculations/%2E%2E/%2E%2E/admin", "/dashboard") == "/dashboard"
    assert safe_path("/settings/./../../etc", "/dashboard") == "/dashboard"


def test_keeps_dot_segments_that_stay_inside():
    assert safe_path("/calculations/1/../2", "/dashboard") == "/calculations/1/../2"
    assert safe_path("/settings/./profile", "/dashboard") == "/settings/./profile"


def test_rejects_encoded_tricks():
    assert safe_path("/dashboard/%40evil.com", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard/%5Cevil.com", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard/%zz", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard/%", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard/%ff", "/dashboard") == "/dashboard"


def test_percent_encoded_path_passes():
    assert safe_path("/calculations/my%20house", "/dashboard") == "/calculations/my%20house"


def test_rejects_control_characters():
    assert safe_path("/dashboard/\t/evil.com", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard\r\nSet-Cookie: x=1", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard/%0d%0aX: y", "/dashboard") == "/dashboard"
    assert safe_path("/dashboard\x00", "/dashboard") == "/dashboard"


def test_custom_fallback():
    assert safe_path("http://evil.com", "/calculator") == "/calculator"
    assert safe_path("/calculations", "/calculator") == "/calculations"


def test_safe_url():
    assert (
        safe_url("/settings", "https://app.example.com", "/dashboard")
        == "https://app.example.com/settings"
    )
    assert (
        safe_url("//evil.com", "https://app.example.com", "/dashboard")
        == "https://app.example.com/dashboard"
    )
    assert safe_url(None, "http://localhost:8000") == "http://localhost:8000/dashboard"


def test_safe_url_keeps_query():
    assert (
        safe_url("/calculations/7?tab=notes", "https://app.example.com")
        == "https://app.example.com/calculations/7?tab=notes"
    )


@pytest.mark.parametrize("candidate", CANDIDATES)
def test_safe_url_stays_on_origin(candidate):
    origin = "https://app.example.com"
    result = safe_url(candidate, origin, "/dashboard")

    assert result.startswith(origin + "/")
    assert not result[len(origin) :].startswith("//")

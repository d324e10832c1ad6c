"""Tests for application settings."""

import pytest

from invoice_dashboard.config.settings import DashboardSettings
from invoice_dashboard.core.exceptions import ConfigurationError


class TestDashboardSettings:
    def test_defaults(self):
        settings = DashboardSettings()
        assert settings.invoices_path == "/dashboard/invoices"
        assert settings.strict_mutations is False

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/billing/invoices/", "/billing/invoices"),
            ("billing/invoices", "/billing/invoices"),
            (" /invoices ", "/invoices"),
        ],
    )
    def test_path_is_normalized(self, monkeypatch, raw, expected):
        monkeypatch.setenv("DASHBOARD_INVOICES_PATH", raw)
        assert DashboardSettings().invoices_path == expected

    @pytest.mark.parametrize("raw", ["/", "", "//"])
    def test_root_path_rejected(self, monkeypatch, raw):
        monkeypatch.setenv("DASHBOARD_INVOICES_PATH", raw)

        with pytest.raises(ConfigurationError) as exc_info:
            DashboardSettings()

        assert exc_info.value.code == "INVALID_INVOICES_PATH"

    def test_strict_mode_from_env(self, monkeypatch):
        monkeypatch.setenv("DASHBOARD_STRICT_MUTATIONS", "true")
        assert DashboardSettings().strict_mutations is True

"""Client-side security checks against the live storefront and login page."""

import pytest
import pytest_asyncio

from storefront_qa.helpers.security_helper import (
    AUTH_BYPASS_SCENARIOS,
    PASSWORD_PROBES,
    SECURITY_HEADERS,
    SQL_INJECTION_PAYLOADS,
    XSS_PAYLOADS,
)

pytestmark = [pytest.mark.e2e, pytest.mark.security, pytest.mark.asyncio]


@pytest_asyncio.fixture
async def loaded_home(home_page, util):
    await home_page.goto()
    await util.wait_for_network_idle()
    return home_page


@pytest_asyncio.fixture
async def loaded_login(login_page):
    await login_page.goto()
    return login_page


class TestTransport:
    async def test_security_headers(self, loaded_home, security):
        headers = await security.check_security_headers()

        assert list(headers) == list(SECURITY_HEADERS)

    async def test_https(self, loaded_home, util):
        assert util.get_page_url().startswith("https://")

    async def test_clickjacking(self, loaded_home, security):
        protection = await security.check_clickjacking_protection()

        assert protection.message
        if protection.x_frame_options and protection.x_frame_options.upper() == "DENY":
            assert not protection.is_frameable

    async def test_mixed_content(self, loaded_home, security):
        issues = await security.check_mixed_content()

        assert all(issue.count > 0 for issue in issues)


class TestInjection:
    """Hostile search input and the catalogued probes."""

    async def test_xss_search_not_executed(self, loaded_home, dialogs):
        await loaded_home.search_product(XSS_PAYLOADS[0])
        await loaded_home.wait_for_network_idle()

        assert dialogs == []

    async def test_sql_search(self, loaded_home, test_data):
        total = await loaded_home.get_product_count()
        await loaded_home.search_product(test_data.generate_sql_injection_payload())

        assert await loaded_home.get_product_count() < total

    async def test_xss_probes(self, loaded_home, security):
        findings = await security.test_xss_vulnerability()

        assert {finding.payload for finding in findings} <= set(XSS_PAYLOADS)

    async def test_sql_probes(self, loaded_home, security):
        probes = await security.test_sql_injection()

        assert [probe.payload for probe in probes] == list(SQL_INJECTION_PAYLOADS)


class TestPageContent:
    async def test_csrf_forms(self, loaded_home, security):
        forms = await security.test_csrf_protection()

        assert all(form.has_csrf_token == (form.token_name != "Not found") for form in forms)

    async def test_sensitive_data(self, loaded_home, security):
        findings = await security.test_sensitive_data_exposure()

        assert all(finding.found_count > 0 for finding in findings)
        assert not any(f.sensitive for f in findings if f.type == "emails")

    async def test_cookies(self, loaded_home, security):
        cookies = await security.check_insecure_cookies()

        assert cookies.total_cookies == len(cookies.cookies)

    async def test_input_validation(self, loaded_home, security):
        issues = await security.check_input_validation()

        assert all(issue.field_name for issue in issues)

    async def test_password_probes(self, loaded_home, security):
        probes = await security.test_password_validation()

        assert len(probes) == len(PASSWORD_PROBES)

    async def test_auth_bypass_catalogue(self, loaded_home, security):
        scenarios = await security.test_authentication_bypass()

        assert [s.test for s in scenarios] == [test for test, _ in AUTH_BYPASS_SCENARIOS]

    async def test_report(self, loaded_home, security):
        report = await security.get_security_report()

        assert report.url.startswith("https://")
        assert report.summary.critical_issues == bool(
            report.xss_vulnerabilities or any(f.sensitive for f in report.sensitive_data_exposure)
        )


class TestLoginPage:
    """Hostile input on the login practice page."""

    async def test_elements_visible(self, loaded_login):
        elements = await loaded_login.verify_login_page_elements()

        assert elements["username_input"]
        assert elements["password_input"]
        assert elements["login_button"]

    async def test_password_masked(self, loaded_login, page):
        assert await page.locator(loaded_login.PASSWORD_INPUT).get_attribute("type") == "password"

    async def test_sql_injection_login(self, loaded_login, util):
        assert await loaded_login.test_sql_injection() >= 0
        assert util.get_page_url().startswith(loaded_login.login_url)

    async def test_xss_login(self, loaded_login, dialogs):
        assert await loaded_login.test_xss_payload() >= 0
        assert dialogs == []

    async def test_invalid_credentials(self, loaded_login, test_data):
        scenario = test_data.create_security_test_scenario()
        username = scenario.invalid_inputs[0] or "invalid"
        await loaded_login.fill_login_form({"username": username, "password": "wrong"})
        await loaded_login.click_login()

        error = await loaded_login.get_error_message()
        assert error is None or isinstance(error, str)

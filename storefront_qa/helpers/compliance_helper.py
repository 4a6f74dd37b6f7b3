"""Regulatory compliance signals visible on a rendered page.

This module provides the ComplianceHelper class. Each check looks for the
links, banners and markup a compliant site usually shows (privacy policy,
cookie consent, Do Not Sell link...) and reports what it found. These are
indicators for deciding which audits to commission, never proof of
compliance.
"""

import asyncio
import logging
from typing import Dict, List

from playwright.async_api import Page

from .security_helper import fetch_response_headers
from ..models.compliance_models import (
    GdprChecks,
    GdprResult,
    PciDssChecks,
    PciDssResult,
    CcpaChecks,
    CcpaResult,
    HipaaChecks,
    HipaaResult,
    AdaChecks,
    AdaResult,
    CoppaChecks,
    CoppaResult,
    Soc2Checks,
    Soc2Result,
    DataRetentionChecks,
    DataRetentionResult,
    ComplianceSummary,
    ComplianceReport,
)

logger = logging.getLogger(__name__)

PCI_REQUIRED_HEADERS = (
    "Content-Security-Policy",
    "X-Content-Type-Options",
    "X-Frame-Options",
    "Strict-Transport-Security",
)

_GDPR_SCRIPT = """
() => {
    const links = Array.from(document.querySelectorAll('a')).map(a => ({
        text: a.textContent || '',
        href: a.href || '',
    }));
    const mentions = (link, words) => words.some(
        w => link.text.toLowerCase().includes(w) || link.href.toLowerCase().includes(w)
    );
    return {
        privacy_policy: !!document.querySelector('a[href*="privacy"]') || links.some(l => mentions(l, ['privacy'])),
        cookie_banner: !!document.querySelector('[class*="cookie"]'),
        consent_management: !!document.querySelector('[class*="consent"], [data-consent]'),
        terms_of_service: !!document.querySelector('a[href*="terms"]') || links.some(l => mentions(l, ['terms'])),
        data_request_link: !!document.querySelector('a[href*="data"], [data-request]'),
        privacy_links: links.filter(l => mentions(l, ['privacy'])),
        terms_links: links.filter(
            l => mentions(l, ['terms']) || l.text.toLowerCase().includes('conditions')
        ),
    };
}
"""

_PCI_SCRIPT = """
() => {
    const html = document.documentElement.innerHTML;
    return {
        no_card_data_storage: !html.includes('card') || !html.includes('number'),
        has_ssl: window.location.protocol === 'https:',
        no_plain_text_passwords: !html.toLowerCase().includes('password='),
        form_encryption: !!document.querySelector('form[method="POST" i]'),
    };
}
"""

_CCPA_SCRIPT = """
() => {
    const links = Array.from(document.querySelectorAll('a')).map(a => ({
        text: a.textContent || '',
        href: a.href || '',
    }));
    return {
        privacy_policy: !!document.querySelector('a[href*="privacy"]'),
        do_not_sell_link: !!document.querySelector('a[href*="do-not-sell"]')
            || links.some(l => l.text.toLowerCase().includes('do not sell')),
        data_delete_request: !!document.querySelector('[href*="delete"]'),
        opt_out_mechanism: !!document.querySelector('[class*="opt-out"]'),
        footer_links: links.filter(l => {
            const text = l.text.toLowerCase();
            return text.includes('privacy') || text.includes('do not sell') || text.includes('california');
        }),
    };
}
"""

_HIPAA_SCRIPT = """
() => ({
    has_ba_association: !!document.querySelector('[class*="ba"]'),
    has_authentication_mfa: !!document.querySelector('[type="password"]'),
    has_encryption: window.location.protocol === 'https:',
    has_audit_log: !!document.querySelector('[class*="audit"], [class*="log"]'),
})
"""

_ADA_SCRIPT = """
() => ({
    alt_text: Array.from(document.querySelectorAll('img')).filter(img => !img.alt).length === 0,
    heading_structure: !!document.querySelector('h1'),
    form_labels: document.querySelectorAll('label').length > 0,
    color_contrast: true,
    keyboard_navigation: typeof document.activeElement !== 'undefined',
    has_heading_structure: document.querySelectorAll('h1, h2, h3, h4, h5, h6').length > 0,
})
"""

_COPPA_SCRIPT = """
() => ({
    privacy_policy: !!document.querySelector('a[href*="privacy"]'),
    childrens_privacy_notice: !!document.querySelector('[class*="children"], [data-coppa]'),
    no_tracking: !document.querySelector('[src*="track"], [src*="analytics"]'),
    consent_mechanism: !!document.querySelector('[class*="consent"], [class*="parental"]'),
})
"""

_SOC2_SCRIPT = """
() => ({
    has_security_page: !!document.querySelector('a[href*="security"]'),
    has_trust_center: !!document.querySelector('a[href*="trust"]'),
    has_privacy_policy: !!document.querySelector('a[href*="privacy"]'),
    has_incident_response: !!document.querySelector('[class*="incident"]'),
})
"""

_RETENTION_SCRIPT = """
() => {
    const text = document.body.innerText.toLowerCase();
    return {
        mentions_data_retention: text.includes('data retention') || text.includes('retain'),
        mentions_deletion: text.includes('delete') || text.includes('removal'),
        mentions_archival: text.includes('archive'),
    };
}
"""


class ComplianceHelper:
    """Collect compliance indicators for one page.

    Example:
        helper = ComplianceHelper(page)
        report = await helper.get_compliance_report()
        print(report.summary.recommended_audits)
    """

    def __init__(self, page: Page):
        self.page = page

    async def check_gdpr_compliance(self) -> GdprResult:
        """Look for privacy/terms pages, a cookie banner and consent management.

        Returns:
            GdprResult with ``Partial`` when both a privacy policy and consent
            management were found, ``Non-compliant`` otherwise
        """
        checks = GdprChecks.model_validate(await self.page.evaluate(_GDPR_SCRIPT))
        return GdprResult(
            has_required_gdpr_pages=checks.privacy_policy and checks.terms_of_service,
            has_cookie_consent=checks.cookie_banner,
            has_consent_management=checks.consent_management,
            details=checks,
            compliance_level=(
                "Partial"
                if checks.privacy_policy and checks.consent_management
                else "Non-compliant"
            ),
        )

    async def check_pci_dss_compliance(self) -> PciDssResult:
        """HTTPS, no plaintext password markers, and PCI-relevant headers."""
        checks, headers = await asyncio.gather(
            self.page.evaluate(_PCI_SCRIPT),
            self.check_security_headers_for_pci(),
        )
        checks = PciDssChecks.model_validate(checks)
        return PciDssResult(
            is_compliant=checks.has_ssl and checks.no_plain_text_passwords,
            checks=checks,
            security_headers=headers,
            recommendation=(
                "Site uses HTTPS"
                if checks.has_ssl
                else "Site should use HTTPS for payment processing"
            ),
        )

    async def check_security_headers_for_pci(self) -> Dict[str, str]:
        """Presence of the headers PCI-DSS scanners expect.

        Returns:
            Header name to ``"present"``/``"missing"``; ``"unknown"`` for every
            header when the response could not be fetched
        """
        headers = await fetch_response_headers(self.page)
        if headers is None:
            return {name: "unknown" for name in PCI_REQUIRED_HEADERS}
        return {
            name: "present" if name.lower() in headers else "missing"
            for name in PCI_REQUIRED_HEADERS
        }

    async def check_ccpa_compliance(self) -> CcpaResult:
        checks = CcpaChecks.model_validate(await self.page.evaluate(_CCPA_SCRIPT))
        return CcpaResult(
            is_compliant=checks.privacy_policy and checks.do_not_sell_link,
            checks=checks,
            message=(
                "Has Do Not Sell link"
                if checks.do_not_sell_link
                else "Missing Do Not Sell opt-out link"
            ),
        )

    async def check_hipaa_compliance(self) -> HipaaResult:
        checks = HipaaChecks.model_validate(await self.page.evaluate(_HIPAA_SCRIPT))
        return HipaaResult(
            approximate_compliance=checks.has_authentication_mfa and checks.has_encryption,
            checks=checks,
        )

    async def check_ada_compliance(self) -> AdaResult:
        checks = AdaChecks.model_validate(await self.page.evaluate(_ADA_SCRIPT))
        return AdaResult(
            approximate_compliance=(
                checks.alt_text and checks.heading_structure and checks.form_labels
            ),
            checks=checks,
        )

    async def check_coppa_compliance(self) -> CoppaResult:
        checks = CoppaChecks.model_validate(await self.page.evaluate(_COPPA_SCRIPT))
        return CoppaResult(
            is_compliant=checks.privacy_policy and checks.consent_mechanism,
            checks=checks,
        )

    async def check_soc2_compliance(self) -> Soc2Result:
        checks = Soc2Checks.model_validate(await self.page.evaluate(_SOC2_SCRIPT))
        return Soc2Result(
            has_visible_compliance=any(checks.model_dump().values()),
            checks=checks,
        )

    async def check_data_retention_policy(self) -> DataRetentionResult:
        details = DataRetentionChecks.model_validate(
            await self.page.evaluate(_RETENTION_SCRIPT)
        )
        return DataRetentionResult(
            has_retention_policy=details.mentions_data_retention,
            details=details,
        )

    @staticmethod
    def recommended_audits(
        gdpr: GdprResult, pci_dss: PciDssResult, ccpa: CcpaResult, ada: AdaResult
    ) -> List[str]:
        """Audits to commission, in GDPR, PCI-DSS, CCPA, ADA/WCAG order."""
        audits = []
        if gdpr.compliance_level == "Non-compliant":
            audits.append("GDPR")
        if not pci_dss.is_compliant:
            audits.append("PCI-DSS")
        if not ccpa.is_compliant:
            audits.append("CCPA")
        if not ada.approximate_compliance:
            audits.append("ADA/WCAG")
        return audits

    async def get_compliance_report(self) -> ComplianceReport:
        """Run every check concurrently and list the audits worth commissioning."""
        gdpr, pci_dss, ccpa, hipaa, ada, coppa, soc2, data_retention = await asyncio.gather(
            self.check_gdpr_compliance(),
            self.check_pci_dss_compliance(),
            self.check_ccpa_compliance(),
            self.check_hipaa_compliance(),
            self.check_ada_compliance(),
            self.check_coppa_compliance(),
            self.check_soc2_compliance(),
            self.check_data_retention_policy(),
        )

        report = ComplianceReport(
            url=self.page.url,
            gdpr=gdpr,
            pci_dss=pci_dss,
            ccpa=ccpa,
            hipaa=hipaa,
            ada=ada,
            coppa=coppa,
            soc2=soc2,
            data_retention=data_retention,
            summary=ComplianceSummary(
                recommended_audits=self.recommended_audits(gdpr, pci_dss, ccpa, ada)
            ),
        )
        logger.info(
            f"Compliance report for {report.url}: "
            f"recommended audits {report.summary.recommended_audits}"
        )
        return report

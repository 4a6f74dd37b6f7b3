"""Regulatory compliance report models.

These are approximations gathered from the rendered page only. A positive
result means the page shows the expected signal, not that the site is
compliant.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Literal


class LinkInfo(BaseModel):
    text: str = ""
    href: str = ""


class GdprChecks(BaseModel):
    privacy_policy: bool = False
    cookie_banner: bool = False
    consent_management: bool = False
    terms_of_service: bool = False
    data_request_link: bool = False
    privacy_links: List[LinkInfo] = Field(default_factory=list)
    terms_links: List[LinkInfo] = Field(default_factory=list)


class GdprResult(BaseModel):
    has_required_gdpr_pages: bool
    has_cookie_consent: bool
    has_consent_management: bool
    details: GdprChecks
    compliance_level: Literal["Partial", "Non-compliant"]


class PciDssChecks(BaseModel):
    no_card_data_storage: bool = True
    has_ssl: bool = False
    no_plain_text_passwords: bool = True
    form_encryption: bool = False


class PciDssResult(BaseModel):
    is_compliant: bool
    checks: PciDssChecks
    security_headers: Dict[str, str] = Field(
        default_factory=dict, description="Header name to 'present'/'missing'"
    )
    recommendation: str


class CcpaChecks(BaseModel):
    privacy_policy: bool = False
    do_not_sell_link: bool = False
    data_delete_request: bool = False
    opt_out_mechanism: bool = False
    footer_links: List[LinkInfo] = Field(default_factory=list)


class CcpaResult(BaseModel):
    is_compliant: bool
    checks: CcpaChecks
    message: str


class HipaaChecks(BaseModel):
    has_ba_association: bool = False
    has_authentication_mfa: bool = False
    has_encryption: bool = False
    has_audit_log: bool = False


class HipaaResult(BaseModel):
    approximate_compliance: bool
    checks: HipaaChecks
    recommendation: str = (
        "HIPAA compliance requires comprehensive backend security measures"
    )


class AdaChecks(BaseModel):
    alt_text: bool = False
    heading_structure: bool = False
    form_labels: bool = False
    color_contrast: bool = True
    keyboard_navigation: bool = False
    has_heading_structure: bool = False


class AdaResult(BaseModel):
    approximate_compliance: bool
    checks: AdaChecks
    recommendation: str = "Conduct full WCAG 2.1 AA audit for ADA compliance"


class CoppaChecks(BaseModel):
    privacy_policy: bool = False
    childrens_privacy_notice: bool = False
    no_tracking: bool = True
    consent_mechanism: bool = False


class CoppaResult(BaseModel):
    is_compliant: bool
    checks: CoppaChecks
    message: str = "If website targets children under 13, COPPA compliance is mandatory"


class Soc2Checks(BaseModel):
    has_security_page: bool = False
    has_trust_center: bool = False
    has_privacy_policy: bool = False
    has_incident_response: bool = False


class Soc2Result(BaseModel):
    has_visible_compliance: bool
    checks: Soc2Checks
    note: str = "SOC 2 compliance requires detailed audit and certification"


class DataRetentionChecks(BaseModel):
    mentions_data_retention: bool = False
    mentions_deletion: bool = False
    mentions_archival: bool = False


class DataRetentionResult(BaseModel):
    has_retention_policy: bool
    details: DataRetentionChecks


class ComplianceSummary(BaseModel):
    recommended_audits: List[str] = Field(default_factory=list)


class ComplianceReport(BaseModel):
    """Aggregate of every compliance check for one page."""

    url: str = ""
    gdpr: GdprResult
    pci_dss: PciDssResult
    ccpa: CcpaResult
    hipaa: HipaaResult
    ada: AdaResult
    coppa: CoppaResult
    soc2: Soc2Result
    data_retention: DataRetentionResult
    summary: ComplianceSummary

"""Security heuristic report models."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Literal


class XssFinding(BaseModel):
    type: Literal["XSS"] = "XSS"
    payload: str
    vulnerable: bool = True


class SqlInjectionProbe(BaseModel):
    payload: str
    tested: bool = True
    message: str = "SQL injection test should be performed on backend validation"


class CsrfFormCheck(BaseModel):
    method: str = ""
    action: str = ""
    has_csrf_token: bool = False
    token_name: str = "Not found"


class SensitiveDataFinding(BaseModel):
    type: str = Field(description="Pattern name, e.g. api_keys or emails")
    found_count: int
    sensitive: bool


class MixedContentIssue(BaseModel):
    type: Literal["mixed-content"] = "mixed-content"
    count: int
    message: str = "Found insecure HTTP resources on HTTPS page"


class AuthBypassScenario(BaseModel):
    test: str
    method: str


class ClickjackingProtection(BaseModel):
    is_frameable: bool
    x_frame_options: Optional[str] = None
    frame_ancestors: Optional[str] = None
    message: str


class CookieIssue(BaseModel):
    name: str
    issue: str


class CookieInfo(BaseModel):
    name: str
    secure: bool = False
    http_only: bool = False
    same_site: Optional[str] = None


class CookieSecurity(BaseModel):
    total_cookies: int = 0
    issues: List[CookieIssue] = Field(default_factory=list)
    cookies: List[CookieInfo] = Field(default_factory=list)


class PasswordProbe(BaseModel):
    password: str
    expected: Literal["accepted", "rejected"]
    description: str


class InputValidationIssue(BaseModel):
    field_name: str
    issue: str


class SecuritySummary(BaseModel):
    critical_issues: bool
    has_missing_security_headers: bool
    has_insecure_cookies: bool


class SecurityReport(BaseModel):
    """Aggregate of every security check for one page."""

    url: str = ""
    security_headers: Dict[str, Optional[str]] = Field(default_factory=dict)
    xss_vulnerabilities: List[XssFinding] = Field(default_factory=list)
    sql_injection_tests: List[SqlInjectionProbe] = Field(default_factory=list)
    csrf_protection: List[CsrfFormCheck] = Field(default_factory=list)
    sensitive_data_exposure: List[SensitiveDataFinding] = Field(default_factory=list)
    mixed_content: List[MixedContentIssue] = Field(default_factory=list)
    authentication_bypass: List[AuthBypassScenario] = Field(default_factory=list)
    clickjacking: ClickjackingProtection
    cookie_security: CookieSecurity
    password_validation: List[PasswordProbe] = Field(default_factory=list)
    input_validation: List[InputValidationIssue] = Field(default_factory=list)
    summary: SecuritySummary

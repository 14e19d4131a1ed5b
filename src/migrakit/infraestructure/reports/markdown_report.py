import os
from jinja2 import Environment, FileSystemLoader
from migrakit.app.security.security_entities import ScanStatus, ScanSummary, Severity
from migrakit.app.validation.validation_entities import ValidationResult

TEMPLATE_PATH = os.path.join(os.path.dirname(__file__), "templates")

SEVERITY_LABELS = {
    Severity.CRITICAL: "🔴 Critical",
    Severity.HIGH: "🟠 High",
    Severity.MEDIUM: "🟡 Medium",
    Severity.LOW: "🟢 Low",
}

STATUS_LINES = {
    ScanStatus.FAILED: "❌ **FAILED**: Critical or high severity issues found",
    ScanStatus.WARNING: (
        "⚠️ **WARNING**: Medium severity issues found - review recommended"
    ),
    ScanStatus.PASSED_WITH_NOTES: (
        "✅ **PASSED with notes**: Low severity issues found"
    ),
    ScanStatus.PASSED: "✅ **PASSED**: No security issues found",
}


def _get_environment(template_path: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_path),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def create_validation_report(
    result: ValidationResult,
    template_path: str = TEMPLATE_PATH,
    template_name: str = "validation_report.md.j2",
) -> str:
    """Genera el reporte markdown de la validación de tareas."""
    template = _get_environment(template_path).get_template(template_name)
    return template.render(
        valid=result.valid,
        invalid=result.invalid,
        errors=result.errors,
        warnings=result.warnings,
    )


def create_security_report(
    summary: ScanSummary,
    template_path: str = TEMPLATE_PATH,
    template_name: str = "security_report.md.j2",
) -> str:
    """Genera el reporte markdown del escaneo de seguridad."""
    template = _get_environment(template_path).get_template(template_name)
    return template.render(
        severities=list(Severity),
        labels=SEVERITY_LABELS,
        grouped=summary.by_severity(),
        total=summary.total,
        status_line=STATUS_LINES[summary.status],
    )

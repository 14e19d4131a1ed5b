import json
from migrakit.app.security.security_entities import ScanSummary


def create_security_json_report(summary: ScanSummary) -> str:
    return json.dumps(summary.to_dict(), indent=2, ensure_ascii=False)

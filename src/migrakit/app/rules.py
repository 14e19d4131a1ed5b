"""Rules shared by the task catalog tools."""
import re
from migrakit.app.security.security_entities import SecurityRule, Severity

TASKS_DIR = "tasks"
TASK_FILE_NAME = "task.md"

REQUIRED_FRONTMATTER_FIELDS = ("id", "name", "type")

VALID_TASK_TYPES = ("task",)

# Files kept as references of a task
REFERENCE_EXTENSIONS = (
    ".java", ".xml", ".properties", ".json", ".yaml", ".yml",
    ".template", ".diff", ".txt", ".py", ".js", ".ts", ".md",
    ".groovy", ".kt", ".scala", ".gradle", ".sh", ".bat", ".ps1",
)

EXCLUDED_FILES = ("task.md", "README.md")

FOLDER_NAME_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def _ci(*patterns: str):
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


FORBIDDEN_PATTERNS = _ci(
    r"\beval\s*\(",
    r"\bexec\s*\(",
    r"\bprocess\.env",
    r"\brequire\s*\(['\"]\s*child_process",
    r"\bspawn\s*\(",
    r"\bshell\s*:",
    r"rm\s+-rf\s+/",
    r"\bsudo\b",
    r"\bcurl\s+.*\|\s*sh",
    r"\bwget\s+.*\|\s*sh",
)

SECURITY_PATTERNS = (
    (re.compile(r"ignore\s+(all\s+)?(previous|above)\s+(instructions?|prompts?)", re.IGNORECASE), "Prompt injection attempt"),
    (re.compile(r"disregard\s+(all\s+)?(previous|above)", re.IGNORECASE), "Prompt injection attempt"),
    (re.compile(r"forget\s+(all\s+)?(previous|above)", re.IGNORECASE), "Prompt injection attempt"),
    (re.compile(r"you\s+are\s+now\s+(a|an)", re.IGNORECASE), "Role hijacking attempt"),
    (re.compile(r"act\s+as\s+(if|a|an)", re.IGNORECASE), "Potential role manipulation"),
    (re.compile(r"pretend\s+(you|to\s+be)", re.IGNORECASE), "Potential role manipulation"),
    (re.compile(r"\bformat\s+[a-z]:", re.IGNORECASE), "Potentially dangerous disk command"),
    (re.compile(r"\bdel\s+/[fqs]", re.IGNORECASE), "Potentially dangerous delete command"),
    (re.compile(r"\brmdir\s+/s", re.IGNORECASE), "Potentially dangerous directory removal"),
)

SECURITY_RULES = {
    Severity.CRITICAL: (
        SecurityRule(
            id="PROMPT_INJECTION_001",
            name="Instruction Override Attempt",
            description="Detected attempt to override AI instructions",
            patterns=_ci(
                r"ignore\s+(all\s+)?(previous|above|prior)\s+(instructions?|prompts?|rules?|guidelines?)",
                r"disregard\s+(all\s+)?(previous|above|prior)",
                r"forget\s+(all\s+)?(previous|above|prior|everything)",
                r"override\s+(all\s+)?(previous|above|prior|system)",
            ),
        ),
        SecurityRule(
            id="PROMPT_INJECTION_002",
            name="System Prompt Extraction",
            description="Detected attempt to extract system prompts",
            patterns=_ci(
                r"what\s+(is|are)\s+(your|the)\s+(system\s+)?prompt",
                r"show\s+(me\s+)?(your|the)\s+(system\s+)?prompt",
                r"reveal\s+(your|the)\s+(system\s+)?prompt",
                r"print\s+(your|the)\s+(system\s+)?prompt",
            ),
        ),
        SecurityRule(
            id="MALICIOUS_CMD_001",
            name="Dangerous System Command",
            description="Detected potentially destructive system command",
            patterns=_ci(
                r"rm\s+-rf\s+/(?!tmp)",
                r"rmdir\s+/s\s+/q\s+[a-z]:\\",
                r"format\s+[a-z]:\s*/[qy]",
                r"del\s+/[fqs]\s+[a-z]:\\",
                r"mkfs\s+",
                r"dd\s+if=.*of=/dev/",
            ),
        ),
        SecurityRule(
            id="DATA_EXFIL_001",
            name="Data Exfiltration Pattern",
            description="Detected potential data exfiltration attempt",
            patterns=_ci(
                r"curl\s+.*-d\s+.*\$\(",
                r"wget\s+.*--post-data",
                r"curl\s+.*@.*/etc/passwd",
                r"curl\s+.*@.*\.ssh/id_rsa",
            ),
        ),
        SecurityRule(
            id="SHELL_INJECT_001",
            name="Remote Code Execution",
            description="Detected remote code execution pattern",
            patterns=_ci(
                r"curl\s+.*\|\s*sh",
                r"wget\s+.*\|\s*sh",
                r"curl\s+.*\|\s*bash",
                r"wget\s+.*\|\s*bash",
                r"\$\(curl\s+",
                r"\$\(wget\s+",
            ),
        ),
    ),
    Severity.HIGH: (
        SecurityRule(
            id="ROLE_HIJACK_001",
            name="Role Hijacking Attempt",
            description="Detected attempt to change AI role",
            patterns=_ci(
                r"you\s+are\s+now\s+(a|an|the)",
                r"from\s+now\s+on,?\s+you\s+(are|will\s+be)",
                r"pretend\s+(you\s+are|to\s+be)",
                r"act\s+as\s+(if\s+you|a|an|the)",
                r"roleplay\s+as",
            ),
        ),
        SecurityRule(
            id="JAILBREAK_001",
            name="Jailbreak Attempt",
            description="Detected potential jailbreak attempt",
            patterns=(re.compile(r"\bDAN\b"),)
            + _ci(
                r"do\s+anything\s+now",
                r"jailbreak",
                r"\bunlocked\s+mode\b",
                r"developer\s+mode\s+(enabled|activated|on)",
            ),
        ),
        SecurityRule(
            id="CREDENTIAL_001",
            name="Hardcoded Credentials",
            description="Detected potential hardcoded credentials",
            patterns=_ci(
                r"password\s*[=:]\s*[\"'][^\"'$<{\[\]]+[\"']",
                r"api[_-]?key\s*[=:]\s*[\"'][^\"'$<{\[\]]+[\"']",
                r"secret[_-]?key\s*[=:]\s*[\"'][^\"'$<{\[\]]+[\"']",
                r"access[_-]?token\s*[=:]\s*[\"'][^\"'$<{\[\]]+[\"']",
                r"private[_-]?key\s*[=:]\s*[\"'][^\"'$<{\[\]]+[\"']",
            ),
            # Placeholders are not credentials
            skip_patterns=_ci(r"<your-")
            + (re.compile(r"\$\{"),)
            + _ci(r"your-.*-here", r"example", r"placeholder", r"xxx")
            + (re.compile(r"\*\*\*"),),
        ),
    ),
    Severity.MEDIUM: (
        SecurityRule(
            id="ENCODING_001",
            name="Encoded Content",
            description="Detected base64 encoding/decoding which could hide malicious content",
            patterns=_ci(
                r"base64[_-]?decode",
                r"atob\s*\(",
                r"btoa\s*\(",
                r"Buffer\.from\s*\([^)]+,\s*['\"]base64['\"]\)",
            ),
        ),
        SecurityRule(
            id="EVAL_001",
            name="Dynamic Code Execution",
            description="Detected dynamic code execution pattern",
            patterns=_ci(
                r"\beval\s*\(",
                r"\bexec\s*\(",
                r"Function\s*\(\s*[\"']",
                r"new\s+Function\s*\(",
                r"setTimeout\s*\(\s*[\"']",
                r"setInterval\s*\(\s*[\"']",
            ),
        ),
    ),
    Severity.LOW: (
        SecurityRule(
            id="OVERRIDE_001",
            name="Configuration Override",
            description="Detected security bypass flags",
            patterns=_ci(
                r"--no-verify",
                r"--skip-validation",
                r"-f\s+--force",
                r"--allow-root",
            ),
        ),
        SecurityRule(
            id="SUDO_001",
            name="Elevated Privilege Request",
            description="Detected request for elevated privileges",
            patterns=_ci(
                r"\bsudo\s+",
                r"\bsu\s+-\s+",
                r"Run\s+as\s+administrator",
            ),
        ),
    ),
}

import argparse
import logging
import os
import sys
from typing import List, Optional
import yaml
from dotenv import load_dotenv
from migrakit.app.data.data_use_case import (
    DeleteDataUseCase,
    DownloadDataUseCase,
    UploadDataUseCase,
)
from migrakit.app.metadata.metadata_use_case import GenerateMetadataUseCase
from migrakit.app.security.security_use_case import SecurityScanUseCase
from migrakit.app.validation.validation_use_case import ValidateTasksUseCase
from migrakit.core.ports.data_service import DataService
from migrakit.core.ports.output_service import OutputServiceFactory
from migrakit.infraestructure.filesystem.fs_task_repository import (
    FileSystemTaskRepository,
)
from migrakit.infraestructure.outputs.outputs_factory import (
    CONSOLE_TARGET,
    STORAGE_TARGET,
    OutputsServiceFactoryImpl,
)
from migrakit.infraestructure.reports.json_report import create_security_json_report
from migrakit.infraestructure.reports.markdown_report import (
    create_security_report,
    create_validation_report,
)
from migrakit.infraestructure.storage.storage_dependencies import (
    S3_PROVIDER,
    get_dependencies as get_storage_dependencies,
)

logging.getLogger("boto3").setLevel(logging.WARNING)
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("azure").setLevel(logging.WARNING)

LOGGER = logging.getLogger(__name__)

METADATA_FILE_NAME = "metadata.json"


def get_data_service_from_env() -> DataService:
    provider = os.getenv("MIGRAKIT_STORAGE_PROVIDER", S3_PROVIDER)
    LOGGER.info("Storage provider: %s", provider)
    return get_storage_dependencies(
        provider,
        s3_endpoint=os.getenv("MIGRAKIT_S3_ENDPOINT"),
        s3_access_key_id=os.getenv("MIGRAKIT_S3_ACCESS_KEY_ID"),
        s3_secret_access_key=os.getenv("MIGRAKIT_S3_SECRET_ACCESS_KEY"),
        s3_region=os.getenv("MIGRAKIT_S3_REGION"),
        azure_endpoint=os.getenv("MIGRAKIT_AZURE_ENDPOINT"),
        azure_connection_string=os.getenv("MIGRAKIT_AZURE_CONNECTION_STRING"),
    ).data_service


def get_outputs_factory(publish: bool) -> OutputServiceFactory:
    if not publish:
        return OutputsServiceFactoryImpl()
    return OutputsServiceFactoryImpl(
        data_service=get_data_service_from_env(),
        report_container=os.getenv("MIGRAKIT_REPORT_CONTAINER"),
    )


def run_validate(root_dir: str, folders: List[str]) -> int:
    use_case = ValidateTasksUseCase(FileSystemTaskRepository(root_dir))
    if folders:
        result = use_case.validate_changed_tasks(folders)
    else:
        LOGGER.info("Validating all tasks...")
        result = use_case.validate_all()
    outputs_factory = get_outputs_factory(publish=False)
    outputs_factory.create_output_service(CONSOLE_TARGET).execute(
        "validation-report.md", create_validation_report(result)
    )
    return 1 if result.has_errors else 0


def run_security_scan(
    root_dir: str, folders: List[str], json_output: bool, publish: bool
) -> int:
    use_case = SecurityScanUseCase(FileSystemTaskRepository(root_dir))
    if folders:
        summary = use_case.scan_folders(folders)
    else:
        LOGGER.info("Scanning all tasks...")
        summary = use_case.scan_all()
    if json_output:
        report_name = "security-report.json"
        report = create_security_json_report(summary)
    else:
        report_name = "security-report.md"
        report = create_security_report(summary)
    outputs_factory = get_outputs_factory(publish)
    outputs_factory.create_output_service(CONSOLE_TARGET).execute(report_name, report)
    if publish:
        output_result = outputs_factory.create_output_service(STORAGE_TARGET).execute(
            report_name, report
        )
        LOGGER.info("Report published: %s", output_result.to_dict())
    return 0 if summary.passed else 1


def run_generate_metadata(root_dir: str) -> int:
    use_case = GenerateMetadataUseCase(
        FileSystemTaskRepository(root_dir),
        output_path=os.path.join(root_dir, METADATA_FILE_NAME),
    )
    use_case.execute()
    return 0


def run_list(root_dir: str) -> int:
    task_repository = FileSystemTaskRepository(root_dir)
    for folder in task_repository.list_task_folders():
        if not task_repository.has_task_md(folder):
            continue
        try:
            task = task_repository.get_task(folder)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as e:
            LOGGER.error("Error processing %s/task.md: %s", folder, e)
            continue
        print(f"{task.id or folder}: {task.name}")
        for reference in task.references:
            print(f"    {reference}")
    return 0


def run_data(action: str, container: str, key: str, file: Optional[str]) -> int:
    data_service = get_data_service_from_env()
    if action == "upload":
        if file:
            with open(file, "rb") as f:
                data = f.read()
        else:
            data = sys.stdin.buffer.read()
        print(UploadDataUseCase(data_service).execute(container, key, data))
    elif action == "download":
        data = DownloadDataUseCase(data_service).execute(container, key)
        if file:
            with open(file, "wb") as f:
                f.write(data)
        else:
            sys.stdout.buffer.write(data)
    elif action == "delete":
        DeleteDataUseCase(data_service).execute(container, key)
    else:
        raise ValueError(f"Invalid data action: {action}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="migrakit", description="Migration task catalog tooling"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate task folders")
    validate.add_argument("root", nargs="?", default=".")
    validate.add_argument("folders", nargs="*", help="Only validate these folders")

    scan = subparsers.add_parser("security-scan", help="Scan tasks for security issues")
    scan.add_argument("root", nargs="?", default=".")
    scan.add_argument("folders", nargs="*", help="Only scan these folders")
    scan.add_argument("--json", action="store_true", help="Output JSON format")
    scan.add_argument(
        "--publish",
        action="store_true",
        help="Also upload the report to MIGRAKIT_REPORT_CONTAINER",
    )

    metadata = subparsers.add_parser("generate-metadata", help="Write metadata.json")
    metadata.add_argument("root", nargs="?", default=".")

    list_tasks = subparsers.add_parser("list", help="List tasks and their references")
    list_tasks.add_argument("root", nargs="?", default=".")

    data = subparsers.add_parser("data", help="Upload, download or delete blobs")
    data.add_argument("action", choices=["upload", "download", "delete"])
    data.add_argument("container")
    data.add_argument("key")
    data.add_argument("file", nargs="?", help="Input or output file (default: stdio)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    logging.basicConfig(level=os.getenv("MIGRAKIT_LOG_LEVEL", "INFO").upper())
    args = build_parser().parse_args(argv)
    if args.command == "validate":
        return run_validate(args.root, args.folders)
    if args.command == "security-scan":
        return run_security_scan(args.root, args.folders, args.json, args.publish)
    if args.command == "generate-metadata":
        return run_generate_metadata(args.root)
    if args.command == "list":
        return run_list(args.root)
    return run_data(args.action, args.container, args.key, args.file)


if __name__ == "__main__":
    sys.exit(main())

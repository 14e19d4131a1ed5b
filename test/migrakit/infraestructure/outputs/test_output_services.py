import io
from unittest.mock import Mock
import pytest
from migrakit.infraestructure.outputs.console_output_service import (
    ConsoleOutputResult,
    ConsoleOutputService,
)
from migrakit.infraestructure.outputs.outputs_factory import OutputsServiceFactoryImpl
from migrakit.infraestructure.outputs.storage_output_service import (
    StorageOutputResult,
    StorageOutputService,
)


def test_console_output_service():
    """Test que verifica la escritura del reporte en la consola."""
    stream = io.StringIO()

    result = ConsoleOutputService(stream).execute("report.md", "# Report")

    assert stream.getvalue() == "# Report\n"
    assert isinstance(result, ConsoleOutputResult)
    assert result.to_dict() == {"report_name": "report.md"}


def test_console_output_service_default_stream(capsys):
    """Test que verifica la salida estándar cuando no se indica un flujo."""
    ConsoleOutputService().execute("report.md", "# Report")

    assert capsys.readouterr().out == "# Report\n"


def test_storage_output_service():
    """Test que verifica la carga del reporte al almacenamiento."""
    data_service = Mock()
    data_service.upload_data.return_value = "etag-1"

    result = StorageOutputService(data_service, "reports-container").execute(
        "security-report.md", "# Reporte"
    )

    data_service.upload_data.assert_called_once_with(
        "reports-container", "reports/security-report.md", "# Reporte".encode("utf-8")
    )
    assert isinstance(result, StorageOutputResult)
    assert result.to_dict() == {
        "container": "reports-container",
        "key": "reports/security-report.md",
        "identifier": "etag-1",
    }


def test_storage_output_service_propagates_errors():
    """Test que verifica que los errores de carga se propagan."""
    data_service = Mock()
    data_service.upload_data.side_effect = PermissionError("Access denied")

    with pytest.raises(PermissionError):
        StorageOutputService(data_service, "container").execute("r.md", "content")


def test_outputs_factory():
    """Test que verifica la creación de servicios de salida."""
    data_service = Mock()
    factory = OutputsServiceFactoryImpl(data_service, "container")

    assert isinstance(factory.create_output_service("console"), ConsoleOutputService)
    storage_output = factory.create_output_service("storage")
    assert isinstance(storage_output, StorageOutputService)
    assert storage_output.container == "container"


def test_outputs_factory_errors():
    """Test que verifica los errores de configuración de salida."""
    with pytest.raises(ValueError):
        OutputsServiceFactoryImpl().create_output_service("storage")
    with pytest.raises(ValueError) as excinfo:
        OutputsServiceFactoryImpl(Mock(), None).create_output_service("storage")
    assert "MIGRAKIT_REPORT_CONTAINER is not set" in str(excinfo.value)
    with pytest.raises(ValueError):
        OutputsServiceFactoryImpl().create_output_service("email")

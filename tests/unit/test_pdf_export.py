"""Unit tests for the HTML-to-PDF converter client."""

import json

import httpx
import pytest

from quire.contexts.rendering.exceptions import PdfExportError
from quire.contexts.rendering.pdf_export import PdfExporter, pdf_filename

ENDPOINT = "https://converter.test/v1/pdf/convert/from/html"
PDF_URL = "https://files.test/jane_doe.pdf"
PDF_BYTES = b"%PDF-1.4 fake"


def make_exporter(handler, api_key="test-key"):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return PdfExporter(api_key=api_key, endpoint=ENDPOINT, client=client)


def converter_handler(requests):
    """Handler that records requests and answers like a healthy converter."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "POST":
            return httpx.Response(200, json={"url": PDF_URL, "error": False})
        return httpx.Response(200, content=PDF_BYTES)

    return handler


@pytest.mark.unit
class TestPdfFilename:
    """Download filename derived from the resume title."""

    def test_spaces_and_case(self):
        assert pdf_filename("Jane Doe CV") == "jane_doe_cv.pdf"

    def test_punctuation_replaced(self):
        assert pdf_filename("Jane Doe - Backend (2024)") == "jane_doe___backend__2024_.pdf"

    def test_non_ascii_replaced(self):
        assert pdf_filename("José") == "jos_.pdf"


@pytest.mark.unit
class TestPdfExporter:
    """Converter requests and failure handling."""

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("PDFCO_API_KEY", raising=False)
        with pytest.raises(PdfExportError, match="PDFCO_API_KEY"):
            PdfExporter()

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("PDFCO_API_KEY", "env-key")
        exporter = PdfExporter()
        assert exporter.api_key == "env-key"
        exporter.close()

    def test_convert_request(self):
        requests = []
        exporter = make_exporter(converter_handler(requests))

        url = exporter.convert("<html></html>", name="jane_doe.pdf")

        assert url == PDF_URL
        request = requests[0]
        assert str(request.url) == ENDPOINT
        assert request.headers["x-api-key"] == "test-key"

        payload = json.loads(request.content)
        assert payload["html"] == "<html></html>"
        assert payload["name"] == "jane_doe.pdf"
        assert payload["margins"] == "10mm"
        assert payload["paperSize"] == "Letter"
        assert payload["orientation"] == "Portrait"
        assert payload["printBackground"] is True

    def test_export_downloads_pdf(self):
        requests = []
        with make_exporter(converter_handler(requests)) as exporter:
            pdf_bytes = exporter.export("<html></html>")

        assert pdf_bytes == PDF_BYTES
        assert [r.method for r in requests] == ["POST", "GET"]
        assert str(requests[1].url) == PDF_URL

    def test_error_status(self):
        exporter = make_exporter(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(PdfExportError) as excinfo:
            exporter.convert("<html></html>")

        assert excinfo.value.status_code == 500
        assert excinfo.value.message == "Failed to generate PDF"
        assert "boom" in str(excinfo.value)

    def test_missing_url(self):
        exporter = make_exporter(lambda request: httpx.Response(200, json={"error": True}))

        with pytest.raises(PdfExportError, match="No PDF URL returned"):
            exporter.convert("<html></html>")

    def test_invalid_json(self):
        exporter = make_exporter(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(PdfExportError, match="invalid JSON"):
            exporter.convert("<html></html>")

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        exporter = make_exporter(handler)

        with pytest.raises(PdfExportError, match="Failed to reach PDF converter"):
            exporter.convert("<html></html>")

    def test_download_failure(self):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(200, json={"url": PDF_URL})
            return httpx.Response(404, text="gone")

        exporter = make_exporter(handler)

        with pytest.raises(PdfExportError) as excinfo:
            exporter.export("<html></html>")
        assert excinfo.value.status_code == 404

    def test_long_response_truncated_in_message(self):
        error = PdfExportError("Failed to generate PDF", status_code=500, response_text="x" * 500)

        assert "x" * 200 + "..." in str(error)
        assert "x" * 201 not in str(error)

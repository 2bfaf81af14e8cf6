from urllib.parse import quote

from fastapi import Response

from services.export_service import CsvExport


def content_disposition(filename: str) -> str:
    # Names can hold any unicode; headers are latin-1, so send an ASCII fallback too
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "'")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def csv_response(export: CsvExport) -> Response:
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": content_disposition(export.filename)},
    )

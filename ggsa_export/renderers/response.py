"""Response returned by export renderers."""

from dataclasses import dataclass, field
from typing import Dict

HTML_CONTENT_TYPE = "text/html; charset=UTF-8"


def _default_headers() -> Dict[str, str]:
    return {"Content-Type": HTML_CONTENT_TYPE}


@dataclass
class ExportResponse:
    """Rendered export document.

    Attributes:
        content: Rendered document text
        status_code: HTTP-style status, 200 on success
        headers: Response headers

    Example:
        >>> response = ExportResponse(content="<html></html>")
        >>> response.status_code
        200
    """

    content: str
    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=_default_headers)

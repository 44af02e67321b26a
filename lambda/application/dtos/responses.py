"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ExportRecordsResponse:
    """Arquivo exportado pronto para download no cliente"""
    content: str
    filename: str
    mime_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': True,
            'content': self.content,
            'filename': self.filename,
            'mimeType': self.mime_type
        }

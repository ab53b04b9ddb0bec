"""
Casework Coach - Reference document library.

Layout under the data directory:
    documents/                  Registered files, stored as <doc id><ext>
    documents-metadata.json     One DocumentMetadata entry per file
    *.docx                      Legacy documents dropped in by hand

Text from these documents is appended to prompts as extra organizational
knowledge, truncated to keep token usage bounded.
"""

import json
import logging
import secrets
import string
import time
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel

from casework.errors import DocumentNotFoundError

logger = logging.getLogger(__name__)

MAX_DOC_LENGTH = 3000  # per document
MAX_TOTAL_LENGTH = 12000  # whole context
TRUNCATION_MARKER = "... [content truncated]"

_ID_ALPHABET = string.ascii_lowercase + string.digits


class DocumentMetadata(BaseModel):
    id: str
    filename: str
    original_name: str
    file_type: str
    uploaded_at: str
    category: str | None = None
    description: str | None = None
    size: int


def _new_document_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"doc_{int(time.time() * 1000)}_{suffix}"


def extract_text(path: Path, file_type: str = "") -> str:
    """
    Extract plain text from a document.

    Word (.docx) via python-docx, PDF via pypdf, everything else is read
    as UTF-8 text.
    """
    suffix = path.suffix.lower()

    if "wordprocessingml" in file_type or suffix == ".docx":
        from docx import Document

        doc = Document(str(path))
        return "\n".join(p.text for p in doc.paragraphs)

    if "pdf" in file_type or suffix == ".pdf":
        from pypdf import PdfReader

        reader = PdfReader(str(path))
        return "\n".join((page.extract_text() or "") for page in reader.pages)

    return path.read_bytes().decode("utf-8", errors="replace")


def _truncate(text: str) -> str:
    if len(text) > MAX_DOC_LENGTH:
        return text[:MAX_DOC_LENGTH] + TRUNCATION_MARKER
    return text


class DocumentLibrary:
    """Registered reference documents plus legacy .docx files."""

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)
        self.documents_dir = self.data_dir / "documents"
        self.metadata_path = self.data_dir / "documents-metadata.json"

    def list_documents(self) -> list[DocumentMetadata]:
        """All registered documents; an absent or unreadable index is empty."""
        try:
            data = json.loads(self.metadata_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return []
        return [DocumentMetadata.model_validate(item) for item in data]

    def _write_index(self, docs: list[DocumentMetadata]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        payload = [d.model_dump(exclude_none=True) for d in docs]
        self.metadata_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def get(self, doc_id: str) -> DocumentMetadata:
        for doc in self.list_documents():
            if doc.id == doc_id:
                return doc
        raise DocumentNotFoundError(doc_id)

    def save(
        self,
        data: bytes,
        original_name: str,
        file_type: str = "",
        category: str | None = None,
        description: str | None = None,
    ) -> DocumentMetadata:
        """Store a document and register it in the index."""
        self.documents_dir.mkdir(parents=True, exist_ok=True)

        doc_id = _new_document_id()
        filename = f"{doc_id}{Path(original_name).suffix}"
        (self.documents_dir / filename).write_bytes(data)

        metadata = DocumentMetadata(
            id=doc_id,
            filename=filename,
            original_name=original_name,
            file_type=file_type,
            uploaded_at=datetime.now(UTC).isoformat(),
            category=category,
            description=description,
            size=len(data),
        )

        docs = self.list_documents()
        docs.append(metadata)
        self._write_index(docs)
        logger.info(f"Registered document {doc_id} ({original_name}, {len(data)} bytes)")
        return metadata

    def delete(self, doc_id: str) -> None:
        """Remove a document. A file already gone from disk is logged, not fatal."""
        doc = self.get(doc_id)

        try:
            (self.documents_dir / doc.filename).unlink()
        except OSError as e:
            logger.error(f"Error deleting file for {doc_id}: {e}")

        self._write_index([d for d in self.list_documents() if d.id != doc_id])

    def content(self, doc_id: str) -> str:
        doc = self.get(doc_id)
        return extract_text(self.documents_dir / doc.filename, doc.file_type)

    def legacy_documents(self) -> list[Path]:
        if not self.data_dir.is_dir():
            return []
        return sorted(self.data_dir.glob("*.docx"))

    def document_knowledge(self, category: str | None = None) -> str:
        """
        Concatenated document text for prompt context.

        Legacy .docx files come first, then registered documents (filtered by
        category substring when given). Stops adding documents once the
        context reaches MAX_TOTAL_LENGTH. Returns "" when nothing is found.
        """
        sections: list[str] = []
        total = 0

        for path in self.legacy_documents():
            if total >= MAX_TOTAL_LENGTH:
                break
            try:
                text = extract_text(path).strip()
            except Exception as e:
                logger.error(f"Error parsing legacy document {path.name}: {e}")
                continue
            if text:
                section = f"\n\n### Document: {path.name}\n{_truncate(text)}\n"
                sections.append(section)
                total += len(section)

        docs = self.list_documents()
        if category:
            needle = category.lower()
            docs = [d for d in docs if d.category and needle in d.category.lower()]

        for doc in docs:
            if total >= MAX_TOTAL_LENGTH:
                break
            try:
                text = self.content(doc.id).strip()
            except Exception as e:
                logger.error(f"Error loading document {doc.id}: {e}")
                continue
            if text:
                section = f"\n\n### {doc.original_name}"
                if doc.description:
                    section += f"\n*{doc.description}*"
                section += f"\n{_truncate(text)}\n"
                sections.append(section)
                total += len(section)

        if not sections:
            return ""
        return "\n\n## KNOWLEDGE FROM UPLOADED DOCUMENTS" + "".join(sections) + "\n"


_library: DocumentLibrary | None = None


def get_document_library() -> DocumentLibrary:
    global _library

    if _library is None:
        from casework.config import settings

        _library = DocumentLibrary(settings.data_dir)

    return _library

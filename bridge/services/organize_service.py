"""
Organize Service - folder suggestions for a batch of uploaded files.

Rule based, no AI call. Each rule fires at most once per batch.
"""

from typing import List

from bridge.schemas.schemas import UploadedFileInfo, OrganizeSuggestion
from bridge.utils.file_upload import get_file_extension

CODE_EXTENSIONS = {'.js', '.ts', '.jsx', '.tsx', '.css', '.html', '.py'}
DOCUMENT_EXTENSIONS = {'.txt', '.md'}
PROJECT_THRESHOLD = 5


def is_image(info: UploadedFileInfo) -> bool:
    return info.content_type.startswith("image/")


def is_code(info: UploadedFileInfo) -> bool:
    return get_file_extension(info.filename) in CODE_EXTENSIONS


def is_document(info: UploadedFileInfo) -> bool:
    return (
        "document" in info.content_type
        or "pdf" in info.content_type
        or get_file_extension(info.filename) in DOCUMENT_EXTENSIONS
    )


def suggest_organization(files: List[UploadedFileInfo]) -> List[OrganizeSuggestion]:
    suggestions = []

    images = [f for f in files if is_image(f)]
    code = [f for f in files if is_code(f)]
    documents = [f for f in files if is_document(f)]

    if images:
        suggestions.append(OrganizeSuggestion(
            id=1,
            title="Create Design Assets Folder",
            description=f"Organize {len(images)} image files into a dedicated design folder",
            type="folder-creation",
            confidence=95,
            files=len(images),
            action="Create folder 'Design Assets' and move image files"
        ))

    if code:
        suggestions.append(OrganizeSuggestion(
            id=2,
            title="Setup Development Project",
            description=f"Structure {len(code)} code files into a proper project layout",
            type="project-structure",
            confidence=88,
            files=len(code),
            action="Create folders: src/, assets/, docs/ and organize by file type"
        ))

    if documents:
        suggestions.append(OrganizeSuggestion(
            id=3,
            title="Documentation Folder",
            description=f"Group {len(documents)} documents for easy reference",
            type="documentation",
            confidence=92,
            files=len(documents),
            action="Create 'Documentation' folder and categorize by content"
        ))

    if len(files) > PROJECT_THRESHOLD:
        suggestions.append(OrganizeSuggestion(
            id=4,
            title="Project-Based Organization",
            description="Consider organizing files by project rather than file type",
            type="general",
            confidence=85,
            files=len(files),
            action="Create project folders and distribute files accordingly"
        ))

    return suggestions

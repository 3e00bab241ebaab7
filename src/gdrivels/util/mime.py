from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

# Google-apps documents (Docs, Sheets, Slides, ...) share this prefix and have
# no binary content of their own.
GOOGLE_APP_PREFIX: str = "application/vnd.google-apps."

TYPE_DIR: str = "dir"
TYPE_BIN: str = "bin"
TYPE_DOC: str = "doc"


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str) -> bool:
    return mime_type.startswith(GOOGLE_APP_PREFIX)


def is_binary(mime_type: str) -> bool:
    """Return True for regular uploaded content (anything outside Google apps)."""
    return not is_google_app(mime_type)


def file_type(mime_type: str) -> str:
    """
    Classify a MIME type as "dir", "bin" or "doc".

    Folders win over everything else; non Google-apps types are binaries;
    the remaining Google-apps types are documents.
    """
    if is_folder(mime_type):
        return TYPE_DIR
    if is_binary(mime_type):
        return TYPE_BIN
    return TYPE_DOC

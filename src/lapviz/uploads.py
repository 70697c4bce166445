"""Client-side validation of telemetry files before upload."""

from __future__ import annotations

from pathlib import Path

from lapviz.exceptions import UnsupportedFileError

# iRacing binary telemetry and AiM data logger recordings
SUPPORTED_EXTENSIONS: tuple[str, ...] = (".ibt", ".xrk")


def validate_upload_path(path: str | Path | None) -> Path:
    """Return *path* as a Path if it names an uploadable telemetry file.

    Raises UnsupportedFileError when no file is given, the file does not
    exist, or its extension is not one of SUPPORTED_EXTENSIONS.
    """
    if path is None or str(path) == "":
        raise UnsupportedFileError("No file selected.")
    candidate = Path(path)
    if candidate.suffix.lower() not in SUPPORTED_EXTENSIONS:
        allowed = ", ".join(SUPPORTED_EXTENSIONS)
        raise UnsupportedFileError(
            f"Unsupported file type '{candidate.suffix or candidate.name}'. Expected one of: {allowed}",
        )
    if not candidate.is_file():
        raise UnsupportedFileError(f"File not found: {candidate}")
    return candidate

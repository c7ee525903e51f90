"""
Bookmark file upload.

Accepts a single HTML or text file, decodes it and hands the text to the
import handler.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

import chardet

from bookmark_manager.utils.validation import validate_input_file

DEFAULT_ACCEPTED_EXTENSIONS = (".html", ".htm", ".txt")

# Read first 64KB for detection
DETECTION_SAMPLE_SIZE = 65536
MIN_CONFIDENCE = 0.7


class FileUpload:
    """Single-file upload that delivers the file's text to a callback."""

    def __init__(
        self,
        on_file_upload: Callable[[str], object],
        accepted_extensions: Iterable[str] = DEFAULT_ACCEPTED_EXTENSIONS,
    ):
        self.on_file_upload = on_file_upload
        self.accepted_extensions = [ext.lower() for ext in accepted_extensions]
        self.uploaded_file: Optional[Path] = None
        self.logger = logging.getLogger(__name__)

    @property
    def uploaded_size_kb(self) -> float:
        if self.uploaded_file is None:
            return 0.0
        return self.uploaded_file.stat().st_size / 1024

    def detect_encoding(self, data: bytes) -> str:
        """
        Detect the text encoding of uploaded bytes.

        Falls back to utf-8 when detection is unsure.
        """
        if data.startswith(b"\xef\xbb\xbf"):
            return "utf-8-sig"

        result = chardet.detect(data[:DETECTION_SAMPLE_SIZE])
        encoding = result.get("encoding") or "utf-8"
        confidence = result.get("confidence") or 0.0

        self.logger.debug(f"Detected encoding: {encoding} (confidence: {confidence:.2f})")

        if confidence < MIN_CONFIDENCE:
            self.logger.debug(f"Low encoding confidence ({confidence:.2f}), using utf-8")
            encoding = "utf-8"

        return encoding

    def read_text(self, file_path: Union[str, Path]) -> str:
        """
        Read an upload as text.

        Raises:
            ValidationError: If the file is missing or has an unaccepted extension
        """
        path = validate_input_file(file_path, self.accepted_extensions)
        data = path.read_bytes()
        encoding = self.detect_encoding(data)
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            self.logger.warning(f"Could not decode {path.name} as {encoding}, replacing invalid bytes")
            return data.decode("utf-8", errors="replace")

    def on_drop(self, file_path: Union[str, Path]):
        """
        Accept a dropped or selected file.

        Returns:
            Whatever the upload callback returns
        """
        content = self.read_text(file_path)
        self.uploaded_file = Path(file_path)
        self.logger.info(f"Uploaded {self.uploaded_file.name} ({self.uploaded_size_kb:.1f} KB)")
        return self.on_file_upload(content)

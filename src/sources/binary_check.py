import codecs
import os
from typing import Optional


BINARY_SIGNATURES = (
    b'\x89PNG\r\n\x1a\n',
    b'\xff\xd8\xff',
    b'GIF87a',
    b'GIF89a',
    b'PK\x03\x04',
    b'%PDF',
    b'\x7fELF',
    b'\x1f\x8b',
    b'BZh',
    b'\xfd7zXZ\x00',
    b'Rar!\x1a\x07',
    b'\xca\xfe\xba\xbe',
    b'\xcf\xfa\xed\xfe',
)


BINARY_EXTENSIONS = {
    '.png', '.jpg', '.jpeg', '.gif', '.bmp', '.ico', '.webp',
    '.pdf', '.zip', '.gz', '.bz2', '.xz', '.7z', '.rar', '.tar',
    '.exe', '.dll', '.so', '.dylib', '.bin',
    '.mp3', '.mp4', '.wav', '.ogg',
    '.pyc', '.pyo', '.class', '.o',
    '.db', '.sqlite', '.sqlite3',
}


CHECK_SIZE = 8192
NON_TEXT_THRESHOLD = 0.30

# Encodings whose text is full of NUL bytes; only recognised by their BOM.
WIDE_ENCODINGS = ('utf-16', 'utf-32')

_TEXT_BYTES = bytes({7, 8, 9, 10, 12, 13, 27} | set(range(0x20, 0x100)))


def _decodes(data: bytes, encoding: str, partial: bool = False) -> bool:
    # A partial chunk may end inside a multibyte sequence.
    try:
        if partial:
            codecs.getincrementaldecoder(encoding)().decode(data, final=False)
        else:
            data.decode(encoding)
        return True
    except (UnicodeDecodeError, LookupError):
        return False


class BinaryDetector:
    def __init__(self, check_size: int = CHECK_SIZE, threshold: float = NON_TEXT_THRESHOLD):
        self.check_size = check_size
        self.threshold = threshold

    def is_binary_by_extension(self, filepath: str) -> bool:
        return os.path.splitext(filepath)[1].lower() in BINARY_EXTENSIONS

    def is_binary_by_signature(self, data: bytes) -> bool:
        return data.startswith(BINARY_SIGNATURES)

    def is_binary_by_content(self, data: bytes, partial: bool = False) -> bool:
        if not data:
            return False
        if b'\x00' in data:
            return True
        if _decodes(data, 'utf-8', partial):
            return False
        non_text = len(data.translate(None, _TEXT_BYTES))
        return (non_text / len(data)) > self.threshold

    def check_file(self, filepath: str) -> bool:
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        if not os.path.isfile(filepath):
            raise ValueError(f"Not a file: {filepath}")
        if os.path.getsize(filepath) == 0:
            return False
        if self.is_binary_by_extension(filepath):
            return True
        with open(filepath, 'rb') as f:
            chunk = f.read(self.check_size)
        if EncodingDetector().detect_bom(chunk) in WIDE_ENCODINGS:
            return False
        partial = len(chunk) == self.check_size
        return self.is_binary_by_signature(chunk) or self.is_binary_by_content(chunk, partial)


def is_binary_file(filepath: str) -> bool:
    return BinaryDetector().check_file(filepath)


class EncodingDetector:
    ENCODINGS = ('utf-8', 'cp1251', 'cp1252', 'latin-1')

    BOM_ENCODINGS = (
        (b'\xff\xfe\x00\x00', 'utf-32'),
        (b'\x00\x00\xfe\xff', 'utf-32'),
        (b'\xef\xbb\xbf', 'utf-8-sig'),
        (b'\xff\xfe', 'utf-16'),
        (b'\xfe\xff', 'utf-16'),
    )

    def detect_bom(self, data: bytes) -> Optional[str]:
        for bom, encoding in self.BOM_ENCODINGS:
            if data.startswith(bom):
                return encoding
        return None

    def detect_from_content(self, data: bytes, partial: bool = False) -> str:
        """Pick the first encoding that decodes ``data``.

        ``partial`` marks a leading chunk of a larger file, whose last
        character may be cut off.
        """
        bom_encoding = self.detect_bom(data)
        if bom_encoding:
            return bom_encoding
        for encoding in self.ENCODINGS:
            if _decodes(data, encoding, partial):
                return encoding
        return 'utf-8'

    def detect_encoding(self, filepath: str) -> str:
        with open(filepath, 'rb') as f:
            raw = f.read(CHECK_SIZE)
        return self.detect_from_content(raw, partial=len(raw) == CHECK_SIZE)


def get_file_encoding(filepath: str) -> str:
    return EncodingDetector().detect_encoding(filepath)

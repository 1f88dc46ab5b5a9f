"""Font resolution by family name.

This module maps a human-readable font name to font file bytes by scanning
font directories, the way a desktop font picker resolves its selection.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont

from fontscope.exceptions import FontNotFoundError, FontReadError, FontUnavailableAsFileError
from fontscope.io.face import FontFace

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = frozenset({".ttf", ".otf", ".ttc", ".otc"})

# name table IDs: typographic family, family, full name
_NAME_IDS = (16, 1, 4)


@dataclass(frozen=True)
class ResolvedFont:
    """Font bytes found for a requested name.

    Attributes:
        name: Name the font was requested by
        data: Raw font file bytes
        path: File the bytes came from, or None for registered in-memory fonts
        face_index: Face index within a font collection
    """

    name: str
    data: bytes
    path: Path | None = None
    face_index: int = 0

    def require_path(self) -> Path:
        """Return the backing file path.

        Raises:
            FontUnavailableAsFileError: If the font only exists in memory
        """
        if self.path is None:
            raise FontUnavailableAsFileError(self.name)
        return self.path

    def load_face(self) -> FontFace:
        """Parse the resolved bytes into a FontFace."""
        source = str(self.path) if self.path is not None else self.name
        return FontFace.from_bytes(self.data, source=source, face_index=self.face_index)


class FontResolver:
    """Resolves font names to font bytes.

    Lookup order: fonts registered in memory, a direct path to a font file,
    then every font file under the configured directories. Names match the
    typographic family, family or full name from the name table, or the
    file stem, ignoring case.

    Example:
        resolver = FontResolver([Path("/usr/share/fonts")])
        resolved = resolver.resolve("Noto Sans JP")
        face = resolved.load_face()
    """

    def __init__(self, font_dirs: list[Path] | None = None, face_index: int = 0) -> None:
        self._font_dirs = list(font_dirs or [])
        self._face_index = face_index
        self._registered: dict[str, bytes] = {}

    def register(self, name: str, data: bytes) -> None:
        """Register in-memory font bytes under a name."""
        self._registered[name.casefold()] = data

    def iter_font_files(self) -> Iterator[Path]:
        """Yield font files under the configured directories, sorted per directory."""
        for font_dir in self._font_dirs:
            if not font_dir.is_dir():
                continue
            for path in sorted(font_dir.rglob("*")):
                if path.suffix.lower() in FONT_EXTENSIONS and path.is_file():
                    yield path

    def font_names(self, font_path: Path) -> set[str]:
        """Names a font file can be requested by, casefolded.

        Files that cannot be parsed are matched by file stem only.
        """
        names = {font_path.stem.casefold()}
        try:
            font = TTFont(str(font_path), fontNumber=self._face_index, lazy=True)
        except Exception as e:
            logger.debug("Skipping unreadable font %s: %s", font_path, e)
            return names
        try:
            name_table = font.get("name")
            if name_table is not None:
                for name_id in _NAME_IDS:
                    value = name_table.getDebugName(name_id)
                    if value:
                        names.add(value.casefold())
        finally:
            font.close()
        return names

    def family_names(self) -> list[str]:
        """List family names of every font found, sorted and de-duplicated."""
        families: set[str] = set(self._registered)
        for path in self.iter_font_files():
            try:
                font = TTFont(str(path), fontNumber=self._face_index, lazy=True)
            except Exception as e:
                logger.debug("Skipping unreadable font %s: %s", path, e)
                continue
            try:
                name_table = font.get("name")
                family = name_table.getBestFamilyName() if name_table is not None else None
            finally:
                font.close()
            families.add(family or path.stem)
        return sorted(families, key=str.casefold)

    def resolve(self, font_name: str) -> ResolvedFont:
        """Resolve a font name (or path) to font bytes.

        Raises:
            FontNotFoundError: If no font matches
            FontReadError: If the matching file cannot be read
        """
        key = font_name.casefold()
        if key in self._registered:
            return ResolvedFont(
                name=font_name,
                data=self._registered[key],
                face_index=self._face_index,
            )

        direct = Path(font_name).expanduser()
        if direct.suffix.lower() in FONT_EXTENSIONS and direct.is_file():
            return self._read(font_name, direct)

        for path in self.iter_font_files():
            if key in self.font_names(path):
                logger.debug("Resolved font %r to %s", font_name, path)
                return self._read(font_name, path)

        raise FontNotFoundError(font_name)

    def _read(self, font_name: str, font_path: Path) -> ResolvedFont:
        try:
            data = font_path.read_bytes()
        except OSError as e:
            raise FontReadError(str(font_path), str(e)) from e
        return ResolvedFont(
            name=font_name,
            data=data,
            path=font_path,
            face_index=self._face_index,
        )

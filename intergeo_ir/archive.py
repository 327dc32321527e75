"""Loading of ``.i2g`` archives and plain Intergeo XML files."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Union
from xml.etree.ElementTree import ElementTree, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from .model import MalformedDocumentStructure

logger = logging.getLogger(__name__)

ARCHIVE_MEMBER = "construction/intergeo.xml"

Source = Union[str, bytes, Path]


def _xml_bytes(data: bytes) -> bytes:
    if data.lstrip().startswith(b"<"):
        return data
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            return archive.read(ARCHIVE_MEMBER)
    except (zipfile.BadZipFile, KeyError) as exc:
        raise MalformedDocumentStructure(f"not an Intergeo archive: {exc}") from exc


def prepare_string(data: Union[str, bytes]) -> str:
    """Return the XML text of an Intergeo document.

    ``data`` that does not start with ``<`` is taken to be a zip archive, from
    which ``construction/intergeo.xml`` is extracted.
    """

    if isinstance(data, str):
        if data.lstrip().startswith("<"):
            return data
        data = data.encode("latin-1")
    return _xml_bytes(data).decode("utf-8")


def load_document(source: Source) -> ElementTree:
    """Parse a path, raw bytes or XML text into an element tree."""

    if isinstance(source, Path) or (isinstance(source, str) and not source.lstrip().startswith("<")):
        path = Path(source)
        logger.info("Loading Intergeo document from %s", path)
        data = _xml_bytes(path.read_bytes())
    elif isinstance(source, str):
        data = source.encode("utf-8")
    else:
        data = _xml_bytes(source)
    try:
        root = ET.fromstring(data)
    except (ParseError, DefusedXmlException) as exc:
        raise MalformedDocumentStructure(f"invalid XML: {exc}") from exc
    return ElementTree(root)

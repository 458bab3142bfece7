"""
Batch XML -> JSON conversion.

Each uploaded file goes through its own read -> parse -> normalize pipeline.
All pipelines run concurrently and are gathered back in input order; a file
that cannot be read or parsed only spoils its own result slot.
"""
import asyncio
import json
import logging
from typing import Any, Awaitable, List, Optional, Protocol, Sequence, Union
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from app.models import BatchError, ConversionResult
from app.normalizers import JsonValue, XmlElement, get_default_normalizer

log = logging.getLogger(__name__)

READ_ERROR = "Error reading file"
INVALID_XML = "Invalid XML"
PARSE_ERROR = "Error parsing XML"
BATCH_ERROR = "Error processing files"
TOO_DEEP = "XML nested too deeply"


class RawFile(Protocol):
    """Anything upload-like: a name plus an async read (FastAPI's UploadFile fits)."""
    filename: Optional[str]

    def read(self) -> Awaitable[Union[bytes, str]]:
        ...


class InvalidXmlError(ValueError):
    """The document is not well-formed XML."""
    def __init__(self, detail: str = ""):
        super().__init__(INVALID_XML)
        self.detail = detail


# --------------------------------------------------------------------
# Single document
# --------------------------------------------------------------------
def decode_text(raw: Union[bytes, str]) -> str:
    """Bytes -> text as UTF-8 (BOM dropped, bad bytes replaced)."""
    if isinstance(raw, str):
        return raw
    return raw.decode("utf-8-sig", errors="replace")


def parse_xml(text: str) -> XmlElement:
    """
    Parse a whole document and return its root element.
    No namespace resolution: element and attribute names stay qualified
    (`p:local`) and `xmlns*` declarations show up as attributes. CDATA,
    comments and PIs stay separate nodes for the normalizer to skip.
    """
    try:
        return minidom.parseString(text).documentElement
    except ExpatError as e:
        raise InvalidXmlError(str(e)) from e


def convert_text(text: str) -> JsonValue:
    """Parse one XML document and normalize its root."""
    root = parse_xml(text)
    return get_default_normalizer().normalize_element(root)


async def read_and_convert_file(file: RawFile) -> ConversionResult:
    """Run one file through read -> parse -> normalize; never raises."""
    name = file.filename or ""

    try:
        raw = await file.read()
    except Exception:
        log.warning("read failed: file=%s", name, exc_info=True)
        return ConversionResult(file_name=name, error=READ_ERROR)

    try:
        content = convert_text(decode_text(raw))
    except InvalidXmlError as e:
        log.warning("invalid xml: file=%s detail=%s", name, e.detail)
        return ConversionResult(file_name=name, error=INVALID_XML)
    except Exception as e:
        log.exception("conversion failed: file=%s", name)
        return ConversionResult(file_name=name, error=str(e) or PARSE_ERROR)

    try:
        # json can't pretty-print past the recursion limit; fail this slot, not the batch
        dump_json([{"content": content}])
    except RecursionError:
        log.warning("too deep to serialize: file=%s", name)
        return ConversionResult(file_name=name, error=TOO_DEEP)

    return ConversionResult(file_name=name, content=content)


# --------------------------------------------------------------------
# Batch
# --------------------------------------------------------------------
def select_files(files: Sequence[RawFile], allow_multiple: bool) -> List[RawFile]:
    """Single-file mode keeps only the first selected file."""
    files = list(files or [])
    if not allow_multiple:
        return files[:1]
    return files


async def convert_batch(files: Sequence[RawFile]) -> List[ConversionResult]:
    """
    Fan out one pipeline per file, wait for all of them, and return the
    results in the same order the files were given.
    """
    # gather() resequences by position, not by completion order
    results = await asyncio.gather(*(read_and_convert_file(f) for f in files))
    failed = sum(1 for r in results if not r.ok)
    log.info("converted batch: files=%d failed=%d", len(results), failed)
    return list(results)


def dump_json(obj: Any) -> str:
    """Pretty JSON the way the host displays it (2-space indent)."""
    return json.dumps(obj, indent=2, ensure_ascii=False)


def dump_batch(results: Sequence[ConversionResult]) -> str:
    return dump_json([r.to_json_obj() for r in results])


def describe_error(e: BaseException) -> str:
    """Best-effort message for a fault: its message, else its type name."""
    message = str(e)
    return message if message else type(e).__name__


async def render_batch(files: Sequence[RawFile]) -> str:
    """
    Convert a batch and serialize it. Anything escaping the per-file
    handling turns into a single {"error", "detail"} object instead.
    """
    try:
        results = await convert_batch(files)
        return dump_batch(results)
    except Exception as e:
        log.exception("batch conversion failed")
        return dump_json(BatchError(error=BATCH_ERROR, detail=describe_error(e)).model_dump())

"""Loading source text from disk."""

import logging
from pathlib import Path

from ._sanitise import replace_non_printable
from .errors import CorpusError

log = logging.getLogger(__name__)


def load_corpus(path: str | Path) -> bytearray:
    """
    Read ``path`` as raw bytes and replace non-printable bytes with spaces.

    :param path: Text file to read.
    :return: Sanitized buffer, ready for :func:`wordwalk.build_model`.
    :raises CorpusError: If the file does not exist or cannot be read.
    """
    path = Path(path)

    if not path.is_file():
        raise CorpusError("corpus file does not exist", path=path)

    log.info(f"loading corpus from {path}")
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CorpusError("failed to read corpus", path=path, os_err=e) from e

    log.debug(f"read {len(data)} bytes")
    return replace_non_printable(data)

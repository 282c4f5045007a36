import logging
import os
import time

from dummygen.constants import CHUNK_SIZE
from dummygen.utils.data import zero_chunks
from dummygen.utils.log import phase_log, ms_since


logger = logging.getLogger(__name__)


def write_raw(path, size_bytes: int, chunk_size: int = CHUNK_SIZE) -> int:
    """Write exactly `size_bytes` zero bytes to `path` and return the count.

    The file is written in `chunk_size` pieces so memory stays bounded no
    matter how large the target is. Blocking writes hold the loop until
    the OS accepts each chunk.
    """
    if size_bytes < 0:
        raise ValueError(f"size_bytes must be >= 0, got {size_bytes}")

    t0 = time.perf_counter_ns()
    path = os.fspath(path)
    phase_log(logger, "RAW", path, "START", "RUN", f"bytes={size_bytes};chunk_size={chunk_size}")

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    written = 0
    with open(path, "wb") as f:
        for chunk in zero_chunks(size_bytes, chunk_size):
            f.write(chunk)
            written += len(chunk)

    phase_log(logger, "RAW", path, "END", "SUCCESS", f"bytes={written};time_ms={ms_since(t0):.3f}")
    return written

import io
import logging
import os
import secrets
import time

from openpyxl import Workbook

from dummygen.utils.log import phase_log, ms_since


logger = logging.getLogger(__name__)

SHEET_TITLE = "Sheet1"
CELL = "A1"


def write_xlsx(path, size_bytes: int) -> int:
    """Write a one-sheet workbook whose A1 cell holds `size_bytes` random bytes as hex.

    The cell text is 2 * size_bytes characters long. The file on disk is
    smaller than that because xlsx is a zip container; the size is only an
    approximation of the request.
    """
    if size_bytes < 0:
        raise ValueError(f"size_bytes must be >= 0, got {size_bytes}")

    t0 = time.perf_counter_ns()
    path = os.fspath(path)
    phase_log(logger, "XLSX", path, "START", "RUN", f"bytes={size_bytes}")

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE

    t_rand = time.perf_counter_ns()
    random_text = secrets.token_bytes(size_bytes).hex()
    phase_log(logger, "XLSX", path, "END", "SUCCESS",
              f"phase=RANDOM;chars={len(random_text)};time_ms={ms_since(t_rand):.3f}")

    # Assigning through .value truncates strings to 32,767 characters.
    cell = sheet[CELL]
    if random_text:
        cell._value = random_text
        cell.data_type = "s"

    t_save = time.perf_counter_ns()
    buffer = io.BytesIO()
    workbook.save(buffer)
    data = buffer.getvalue()
    phase_log(logger, "XLSX", path, "END", "SUCCESS",
              f"phase=SERIALIZE;bytes={len(data)};time_ms={ms_since(t_save):.3f}")

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)

    phase_log(logger, "XLSX", path, "END", "SUCCESS", f"phase=WRITE;bytes={len(data)};total_time_ms={ms_since(t0):.3f}")
    return len(data)

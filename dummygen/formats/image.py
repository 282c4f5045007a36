import io
import logging
import os
import time

from PIL import Image

from dummygen.constants import IMAGE_EXTENSIONS, JPEG_QUALITY
from dummygen.utils.log import phase_log, ms_since


logger = logging.getLogger(__name__)

WHITE_RGBA = (255, 255, 255, 255)
WHITE_RGB = (255, 255, 255)


class EncodingError(Exception):
    pass


def is_image_ext(ext: str) -> bool:
    return ext.lower() in IMAGE_EXTENSIONS


def write_image(path, width: int, height: int, fmt: str, quality: int = JPEG_QUALITY) -> int:
    """Write a solid white `width` x `height` image and return its size in bytes.

    PNG is written as opaque RGBA, JPEG as RGB at a fixed quality. The
    on-disk size depends on the codec, not on any requested byte size.
    """
    fmt = fmt.lower()
    if fmt not in IMAGE_EXTENSIONS:
        raise EncodingError(f"Unsupported image format: {fmt}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    t0 = time.perf_counter_ns()
    path = os.fspath(path)
    phase_log(logger, "IMAGE", path, "START", "RUN", f"width={width};height={height};format={fmt}")

    try:
        buffer = io.BytesIO()
        if fmt == "png":
            image = Image.new("RGBA", (width, height), WHITE_RGBA)
            image.save(buffer, format="PNG")
        else:
            image = Image.new("RGB", (width, height), WHITE_RGB)
            image.save(buffer, format="JPEG", quality=quality)
    except (MemoryError, ValueError, OSError) as e:
        phase_log(logger, "IMAGE", path, "END", "ERROR", f"phase=ENCODE;msg={e};total_time_ms={ms_since(t0):.3f}")
        raise EncodingError(f"Image encoding failed: {str(e)}")

    data = buffer.getvalue()
    phase_log(logger, "IMAGE", path, "END", "SUCCESS", f"phase=ENCODE;bytes={len(data)}")

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)

    phase_log(logger, "IMAGE", path, "END", "SUCCESS", f"phase=WRITE;bytes={len(data)};total_time_ms={ms_since(t0):.3f}")
    return len(data)

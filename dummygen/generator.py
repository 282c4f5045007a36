import logging
import os
import time
from dataclasses import dataclass
from typing import List, Optional

from dummygen.config import Settings
from dummygen.constants import N_PLACEHOLDER, SPREADSHEET_EXTENSION
from dummygen.formats.image import is_image_ext, write_image
from dummygen.formats.raw import write_raw
from dummygen.formats.spreadsheet import write_xlsx
from dummygen.sizes import human
from dummygen.utils.log import phase_log, ms_since


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int


@dataclass(frozen=True)
class GenerationRequest:
    extension: str
    size_bytes: int
    filename_template: str
    count: int = 1
    image_dimensions: Optional[ImageDimensions] = None

    @classmethod
    def create(cls, extension: str, size_bytes: int, filename_template: str, count: int = 1,
               width: Optional[int] = None, height: Optional[int] = None) -> "GenerationRequest":
        ext = normalize_ext(extension)
        if not ext:
            raise ValueError("extension must not be empty")
        if size_bytes < 0:
            raise ValueError(f"size_bytes must be >= 0, got {size_bytes}")
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        if not filename_template:
            raise ValueError("filename template must not be empty")

        dims = None
        if is_image_ext(ext):
            if width is None or height is None:
                raise ValueError(f"width and height are required for .{ext} files")
            if width <= 0 or height <= 0:
                raise ValueError(f"image dimensions must be positive, got {width}x{height}")
            dims = ImageDimensions(width, height)

        return cls(extension=ext, size_bytes=size_bytes, filename_template=filename_template,
                   count=count, image_dimensions=dims)


@dataclass
class GenerationResult:
    index: int
    path: str
    size: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_ext(ext: str) -> str:
    ext = ext.strip()
    if ext.startswith("."):
        ext = ext[1:]
    return ext.lower()


def resolve_filename(template: str, index: int, count: int) -> str:
    if N_PLACEHOLDER in template:
        return template.replace(N_PLACEHOLDER, str(index))
    if count == 1:
        return template
    return f"{template}{index}"


def output_path(settings: Settings, filename: str, ext: str) -> str:
    base = settings.output_dir or os.getcwd()
    return os.path.abspath(os.path.join(base, f"{filename}.{ext}"))


def generate_one(request: GenerationRequest, settings: Settings, path: str) -> int:
    """Write a single file for `request` at `path`, returning its size on disk."""
    ext = request.extension
    if is_image_ext(ext):
        dims = request.image_dimensions
        write_image(path, dims.width, dims.height, ext, quality=settings.jpeg_quality)
        print(f"   image created: {path}")
    elif ext == SPREADSHEET_EXTENSION:
        write_xlsx(path, request.size_bytes)
        print(f"   xlsx created: {path} ({os.stat(path).st_size} bytes)")
    else:
        write_raw(path, request.size_bytes, chunk_size=settings.chunk_size)
        print(f"   dummy file created: {path} ({os.stat(path).st_size} bytes)")
    return os.stat(path).st_size


def generate_files(request: GenerationRequest, settings: Settings) -> List[GenerationResult]:
    """Generate `request.count` files one after another.

    A failing file is logged and recorded in its result; the remaining
    files are still generated.
    """
    t_total = time.perf_counter_ns()
    phase_log(logger, "BATCH", request.filename_template, "START", "RUN",
              f"ext={request.extension};bytes={request.size_bytes};count={request.count}")

    results: List[GenerationResult] = []
    for i in range(1, request.count + 1):
        fname = resolve_filename(request.filename_template, i, request.count)
        path = output_path(settings, fname, request.extension)
        print(f"-> generating: {path} (target: {request.size_bytes} bytes)")

        result = GenerationResult(index=i, path=path)
        try:
            result.size = generate_one(request, settings, path)
            logger.info("GEN,FILE,%s,END,SUCCESS,bytes=%d (%s)", path, result.size, human(result.size))
        except Exception as e:
            result.error = e
            logger.error("GEN,FILE,%s,END,ERROR,%s", path, e)
            logger.debug("GEN,FILE,%s,TRACEBACK", path, exc_info=True)
        results.append(result)

    failed = sum(1 for r in results if not r.ok)
    phase_log(logger, "BATCH", request.filename_template, "END", "SUCCESS",
              f"created={len(results) - failed};failed={failed};total_time_ms={ms_since(t_total):.3f}")
    print("Done.")
    return results

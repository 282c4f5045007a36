from typing import Callable, Optional

from dummygen.constants import DEFAULT_COUNT, DEFAULT_FILENAME, DEFAULT_HEIGHT, DEFAULT_WIDTH
from dummygen.formats.image import is_image_ext
from dummygen.generator import GenerationRequest, normalize_ext
from dummygen.sizes import FormatError, parse_size_to_bytes


def ask(message: str, default: Optional[str] = None,
        validate: Optional[Callable[[str], Optional[str]]] = None) -> str:
    """Prompt until `validate` accepts the answer.

    `validate` returns an error message for a bad answer and None for a
    good one. An empty answer falls back to `default` when there is one.
    """
    label = f"{message} [{default}]: " if default is not None else f"{message}: "
    while True:
        answer = input(label).strip()
        if not answer and default is not None:
            answer = default
        error = validate(answer) if validate else None
        if error is None:
            return answer
        print(f"  {error}")


def required(value: str) -> Optional[str]:
    return None if value else "Input required"


def extension(value: str) -> Optional[str]:
    return None if normalize_ext(value) else "Input required"


def positive_int(value: str) -> Optional[str]:
    try:
        return None if int(value) >= 1 else "Enter a positive integer"
    except ValueError:
        return "Enter a positive integer"


def valid_size(value: str) -> Optional[str]:
    if not value:
        return "Input required"
    try:
        parse_size_to_bytes(value)
    except FormatError as e:
        return str(e)
    return None


def collect_request(ext: Optional[str] = None, size: Optional[str] = None, name: Optional[str] = None,
                    count: Optional[int] = None, width: Optional[int] = None,
                    height: Optional[int] = None) -> GenerationRequest:
    """Build a GenerationRequest, prompting for every value not already given."""
    if ext is None:
        ext = ask("File extension (e.g. txt, xlsx, png, jpg)", validate=extension)
    ext = normalize_ext(ext)

    if size is None:
        size = ask("Target file size (e.g. 10MB, 512KB)", validate=valid_size)
    size_bytes = parse_size_to_bytes(size)

    if name is None:
        name = ask("File name without extension, use {n} for numbering", default=DEFAULT_FILENAME,
                   validate=required)

    if count is None:
        count = int(ask("How many files?", default=str(DEFAULT_COUNT), validate=positive_int))

    if is_image_ext(ext):
        if width is None:
            width = int(ask("Image width (px)", default=str(DEFAULT_WIDTH), validate=positive_int))
        if height is None:
            height = int(ask("Image height (px)", default=str(DEFAULT_HEIGHT), validate=positive_int))

    return GenerationRequest.create(ext, size_bytes, name, count=count, width=width, height=height)

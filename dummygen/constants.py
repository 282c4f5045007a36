CHUNK_SIZE = 1 * 1024 * 1024           # write in 1 MB chunks
JPEG_QUALITY = 90

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg")
SPREADSHEET_EXTENSION = "xlsx"

SIZE_UNITS = {
    "B": 1,
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
}

N_PLACEHOLDER = "{n}"

DEFAULT_FILENAME = "dummy{n}"
DEFAULT_COUNT = 1
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

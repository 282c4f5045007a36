from typing import Iterator


def zero_chunks(total: int, chunk_size: int) -> Iterator[bytes]:
    """Yield zero-filled chunks adding up to exactly `total` bytes.

    Full chunks share one buffer; the last chunk is cut to the remainder.
    """
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be > 0, got {chunk_size}")

    chunk = bytes(min(total, chunk_size))
    remaining = total
    while remaining > 0:
        if remaining >= len(chunk):
            yield chunk
            remaining -= len(chunk)
        else:
            yield chunk[:remaining]
            remaining = 0

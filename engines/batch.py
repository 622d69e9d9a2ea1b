"""Concurrent encoding of image files."""

import os
from concurrent import futures
from typing import Callable, List, Optional, Sequence

import cv2

from models.encoding_params import EncodingParams
from models.encoding_result import EncodingResult
from engines.pipeline import encode_image
from utils.image_io import load_image_rgba
from utils.timing import Timer


def encode_file(path: str, params: EncodingParams) -> EncodingResult:
    """Load one image and encode it. Failures are recorded, not raised."""
    result = EncodingResult(
        path=str(path),
        components_x=params.components_x,
        components_y=params.components_y,
    )
    try:
        image = load_image_rgba(path)
        result.height, result.width = image.shape[:2]
        timer = Timer()
        result.blurhash = timer.measure_encode(encode_image, image, params)
        result.encode_time_ms = timer.encode_time_ms
    except (ValueError, OSError, MemoryError, cv2.error) as e:
        result.error = str(e) or type(e).__name__
    return result


def encode_files(
    paths: Sequence[str],
    params: Optional[EncodingParams] = None,
    max_workers: Optional[int] = None,
    progress: Optional[Callable[[int, int], None]] = None
) -> List[EncodingResult]:
    """
    Encode many files on a bounded thread pool.

    Results come back in the order of `paths`. max_workers defaults to the
    CPU count. progress, if given, is called with (done, total) as each
    file finishes.
    """
    if params is None:
        params = EncodingParams()
    if max_workers is None:
        max_workers = os.cpu_count() or 1
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    results: List[Optional[EncodingResult]] = [None] * len(paths)
    total = len(paths)
    if total == 0:
        return []

    with futures.ThreadPoolExecutor(max_workers=max_workers) as ex:
        future_map = {ex.submit(encode_file, path, params): i for i, path in enumerate(paths)}
        for done, fut in enumerate(futures.as_completed(future_map), start=1):
            results[future_map[fut]] = fut.result()
            if progress is not None:
                progress(done, total)

    return results

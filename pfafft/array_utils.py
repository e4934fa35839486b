import numpy as np

def transpose(width: int, height: int, input: np.ndarray, output: np.ndarray):
    """
    Transpose a row-major matrix stored in a flat buffer.

    `input` holds `height` rows of `width` elements, `output` receives `width`
    rows of `height` elements, so that output[x * height + y] == input[y * width + x].
    Both buffers must be contiguous and hold width * height elements.
    """
    np.copyto(output.reshape(width, height), input.reshape(height, width).T)

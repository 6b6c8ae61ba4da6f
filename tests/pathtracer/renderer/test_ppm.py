import io

import numpy as np

from pathtracer.renderer.ppm import format_ppm, write_ppm


class TestPPM:
    def test_format(self):
        """Test the P3 header and one triple per pixel, top row first."""
        image = np.array([
            [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
            [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        ])
        text = format_ppm(image)
        assert text == (
            "P3\n3 2\n255\n"
            "255 0 0\n0 255 0\n0 0 255\n"
            "1 2 3\n4 5 6\n7 8 9\n"
        )

    def test_write_to_stream(self):
        stream = io.StringIO()
        write_ppm(np.zeros((1, 1, 3), dtype=np.int64), stream)
        assert stream.getvalue() == "P3\n1 1\n255\n0 0 0\n"

import numpy as np

from audioscope.tests.test_case import TestCase
import audioscope.util.color_map as color_map


class ColorMapTests(TestCase):


    def test_map_value(self):

        cases = [
            (0, (30, 60, 200)),
            (1, (255, 240, 80)),
            (.5, (86, 187, 140)),
            (.25, (44, 150, 170))
        ]

        for v, expected in cases:
            self.assertEqual(color_map.map_value(v), expected)


    def test_map_value_clamps(self):

        low = color_map.map_value(0)
        high = color_map.map_value(1)

        cases = [
            (-1, low),
            (-1e-9, low),
            (float('-inf'), low),
            (float('nan'), low),
            (1.5, high),
            (100, high),
            (float('inf'), high)
        ]

        for v, expected in cases:
            self.assertEqual(color_map.map_value(v), expected)


    def test_map_value_range(self):
        for v in np.linspace(-2, 3, 101):
            for c in color_map.map_value(v):
                self.assertIsInstance(c, int)
                self.assertGreaterEqual(c, 0)
                self.assertLessEqual(c, 255)


    def test_map_values(self):

        values = np.concatenate(
            (np.linspace(-.5, 1.5, 401), [np.nan, np.inf, -np.inf]))

        colors = color_map.map_values(values)

        self.assertEqual(colors.shape, (len(values), 3))
        self.assertEqual(colors.dtype, np.uint8)

        for v, color in zip(values, colors):
            actual = tuple(int(c) for c in color)
            self.assertEqual(actual, color_map.map_value(v))


    def test_map_values_shape(self):
        colors = color_map.map_values(np.zeros((4, 5)))
        self.assertEqual(colors.shape, (4, 5, 3))
        self.assert_arrays_equal(colors[2, 3], np.array([30, 60, 200]))

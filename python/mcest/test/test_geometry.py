# -*- coding: utf-8 -*-
"""Unit tests of sphere geometry.
"""
import unittest

import numpy as np
from astropy.table import Table

from mcest.geometry import Point, \
                           Sphere, \
                           BoundingBox, \
                           to_array, \
                           to_spheres, \
                           bounding_box, \
                           containment_count, \
                           is_inside_region, \
                           theoretical_volume

class TestSphere(unittest.TestCase):

    def test_values(self):
        s = Sphere((1., 2., 3.), 0.5)
        self.assertEqual(s.center, Point(1., 2., 3.))
        self.assertEqual(s.center.y, 2.)
        self.assertEqual(s.radius, 0.5)
        self.assertTrue(np.isclose(s.volume, 4.*np.pi*0.125/3.))
        self.assertEqual(s.to_string(), 'Center: (1, 2, 3); Radius: 0.5')

    def test_point_sphere(self):
        s = Sphere((0., 0., 0.), 0.)
        self.assertEqual(s.volume, 0.)

    def test_negative_radius(self):
        with self.assertRaises(ValueError):
            Sphere((0., 0., 0.), -1.)
        with self.assertRaises(ValueError):
            Sphere((0., 0., 0.), np.nan)


class TestToArray(unittest.TestCase):

    def setUp(self):
        self.spheres = [Sphere((0., 0., 0.), 1.),
                        Sphere((2., -1., 0.5), 0.25)]
        self.centers = np.array([[0., 0., 0.], [2., -1., 0.5]])
        self.radii = np.array([1., 0.25])

    def check(self, spheres):
        centers, radii = to_array(spheres)
        self.assertTrue(np.array_equal(centers, self.centers))
        self.assertTrue(np.array_equal(radii, self.radii))

    def test_sphere_list(self):
        self.check(self.spheres)

    def test_table(self):
        table = Table([[0., 2.], [0., -1.], [0., 0.5], [1., 0.25]], names=('x', 'y', 'z', 'r'))
        self.check(table)

        table['r'].name = 'radius'
        self.check(table)

    def test_array(self):
        self.check(np.array([[0., 0., 0., 1.], [2., -1., 0.5, 0.25]]))
        self.check([(0., 0., 0., 1.), (2., -1., 0.5, 0.25)])

    def test_empty(self):
        centers, radii = to_array([])
        self.assertEqual(centers.shape, (0, 3))
        self.assertEqual(radii.shape, (0,))

    def test_negative_radius(self):
        with self.assertRaises(ValueError):
            to_array([[0., 0., 0., -1.]])

    def test_non_finite(self):
        with self.assertRaises(ValueError):
            to_array([[np.nan, 0., 0., 1.]])
        with self.assertRaises(ValueError):
            to_array([[0., 0., 0., np.inf]])
        with self.assertRaises(ValueError):
            to_array(Table([[0.], [-np.inf], [0.], [1.]], names=('x', 'y', 'z', 'r')))

    def test_to_spheres(self):
        spheres = to_spheres(np.column_stack([self.centers, self.radii]))
        self.assertEqual(spheres, self.spheres)


class TestBoundingBox(unittest.TestCase):

    def test_single_sphere(self):
        box = bounding_box([Sphere((1., 2., 3.), 2.)])
        self.assertEqual(box.min, Point(-1., 0., 1.))
        self.assertEqual(box.max, Point(3., 4., 5.))
        self.assertEqual(box.dimensions, (4., 4., 4.))
        self.assertEqual(box.volume, 64.)

    def test_contains_every_sphere(self):
        rng = np.random.default_rng(0)
        spheres = np.column_stack([rng.uniform(-10, 10, (20, 3)), rng.uniform(0, 3, 20)])
        box = bounding_box(spheres)
        for x, y, z, r in spheres:
            self.assertTrue(box.min.x <= x - r and box.max.x >= x + r)
            self.assertTrue(box.min.y <= y - r and box.max.y >= y + r)
            self.assertTrue(box.min.z <= z - r and box.max.z >= z + r)

        # and is the tightest such box
        self.assertTrue(np.isclose(box.min.x, np.min(spheres[:,0] - spheres[:,3])))
        self.assertTrue(np.isclose(box.max.z, np.max(spheres[:,2] + spheres[:,3])))

    def test_point_sphere(self):
        box = bounding_box([Sphere((1., 1., 1.), 0.)])
        self.assertEqual(box.volume, 0.)

    def test_empty(self):
        with self.assertRaises(ValueError):
            bounding_box([])

    def test_volume(self):
        box = BoundingBox(Point(0., 0., 0.), Point(1., 2., 3.))
        self.assertEqual(box.dimensions, (1., 2., 3.))
        self.assertEqual(box.volume, 6.)


class TestContainment(unittest.TestCase):

    def setUp(self):
        self.centers = np.array([[0., 0., 0.], [1., 0., 0.]])
        self.radii = np.array([1., 1.])

    def test_counts(self):
        points = np.array([[0.5, 0., 0.],   # in both
                           [-0.5, 0., 0.],  # in the first only
                           [1.9, 0., 0.],   # in the second only
                           [0., 5., 0.]])   # in neither
        counts = containment_count(points, self.centers, self.radii)
        self.assertTrue(np.array_equal(counts, [2, 1, 1, 0]))

    def test_boundary(self):
        """Points on the surface are inside
        """
        points = np.array([[-1., 0., 0.], [0., 1., 0.], [2., 0., 0.]])
        counts = containment_count(points, self.centers, self.radii)
        self.assertTrue(np.array_equal(counts, [1, 1, 1]))

    def test_threshold(self):
        points = np.array([[0.5, 0., 0.], [-0.5, 0., 0.], [0., 5., 0.]])
        self.assertTrue(np.array_equal(is_inside_region(points, self.centers, self.radii, 1),
                                       [True, True, False]))
        self.assertTrue(np.array_equal(is_inside_region(points, self.centers, self.radii, 2),
                                       [True, False, False]))
        self.assertFalse(is_inside_region(points, self.centers, self.radii, 3).any())

    def test_single_point(self):
        counts = containment_count(np.array([0.5, 0., 0.]), self.centers, self.radii)
        self.assertTrue(np.array_equal(counts, [2]))


class TestTheoreticalVolume(unittest.TestCase):

    def test_sum(self):
        spheres = [Sphere((0., 0., 0.), 1.), Sphere((0.5, 0., 0.), 2.), Sphere((9., 9., 9.), 0.)]
        self.assertTrue(np.isclose(theoretical_volume(spheres), 4.*np.pi*(1. + 8.)/3.))

    def test_no_overlap_correction(self):
        """Coincident spheres are counted twice
        """
        spheres = [Sphere((0., 0., 0.), 1.)]*2
        self.assertTrue(np.isclose(theoretical_volume(spheres), 8.*np.pi/3.))

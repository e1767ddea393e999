import unittest

from conceptual_builder.commons.oop.patterns import (
    Director, ConcreteBuilder, ManifestBuilder
)
from conceptual_builder.exceptions import (
    DirectorNotConfiguredError, ConfigurationError, InvalidTypeError,
    InvalidValueError
)


class DirectorTest(unittest.TestCase):

    def setUp(self) -> None:
        self.director = Director()
        self.builder = ConcreteBuilder()

    def test_unconfigured_director(self):
        """
        Tests a director failing to build, given no builder has been
        assigned.
        """
        self.assertIsNone(self.director.builder)
        self.assertRaises(DirectorNotConfiguredError,
                          self.director.build_minimal_viable_product)
        self.assertRaises(DirectorNotConfiguredError,
                          self.director.build_full_featured_product)
        self.assertRaises(ConfigurationError, self.director.build, 'full')

    def test_minimal_viable_product(self):
        self.director.set_builder(self.builder)
        self.director.build_minimal_viable_product()
        self.assertEqual(self.builder.get_product().parts, ('Dough',))

    def test_full_featured_product(self):
        self.director.set_builder(self.builder)
        self.director.build_full_featured_product()
        self.assertEqual(self.builder.get_product().parts,
                         ('Dough', 'Sauce', 'Cheese'))

    def test_builder_reassignment(self):
        """
        Tests the director driving whichever builder is assigned last.
        """
        manifest_builder = ManifestBuilder()
        self.director.builder = self.builder
        self.director.build_minimal_viable_product()
        self.director.builder = manifest_builder
        self.director.build_full_featured_product()

        self.assertIs(self.director.builder, manifest_builder)
        self.assertEqual(self.builder.get_product().parts, ('Dough',))
        self.assertEqual(manifest_builder.get_product().parts,
                         ('Dough', 'Sauce', 'Cheese'))

    def test_build_variants(self):
        self.director.set_builder(self.builder)
        self.assertEqual(self.director.variants, ('minimal', 'full'))
        self.director.build('minimal')
        self.director.build('full')
        self.assertEqual(self.builder.get_product().parts,
                         ('Dough', 'Dough', 'Sauce', 'Cheese'))

    def test_unknown_variant(self):
        self.director.set_builder(self.builder)
        self.assertRaises(InvalidValueError, self.director.build, 'deluxe')

    def test_invalid_builder(self):
        with self.assertRaises(InvalidTypeError):
            self.director.builder = object()
        self.assertIsNone(self.director.builder)

    def test_builder_in_constructor(self):
        director = Director(self.builder)
        director.build_minimal_viable_product()
        self.assertEqual(len(self.builder.get_product()), 1)


if __name__ == '__main__':
    unittest.main()

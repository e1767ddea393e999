import unittest

from conceptual_builder.commons.oop.patterns import (
    IBuilder, ConcreteBuilder, ManifestBuilder, PartLabels, Product, Manifest
)


class BuilderProductionTest(unittest.TestCase):

    def test_interface_instantiation(self):
        """
        Tests the builder capability being abstract.
        """
        self.assertRaises(TypeError, IBuilder)

    def test_reset_on_retrieve(self):
        """
        Tests two consecutive retrievals, given no steps in between,
        the latter product has no parts.
        """
        builder = getattr(self, 'builder', None)
        if builder:
            builder.build_part_a()
            first, second = builder.get_product(), builder.get_product()
            self.assertEqual(len(first), 1)
            self.assertEqual(len(second), 0)

    def test_no_aliasing(self):
        """
        Tests steps invoked after a retrieval affecting the new product
        only.
        """
        builder = getattr(self, 'builder', None)
        if builder:
            builder.build_part_a()
            released = builder.get_product()
            builder.build_part_b()
            builder.build_part_c()
            self.assertEqual(len(released), 1)
            self.assertEqual(len(builder.get_product()), 2)


class ConcreteBuilderTest(BuilderProductionTest):

    def setUp(self) -> None:
        self.builder = ConcreteBuilder()

    def test_default_labels(self):
        self.assertEqual(self.builder.labels,
                         PartLabels('Dough', 'Sauce', 'Cheese'))

    def test_fresh_builder_product(self):
        product = self.builder.get_product()
        self.assertIsInstance(product, Product)
        self.assertEqual(product.parts, ())

    def test_minimal_product(self):
        self.builder.build_part_a()
        product = self.builder.get_product()
        self.assertEqual(product.parts, ('Dough',))
        self.assertEqual(product.describe(), 'Product parts: Dough')

    def test_full_product(self):
        self.builder.build_part_a()
        self.builder.build_part_b()
        self.builder.build_part_c()
        self.assertEqual(self.builder.get_product().describe(),
                         'Product parts: Dough, Sauce, Cheese')

    def test_steps_order_and_duplicates(self):
        """
        Tests an arbitrary sequence of steps, repeated steps appending
        their label each time.
        """
        steps = (self.builder.build_part_c, self.builder.build_part_a,
                 self.builder.build_part_c, self.builder.build_part_b)
        for step in steps:
            step()
        self.assertEqual(self.builder.get_product().parts,
                         ('Cheese', 'Dough', 'Cheese', 'Sauce'))

    def test_reset(self):
        self.builder.build_part_a()
        self.builder.reset()
        self.assertEqual(self.builder.get_product().describe(),
                         'Product parts: (none)')

    def test_custom_labels(self):
        builder = ConcreteBuilder(labels=PartLabels('A', 'B', 'C'),
                                  prefix='Parts: ', separator='|')
        self.assertEqual(builder.labels, PartLabels('A', 'B', 'C'))
        builder.build_part_a()
        builder.build_part_c()
        self.assertEqual(builder.get_product().describe(), 'Parts: A|C')

    def test_independent_builders(self):
        other = ConcreteBuilder()
        self.builder.build_part_a()
        other.build_part_b()
        self.assertEqual(self.builder.get_product().parts, ('Dough',))
        self.assertEqual(other.get_product().parts, ('Sauce',))


class ManifestBuilderTest(BuilderProductionTest):

    def setUp(self) -> None:
        self.builder = ManifestBuilder()

    def test_steps_recorded(self):
        """
        Tests the manifest noting the step each part came from.
        """
        self.builder.build_part_b()
        self.builder.build_part_a()
        manifest = self.builder.get_product()
        self.assertIsInstance(manifest, Manifest)
        self.assertEqual(manifest.entries,
                         (('build_part_b', 'Sauce'),
                          ('build_part_a', 'Dough')))


if __name__ == '__main__':
    unittest.main()

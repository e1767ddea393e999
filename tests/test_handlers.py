import os
import tempfile
import unittest

from click.testing import CliRunner

from conceptual_builder.core.conf.config_holder import CONFIG_FILE_NAME
from conceptual_builder.core.constants import (CONF_PATH_ENV, OK_RETURN_CODE,
                                               FAILED_RETURN_CODE)
from conceptual_builder.core.handlers import builder


class HandlersTest(unittest.TestCase):

    def setUp(self) -> None:
        self.runner = CliRunner()
        self.env = {CONF_PATH_ENV: None}

    def invoke(self, *args):
        return self.runner.invoke(builder, list(args), env=self.env)

    def test_minimal(self):
        result = self.invoke('minimal')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertEqual(result.output.strip(), 'Product parts: Dough')

    def test_full(self):
        result = self.invoke('full')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertEqual(result.output.strip(),
                         'Product parts: Dough, Sauce, Cheese')

    def test_custom(self):
        """
        Tests parts being added in the given order, bypassing the director.
        """
        result = self.invoke('custom', '--part', 'c', '-p', 'a', '-p', 'C')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertEqual(result.output.strip(),
                         'Product parts: Cheese, Dough, Cheese')

    def test_custom_without_parts(self):
        result = self.invoke('custom')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertEqual(result.output.strip(), 'Product parts: (none)')

    def test_custom_unknown_part(self):
        result = self.invoke('custom', '--part', 'd')
        self.assertNotEqual(result.exit_code, OK_RETURN_CODE)

    def test_demo(self):
        result = self.invoke('demo')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertEqual(result.output.splitlines(), [
            'Standard basic product:',
            'Product parts: Dough',
            'Standard full featured product:',
            'Product parts: Dough, Sauce, Cheese',
            'Custom product:',
            'Product parts: Dough, Cheese'
        ])

    def test_manifest_builder(self):
        result = self.invoke('full', '--builder', 'manifest')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        rows = [line.split() for line in result.output.splitlines()[2:]]
        self.assertEqual(rows, [['1', 'build_part_a', 'Dough'],
                                ['2', 'build_part_b', 'Sauce'],
                                ['3', 'build_part_c', 'Cheese']])

    def test_version(self):
        result = self.invoke('--version')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertIn('version', result.output)


class ConfiguredHandlersTest(unittest.TestCase):

    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.runner = CliRunner()
        self.env = {CONF_PATH_ENV: self._tmp_dir.name}

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def write_config(self, content):
        path = os.path.join(self._tmp_dir.name, CONFIG_FILE_NAME)
        with open(path, 'w') as file:
            file.write(content)

    def invoke(self, *args):
        return self.runner.invoke(builder, list(args), env=self.env)

    def test_configured_labels(self):
        """
        Tests configured labels and prefix reaching the built product.
        """
        self.write_config('part_a_label = Crust\n'
                          'description_prefix = "Pizza: "\n')
        result = self.invoke('custom', '-p', 'a', '-p', 'b')
        self.assertEqual(result.exit_code, OK_RETURN_CODE)
        self.assertEqual(result.output.strip(), 'Pizza: Crust, Sauce')

    def test_invalid_configuration(self):
        self.write_config('part_a_label = ""\n')
        result = self.invoke('minimal')
        self.assertEqual(result.exit_code, FAILED_RETURN_CODE)
        self.assertNotIn('Product parts', result.output)

    def test_missing_configuration_file(self):
        result = self.invoke('minimal')
        self.assertEqual(result.exit_code, FAILED_RETURN_CODE)


if __name__ == '__main__':
    unittest.main()

from unittest import mock

from bytecase.lib import tools
from bytecase.lib.environment import environment

from .. import TestBase


class TestTools(TestBase):

    def test_exception_to_string(self):
        self.assertEqual(tools.exception_to_string(ValueError()), 'ValueError')
        self.assertEqual(tools.exception_to_string(ValueError('short', 'a longer message ')), 'a longer message')
        self.assertEqual(tools.exception_to_string(KeyError(5)), '5')

    def test_documentation_strips_markup(self):
        class dummy:
            """
            Applies `bytecase.lib.dispatch.lowercase` to the `input`.
            """
        self.assertEqual(tools.documentation(dummy), 'Applies lowercase to the input.')

    def test_documentation_of_undocumented_class(self):
        class dummy:
            pass
        self.assertEqual(tools.documentation(dummy), '')

    def test_terminal_size_from_environment(self):
        with mock.patch.object(environment.term_size, 'value', 120):
            self.assertEqual(tools.get_terminal_size(), 120)

    def test_terminal_size_default_without_terminal(self):
        class pipe:
            def isatty(self):
                return False
        with mock.patch.object(environment.term_size, 'value', 0):
            with mock.patch.object(tools.sys, 'stderr', pipe()), mock.patch.object(tools.sys, 'stdout', pipe()):
                self.assertEqual(tools.get_terminal_size(80), 80)

import copy

from bytecase.lib.ascii import (
    AsciiLowercase,
    AsciiTitlecase,
    AsciiUppercase,
    make_ascii_lowercase,
    make_ascii_titlecase,
    make_ascii_uppercase,
    to_ascii_lowercase,
    to_ascii_titlecase,
    to_ascii_uppercase,
)

from .. import TestBase


class TestAsciiHelpers(TestBase):

    def test_in_place(self):
        data = bytearray(B'Hello, World! \xC3\x84')
        make_ascii_lowercase(data)
        self.assertEqual(data, B'hello, world! \xC3\x84')
        make_ascii_uppercase(data)
        self.assertEqual(data, B'HELLO, WORLD! \xC3\x84')
        make_ascii_titlecase(data)
        self.assertEqual(data, B'Hello, world! \xC3\x84')

    def test_copies(self):
        data = B'aBC, 123, ABC'
        self.assertEqual(to_ascii_lowercase(data), B'abc, 123, abc')
        self.assertEqual(to_ascii_uppercase(data), B'ABC, 123, ABC')
        self.assertEqual(to_ascii_titlecase(data), B'Abc, 123, abc')
        self.assertEqual(data, B'aBC, 123, ABC')
        self.assertIsInstance(to_ascii_lowercase(data), bytearray)

    def test_non_ascii_letters_unaffected(self):
        self.assertEqual(to_ascii_lowercase('ÀBÇ').decode('utf8'), 'ÀbÇ')
        self.assertEqual(to_ascii_uppercase('straße').decode('utf8'), 'STRAßE')

    def test_idempotent(self):
        for _ in range(10):
            data = self.generate_random_buffer(100)
            for convert in (to_ascii_lowercase, to_ascii_uppercase, to_ascii_titlecase):
                once = convert(data)
                self.assertEqual(convert(once), once)
                self.assertEqual(len(once), len(data))


class TestAsciiIterators(TestBase):

    def test_forward(self):
        self.assertEqual(bytes(AsciiLowercase(B'ABC\xFFxyz')), B'abc\xFFxyz')
        self.assertEqual(bytes(AsciiUppercase(B'ABC\xFFxyz')), B'ABC\xFFXYZ')
        self.assertEqual(bytes(AsciiTitlecase(B'aBC, 123, ABC')), B'Abc, 123, abc')

    def test_agrees_with_helpers(self):
        for _ in range(10):
            data = self.generate_random_buffer(100)
            self.assertEqual(AsciiLowercase(data).collect(), to_ascii_lowercase(data))
            self.assertEqual(AsciiUppercase(data).collect(), to_ascii_uppercase(data))
            self.assertEqual(AsciiTitlecase(data).collect(), to_ascii_titlecase(data))

    def test_backward(self):
        self.assertEqual(bytes(reversed(AsciiUppercase(B'abc'))), B'CBA')
        self.assertEqual(bytes(reversed(AsciiTitlecase(B'abc'))), B'cbA')

    def test_interleaved(self):
        it = AsciiTitlecase(B'abc')
        self.assertEqual(next(it), 0x41)
        self.assertEqual(it.next_back(), 0x63)
        self.assertEqual(next(it), 0x62)
        self.assertIsNone(it.next_back())
        self.assertIsNone(next(it, None))

    def test_titlecase_from_the_back_only(self):
        it = AsciiTitlecase(B'abc')
        self.assertEqual([it.next_back(), it.next_back(), it.next_back()], [0x63, 0x62, 0x41])
        self.assertIsNone(it.next_back())

    def test_length(self):
        it = AsciiLowercase(B'ABCDE')
        self.assertEqual(len(it), 5)
        next(it)
        it.next_back()
        self.assertEqual(len(it), 3)
        self.assertEqual(it.size_hint(), (3, 3))
        self.assertEqual(it.count(), 3)
        self.assertEqual(len(it), 0)
        self.assertEqual(it.size_hint(), (0, 0))

    def test_copy_is_independent(self):
        it = AsciiUppercase(B'abc')
        next(it)
        clone = copy.copy(it)
        self.assertEqual(bytes(it), B'BC')
        self.assertEqual(bytes(clone), B'BC')

    def test_repr(self):
        it = AsciiTitlecase(B'ab')
        self.assertEqual(repr(it), "AsciiTitlecase(slice=b'ab', beginning=True)")
        next(it)
        self.assertEqual(repr(it), "AsciiTitlecase(slice=b'b', beginning=False)")
        self.assertEqual(repr(AsciiLowercase(B'x')), "AsciiLowercase(slice=b'x')")

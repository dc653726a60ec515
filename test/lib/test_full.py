import copy
import operator
import random

from bytecase.lib.full import FullLowercase, FullTitlecase, FullUppercase

from .. import TestBase


def random_text(size):
    def codepoint():
        while True:
            c = random.randrange(0x110000)
            if not 0xD800 <= c <= 0xDFFF:
                return chr(c)
    return ''.join(codepoint() for _ in range(size))


class TestFullCaseMapping(TestBase):

    def test_lowercase_simple(self):
        self.assertEqual(bytes(FullLowercase(B'ABC xyz')), B'abc xyz')

    def test_invalid_bytes_pass_through(self):
        self.assertEqual(bytes(FullLowercase(B'ABC\xFF\xFEXYZ')), B'abc\xff\xfexyz')
        self.assertEqual(bytes(FullUppercase(B'\xC0\xAFabc')), B'\xC0\xAFABC')

    def test_truncated_sequence_before_letter(self):
        data = B'aB\xF0\x9F\x87Yz'
        self.assertEqual(bytes(FullLowercase(data)), B'ab\xF0\x9F\x87yz')
        self.assertEqual(bytes(FullUppercase(data)), B'AB\xF0\x9F\x87YZ')
        self.assertEqual(bytes(FullTitlecase(data)), B'Ab\xF0\x9F\x87yz')

    def test_string_input(self):
        self.assertEqual(bytes(FullUppercase('straße')), 'STRASSE'.encode('utf8'))

    def test_capital_i_with_dot(self):
        self.assertEqual(list(FullLowercase('İ')), [105, 204, 135])

    def test_digraphs(self):
        self.assertEqual(bytes(FullLowercase('ǅ')).decode('utf8'), 'ǆ')
        self.assertEqual(bytes(FullUppercase('ǅ')).decode('utf8'), 'Ǆ')
        self.assertEqual(bytes(FullTitlecase('ǆemal')).decode('utf8'), 'ǅemal')

    def test_growing_and_shrinking(self):
        self.assertEqual(bytes(FullLowercase('ZȺȾ')).decode('utf8'), 'zⱥⱦ')
        self.assertEqual(bytes(FullLowercase('K')), B'k')

    def test_titlecase(self):
        self.assertEqual(bytes(FullTitlecase('ZȺȾ')).decode('utf8'), 'Zⱥⱦ')
        self.assertEqual(bytes(FullTitlecase('Αύριο')).decode('utf8'), 'Αύριο')
        self.assertEqual(bytes(FullTitlecase('ﬃx')).decode('utf8'), 'Ffix')
        self.assertEqual(bytes(FullTitlecase(B'aBC, 123, ABC')), B'Abc, 123, abc')

    def test_titlecase_skips_invalid_prefix(self):
        self.assertEqual(bytes(FullTitlecase(B'\xFF\xFEabc')), B'\xFF\xFEAbc')

    def test_agrees_with_python_lowercase(self):
        for _ in range(20):
            sample = random_text(100)
            expected = ''.join(c.lower() for c in sample)
            self.assertEqual(bytes(FullLowercase(sample)).decode('utf8'), expected)

    def test_agrees_with_python_uppercase(self):
        for _ in range(20):
            sample = random_text(100)
            expected = ''.join(c.upper() for c in sample)
            self.assertEqual(bytes(FullUppercase(sample)).decode('utf8'), expected)

    def test_agrees_with_python_titlecase(self):
        for _ in range(20):
            sample = random_text(100)
            expected = sample[0].title() + ''.join(c.lower() for c in sample[1:])
            self.assertEqual(bytes(FullTitlecase(sample)).decode('utf8'), expected)

    def test_fused(self):
        it = FullUppercase(B'a')
        self.assertEqual(next(it), 0x41)
        for _ in range(3):
            with self.assertRaises(StopIteration):
                next(it)

    def test_empty(self):
        it = FullLowercase(B'')
        self.assertEqual(it.size_hint(), (0, 0))
        self.assertEqual(it.count(), 0)
        self.assertEqual(it.collect(), bytearray())


class TestFullSizeHint(TestBase):

    def test_size_hints(self):
        self.assertEqual(FullLowercase(B'abc, \xFF\xFE, xyz').size_hint(), (3, 144))
        self.assertEqual(FullLowercase('�').size_hint(), (1, 36))
        self.assertEqual(FullLowercase('Έτος').size_hint(), (2, 96))
        self.assertEqual(FullLowercase('ZȺȾ').size_hint(), (2, 60))
        self.assertEqual(FullLowercase(B'abc').size_hint(), (3, 3))
        self.assertEqual(FullLowercase(B'').size_hint(), (0, 0))

    def test_length_hint(self):
        self.assertEqual(operator.length_hint(FullUppercase(B'abc')), 3)
        self.assertEqual(operator.length_hint(FullUppercase('ZȺȾ')), 2)

    def test_buffered_bytes_are_exact(self):
        it = FullUppercase('ßab')
        self.assertEqual(next(it), 0x53)
        self.assertEqual(it.size_hint(), (3, 3))
        it = FullLowercase('ZȺȾ')
        next(it)
        next(it)
        self.assertEqual(it.size_hint(), (3, 26))

    def _assert_sound(self, it):
        while True:
            low, high = it.size_hint()
            actual = copy.copy(it).count()
            self.assertLessEqual(low, actual)
            self.assertGreaterEqual(high, actual)
            if next(it, None) is None:
                break

    def test_sound_at_every_step(self):
        for data in [
            B'abc, \xFF\xFE, xyz',
            'Έτος'.encode('utf8'),
            'ZȺȾ'.encode('utf8'),
            'KKKK'.encode('utf8'),
            'ΐﬃß'.encode('utf8'),
            B'\xF0\x9F\x87Y',
        ]:
            self._assert_sound(FullLowercase(data))
            self._assert_sound(FullUppercase(data))
            self._assert_sound(FullTitlecase(data))

    def test_sound_on_random_input(self):
        for _ in range(10):
            data = self.generate_random_buffer(64)
            self._assert_sound(FullLowercase(data))
            self._assert_sound(FullUppercase(data))
        for _ in range(10):
            self._assert_sound(FullTitlecase(random_text(16)))


class TestFullCount(TestBase):

    def test_count(self):
        self.assertEqual(FullLowercase('ZȺȾ').count(), 7)
        self.assertEqual(FullLowercase(B'\xFF\xFE' + 'Έτος'.encode('utf8')).count(), 10)
        self.assertEqual(FullUppercase(B'abc').count(), 3)

    def test_count_after_partial_consumption(self):
        it = FullUppercase('ßab')
        next(it)
        self.assertEqual(it.count(), 3)
        self.assertIsNone(next(it, None))

    def test_count_consumes(self):
        it = FullLowercase('ZȺȾ')
        it.count()
        self.assertEqual(it.collect(), bytearray())

    def test_count_matches_collect(self):
        for _ in range(10):
            data = self.generate_random_buffer(100)
            self.assertEqual(FullUppercase(data).count(), len(FullUppercase(data).collect()))


class TestFullCopy(TestBase):

    def test_copy_is_independent(self):
        it = FullUppercase('ßﬃ')
        next(it)
        clone = copy.copy(it)
        rest = bytes(it)
        self.assertEqual(rest, B'SFFI')
        self.assertEqual(bytes(clone), rest)

    def test_copy_of_titlecase_keeps_state(self):
        it = FullTitlecase(B'abc')
        next(it)
        clone = copy.copy(it)
        self.assertEqual(bytes(clone), B'bc')

    def test_repr(self):
        it = FullUppercase(B'ab')
        self.assertEqual(next(it), 0x41)
        self.assertEqual(repr(it), (
            "FullUppercase(slice=b'b', next_bytes=[65, 0, 0, 0], next_range=range(1, 1), pending=None)"))
        it = FullTitlecase(B'ab')
        self.assertIn('beginning=True', repr(it))
        next(it)
        self.assertIn('beginning=False', repr(it))

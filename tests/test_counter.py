import unittest
from powsearch.counter import increment, count_leading_zero_bits


class TestIncrement(unittest.TestCase):

    def test_increment(self):
        buf = bytearray([0, 0])
        increment(buf)
        self.assertEqual(buf, bytearray([1, 0]))
        buf = bytearray([255, 3, 9])
        increment(buf)
        self.assertEqual(buf, bytearray([0, 4, 9]))
        buf = bytearray([255, 255, 7])
        increment(buf)
        self.assertEqual(buf, bytearray([0, 0, 8]))

    def test_all_ones_wraps_to_zero(self):
        for length in [1, 2, 5, 32]:
            buf = bytearray([255] * length)
            increment(buf)
            self.assertEqual(buf, bytearray(length))

    def test_empty_buffer(self):
        buf = bytearray()
        increment(buf)
        self.assertEqual(buf, bytearray())

    def test_full_cycle(self):
        for initial in [b'\x00', b'\x7f', b'\xff', b'\x12\x34']:
            buf = bytearray(initial)
            for _ in range(256 ** len(initial)):
                increment(buf)
            self.assertEqual(bytes(buf), initial)

    def test_increment_matches_integer(self):
        buf = bytearray(b'\xfe\x01')
        for i in range(1000):
            expect = (0x01fe + i) % 65536
            self.assertEqual(int.from_bytes(buf, 'little'), expect)
            increment(buf)


class TestLeadingZeroBits(unittest.TestCase):

    def test_all_zero(self):
        for length in [0, 1, 2, 20, 32, 64]:
            self.assertEqual(count_leading_zero_bits(bytes(length)), 8 * length)

    def test_least_significant_bit_set(self):
        for length in [1, 2, 32]:
            self.assertEqual(count_leading_zero_bits(b'\x01' + bytes(length - 1)), 0)
            self.assertEqual(count_leading_zero_bits(b'\xff' * length), 0)

    def test_counts_from_low_bit_upward(self):
        self.assertEqual(count_leading_zero_bits(b'\x80'), 7)
        self.assertEqual(count_leading_zero_bits(b'\x10'), 4)
        self.assertEqual(count_leading_zero_bits(b'\x00\x01'), 8)
        self.assertEqual(count_leading_zero_bits(b'\x00\x00\x04\xff'), 18)
        self.assertEqual(count_leading_zero_bits(b'\x00\x80'), 15)

    def test_high_bits_of_last_byte_ignored_after_first_one(self):
        self.assertEqual(count_leading_zero_bits(b'\x02\x00\x00'), 1)
        self.assertEqual(count_leading_zero_bits(b'\x00\x00\x00\x00\x00\x00\x00\x00\x03'), 64)

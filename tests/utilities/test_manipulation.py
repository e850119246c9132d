from arx.utilities.manipulation import left_rotate, get_blocks, xor_buffs, words_to_bytes
import unittest


class ManipulationTestCase(unittest.TestCase):
    def test_left_rotate(self):
        self.assertEqual(left_rotate(0x80000000, 1), 0x00000001)
        self.assertEqual(left_rotate(0x7998bfda, 7), 0xcc5fed3c)
        self.assertEqual(left_rotate(0x12345678, 16), 0x56781234)
        self.assertEqual(left_rotate(0x12345678, 0), 0x12345678)
        self.assertEqual(left_rotate(0x81, 1, bits=8), 0x03)


    def test_get_blocks(self):
        self.assertEqual(get_blocks(b'abcdefg', 3), [b'abc', b'def', b'g'])
        self.assertEqual(get_blocks(b'', 4), [])
        self.assertRaises(ValueError, get_blocks, b'abcdefg', 3, False)


    def test_xor_buffs(self):
        self.assertEqual(xor_buffs(b'\x0f\xf0\xff', b'\xff\xff'), b'\xf0\x0f')


    def test_words_little_endian(self):
        self.assertEqual(words_to_bytes([0x61707865, 0x3120646e, 0x79622d36, 0x6b206574]), b'expand 16-byte k')
        self.assertEqual(words_to_bytes([2**32 + 1]), b'\x01\x00\x00\x00')

from arx.utilities.bytes import Bytes
import unittest


class BytesTestCase(unittest.TestCase):
    def test_wrap(self):
        b = Bytes(b'abc')
        self.assertIs(Bytes.wrap(b), b)
        self.assertEqual(Bytes.wrap(b'abc'), b)
        self.assertEqual(Bytes.wrap([97, 98, 99]), b)
        self.assertRaises(TypeError, Bytes.wrap, 'abc')
        self.assertRaises(TypeError, Bytes.wrap, 32)
        self.assertRaises(TypeError, Bytes.wrap, True)


    def test_slicing_keeps_type(self):
        b = Bytes(b'abcdef')
        self.assertIsInstance(b[1:3], Bytes)
        self.assertEqual(b[0], 97)
        self.assertIsInstance(b + b'g', Bytes)
        self.assertIsInstance(b'g' + b, Bytes)


    def test_xor(self):
        self.assertEqual(Bytes(b'\x01\x02') ^ b'\x03\x03', b'\x02\x01')
        self.assertEqual(b'\x03\x03' ^ Bytes(b'\x01\x02'), b'\x02\x01')
        self.assertIsInstance(Bytes(b'\x01') ^ b'\x01', Bytes)


    def test_chunk(self):
        self.assertEqual(Bytes(b'abcdefgh').chunk(4), [b'abcd', b'efgh'])
        self.assertRaises(ValueError, Bytes(b'abcdefg').chunk, 4)
        self.assertEqual(Bytes(b'abcdefg').chunk(4, allow_partials=True), [b'abcd', b'efg'])


    def test_int(self):
        self.assertEqual(Bytes(b'\x01\x00\x00\x00').int(), 1)
        self.assertEqual(Bytes(b'\x00\x01').int(), 256)

        self.assertEqual([word.int() for word in Bytes(b'expand 32-byte k').chunk(4)], [0x61707865, 0x3320646e, 0x79622d32, 0x6b206574])

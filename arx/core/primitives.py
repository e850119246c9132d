from arx.core.base_object import BaseObject
from arx.core.metadata import SizeType, SizeSpec, EphemeralSpec, EphemeralType, FrequencyType
from arx.utilities.bytes import Bytes


class Primitive(BaseObject):
    KEY_SIZE        = SizeSpec(size_type=SizeType.NA)
    INPUT_SIZE      = SizeSpec(size_type=SizeType.NA)
    OUTPUT_SIZE     = SizeSpec(size_type=SizeType.NA)
    BLOCK_SIZE      = SizeSpec(size_type=SizeType.NA)
    EPHEMERAL       = EphemeralSpec(ephemeral_type=EphemeralType.NONCE, size=SizeSpec(size_type=SizeType.NA))
    USAGE_FREQUENCY = FrequencyType.NORMAL


    def __init__(self, *args, **kwargs):
        pass



class StreamCipher(Primitive):
    """
    Base class for keystream generators. Encryption and decryption are the same
    operation: XOR with the keystream.
    """

    def generate(self, length: int) -> Bytes:
        raise NotImplementedError()


    def encrypt(self, plaintext: bytes) -> Bytes:
        """
        Encrypts `plaintext` by XOR'ing it with the next `len(plaintext)` bytes of keystream.

        Parameters:
            plaintext (bytes): Bytes-like object to be encrypted.

        Returns:
            Bytes: Resulting ciphertext.
        """
        plaintext = Bytes.wrap(plaintext)
        return plaintext ^ self.generate(len(plaintext))


    def decrypt(self, ciphertext: bytes) -> Bytes:
        """
        Decrypts `ciphertext` by XOR'ing it with the next `len(ciphertext)` bytes of keystream.

        Parameters:
            ciphertext (bytes): Bytes-like object to be decrypted.

        Returns:
            Bytes: Resulting plaintext.
        """
        return self.encrypt(ciphertext)

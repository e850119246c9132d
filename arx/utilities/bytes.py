from arx.utilities.manipulation import xor_buffs, get_blocks


class Bytes(bytearray):
    """
    Bytearray that returns `Bytes` from slicing, concatenation and XOR. Integer
    conversion is little-endian, matching the word order used by the ARX ciphers.
    """

    def __repr__(self):
        return f'<Bytes: {bytes(self)}>'


    def __str__(self):
        return self.__repr__()


    @staticmethod
    def wrap(obj: object) -> 'Bytes':
        """
        Coerces `obj` into `Bytes`. Returns `obj` unchanged if it already is.

        Parameters:
            obj (object): Bytes-like object or iterable of ints.

        Returns:
            Bytes: Wrapped object.
        """
        if type(obj) is Bytes:
            return obj

        if isinstance(obj, str):
            raise TypeError("Cannot wrap 'str'; encode it first")

        if isinstance(obj, int):
            raise TypeError(f"Cannot wrap '{type(obj).__name__}'; expected a bytes-like object")

        return Bytes(obj)


    def __getitem__(self, idx):
        result = bytearray.__getitem__(self, idx)
        if isinstance(idx, slice):
            result = Bytes(result)

        return result


    def __add__(self, other):
        return Bytes(bytes(self) + bytes(other))


    def __radd__(self, other):
        return Bytes(bytes(other) + bytes(self))


    def __xor__(self, other):
        return Bytes(xor_buffs(self, other))


    __rxor__ = __xor__


    def chunk(self, size: int, allow_partials: bool=False) -> list:
        """
        Splits into chunks of `size`.

        Parameters:
            size            (int): Chunk size.
            allow_partials (bool): Whether or not to allow a short final chunk.

        Returns:
            list: List of `Bytes`.
        """
        return [Bytes(block) for block in get_blocks(self, size, allow_partials=allow_partials)]


    def int(self) -> int:
        """
        Little-endian integer value.

        Returns:
            int: Integer.
        """
        return int.from_bytes(self, 'little')


MASK32 = 2**32-1


def left_rotate(x: int, amount: int, bits: int=32) -> int:
    """
    Performs a left-rotate on `x` within a `bits`-wide word.

    Parameters:
        x      (int): Integer to rotate.
        amount (int): Amount to rotate by.
        bits   (int): Bit-space of the word.

    Returns:
        int: Rotated integer.
    """
    mask    = 2**bits - 1
    amount %= bits
    return ((x << amount) | (x >> (bits - amount))) & mask



def get_blocks(buffer: bytes, block_size: int, allow_partials: bool=True) -> list:
    """
    Splits `buffer` into blocks of `block_size`.

    Parameters:
        buffer         (bytes): Bytes-like object to split.
        block_size       (int): Size of each block.
        allow_partials  (bool): Whether or not to keep a short final block.

    Returns:
        list: List of blocks.
    """
    blocks = [buffer[i:i + block_size] for i in range(0, len(buffer), block_size)]

    if not allow_partials and blocks and len(blocks[-1]) != block_size:
        raise ValueError(f"Buffer length {len(buffer)} is not a multiple of {block_size}")

    return blocks



def xor_buffs(buf1: bytes, buf2: bytes) -> bytes:
    """
    XORs two bytes-like objects together. The result is as long as the shorter one.

    Parameters:
        buf1 (bytes): First buffer.
        buf2 (bytes): Second buffer.

    Returns:
        bytes: XOR'd buffer.
    """
    return bytes(a ^ b for a, b in zip(buf1, buf2))



def words_to_bytes(words: list) -> bytes:
    """
    Encodes 32-bit `words` as little-endian bytes.

    Parameters:
        words (list): Integers to encode; each is reduced modulo 2**32.

    Returns:
        bytes: Encoded words.
    """
    return b''.join(int.to_bytes(word & MASK32, 4, 'little') for word in words)

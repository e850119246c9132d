from arx.utilities.manipulation import left_rotate, words_to_bytes, MASK32
from arx.utilities.bytes import Bytes
from arx.utilities.exceptions import WrongKeyLength, WrongNonceLength, InvalidRounds, CounterExhausted
from arx.core.metadata import SizeType, SizeSpec, EphemeralSpec, EphemeralType, FrequencyType
from arx.core.primitives import StreamCipher, Primitive
from arx.ace.decorators import register_primitive

import logging
log = logging.getLogger(__name__)

SIGMA = b"expand 32-byte k"
TAU   = b"expand 16-byte k"

VALID_ROUNDS         = (8, 12, 20)
KEYSTREAM_BLOCK_SIZE = 64
MAX_COUNTER          = 2**64-1

COLUMN_ROUND = (
    (0, 4,  8, 12),
    (1, 5,  9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15)
)

DIAGONAL_ROUND = (
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7,  8, 13),
    (3, 4,  9, 14)
)


def QUARTER_ROUND(a: int, b: int, c: int, d: int) -> tuple:
    """
    ChaCha quarter round. All additions are modulo 2**32.

    Parameters:
        a (int): First word.
        b (int): Second word.
        c (int): Third word.
        d (int): Fourth word.

    Returns:
        tuple: Mixed words `(a, b, c, d)`.
    """
    a = (a + b) & MASK32; d = left_rotate(d ^ a, 16)
    c = (c + d) & MASK32; b = left_rotate(b ^ c, 12)
    a = (a + b) & MASK32; d = left_rotate(d ^ a,  8)
    c = (c + d) & MASK32; b = left_rotate(b ^ c,  7)
    return a, b, c, d



def quarter_round(x: list, a: int, b: int, c: int, d: int):
    """
    Applies the quarter round in-place to the words of `x` at indices `a`, `b`, `c` and `d`.

    Parameters:
        x (list): 16-word working array.
        a  (int): Index of the first word.
        b  (int): Index of the second word.
        c  (int): Index of the third word.
        d  (int): Index of the fourth word.
    """
    x[a], x[b], x[c], x[d] = QUARTER_ROUND(x[a], x[b], x[c], x[d])



@register_primitive()
class ChaCha(StreamCipher):
    """
    ChaCha stream cipher with a 64-bit nonce and a 64-bit block counter.

    Add-rotate-xor (ARX) structure.

    References:
        https://cr.yp.to/chacha/chacha-20080128.pdf
        https://tools.ietf.org/html/draft-strombergson-chacha-test-vectors-00
    """

    USAGE_FREQUENCY = FrequencyType.PROLIFIC
    KEY_SIZE        = SizeSpec(size_type=SizeType.RANGE, sizes=[128, 256])
    EPHEMERAL       = EphemeralSpec(ephemeral_type=EphemeralType.NONCE, size=SizeSpec(size_type=SizeType.SINGLE, sizes=64))
    BLOCK_SIZE      = SizeSpec(size_type=SizeType.SINGLE, sizes=KEYSTREAM_BLOCK_SIZE*8)

    def __init__(self, key: bytes, nonce: bytes, rounds: int=20):
        """
        Parameters:
            key    (bytes): Key (128 or 256 bits).
            nonce  (bytes): Nonce (8 bytes). Must never repeat under the same key.
            rounds   (int): Number of rounds to perform (8, 12 or 20).
        """
        Primitive.__init__(self)

        if type(rounds) is not int or rounds not in VALID_ROUNDS:
            raise InvalidRounds(f"Rounds must be one of {VALID_ROUNDS}, not {rounds!r}")

        self.rounds     = rounds
        self.state      = [0] * 16
        self._exhausted = False
        self.initialize(key, nonce)


    def __reprdir__(self):
        return ['rounds', 'counter']


    def initialize(self, key: bytes, nonce: bytes):
        """
        Loads the constants, key and nonce into the state and resets the block counter.
        Re-initializing with a nonce already used under `key` reuses keystream.

        Parameters:
            key   (bytes): Key (128 or 256 bits).
            nonce (bytes): Nonce (8 bytes).
        """
        key   = Bytes.wrap(key)
        nonce = Bytes.wrap(nonce)

        if len(key)*8 not in self.KEY_SIZE:
            raise WrongKeyLength(f"Key must be one of {self.KEY_SIZE.byte_sizes} bytes, not {len(key)}")

        if len(nonce)*8 not in self.EPHEMERAL.size:
            raise WrongNonceLength(f"Nonce must be {self.EPHEMERAL.size.byte_sizes[0]} bytes, not {len(nonce)}")

        key_words = [word.int() for word in key.chunk(4)]

        if len(key) == 32:
            constant  = SIGMA
        else:
            constant  = TAU
            key_words = key_words * 2

        const_words = [word.int() for word in Bytes(constant).chunk(4)]
        nonce_words = [word.int() for word in nonce.chunk(4)]

        self.key   = key
        self.nonce = nonce
        self.state = [*const_words, *key_words, 0, 0, *nonce_words]
        self._exhausted = False

        log.debug(f"Initialized ChaCha{self.rounds} with {len(key)*8}-bit key")


    @property
    def counter(self) -> int:
        return (self.state[13] << 32) | self.state[12]


    @counter.setter
    def counter(self, value: int):
        if not 0 <= value <= MAX_COUNTER:
            raise ValueError(f"Block counter must be in [0, 2**64), not {value}")

        self.state[12]  = value & MASK32
        self.state[13]  = value >> 32
        self._exhausted = False


    @property
    def exhausted(self) -> bool:
        return self._exhausted


    @property
    def remaining_blocks(self) -> int:
        if self._exhausted:
            return 0

        return MAX_COUNTER - self.counter + 1


    def state_words(self) -> list:
        """
        Returns:
            list: Copy of the 16 state words.
        """
        return list(self.state)


    def permute(self, state: list) -> list:
        """
        Runs `rounds` rounds over a copy of `state`, alternating column and diagonal
        rounds, then adds the original state back in (feed-forward).

        Parameters:
            state (list): 16-word input state.

        Returns:
            list: 16 output words.
        """
        x = list(state)

        for _ in range(self.rounds // 2):
            for a, b, c, d in COLUMN_ROUND:
                quarter_round(x, a, b, c, d)

            for a, b, c, d in DIAGONAL_ROUND:
                quarter_round(x, a, b, c, d)

        return [(x_i + s_i) & MASK32 for x_i, s_i in zip(x, state)]


    @staticmethod
    def serialize_words(words: list) -> Bytes:
        """
        Serializes words into little-endian bytes.

        Parameters:
            words (list): Words to serialize.

        Returns:
            Bytes: Serialized words.
        """
        return Bytes(words_to_bytes(words))


    def full_round(self, block_num: int, state: list=None) -> Bytes:
        """
        Produces the keystream block for counter value `block_num` without touching the stream counter.

        Parameters:
            block_num  (int): Block counter value.
            state     (list): Custom state to be directly injected.

        Returns:
            Bytes: 64-byte keystream block.
        """
        if not 0 <= block_num <= MAX_COUNTER:
            raise ValueError(f"Block number must be in [0, 2**64), not {block_num}")

        x     = list(state or self.state)
        x[12] = block_num & MASK32
        x[13] = block_num >> 32
        return self.serialize_words(self.permute(x))


    def yield_state(self, start_chunk: int=0, num_chunks: int=1, state: list=None):
        """
        Generates `num_chunks` chunks of keystream starting from `start_chunk`.

        Parameters:
            start_chunk (int): Chunk number to start at.
            num_chunks  (int): Desired number of 64-byte keystream chunks.
            state      (list): Custom state to be directly injected.

        Returns:
            generator: Keystream chunks.
        """
        for iteration in range(start_chunk, start_chunk + num_chunks):
            yield self.full_round(iteration, state=state)


    def next_block(self) -> Bytes:
        """
        Produces the keystream block for the current counter and advances the counter,
        carrying from the low word into the high word.

        Returns:
            Bytes: 64-byte keystream block.
        """
        if self._exhausted:
            raise CounterExhausted("Block counter exhausted; re-initialize with a fresh nonce")

        keystream = self.serialize_words(self.permute(self.state))

        self.state[12] = (self.state[12] + 1) & MASK32
        if not self.state[12]:
            self.state[13] = (self.state[13] + 1) & MASK32

            if not self.state[13]:
                self._exhausted = True
                log.warning("ChaCha block counter wrapped; no further keystream is available for this nonce")

        return keystream


    @staticmethod
    def apply_keystream(data: bytes, keystream: bytes) -> Bytes:
        """
        XORs `data` with `keystream`. A keystream longer than `data` is truncated, so
        a short final block can be handled with a full keystream block.

        Parameters:
            data      (bytes): Data block.
            keystream (bytes): Keystream block.

        Returns:
            Bytes: Transformed data.
        """
        if len(keystream) < len(data):
            raise ValueError(f"Keystream ({len(keystream)} bytes) is shorter than data ({len(data)} bytes)")

        return Bytes.wrap(data) ^ Bytes.wrap(keystream)[:len(data)]


    def transform_block(self, data: bytes) -> Bytes:
        """
        Encrypts or decrypts one 64-byte block with the next keystream block.

        Parameters:
            data (bytes): 64-byte block.

        Returns:
            Bytes: Transformed block.
        """
        if len(data) != KEYSTREAM_BLOCK_SIZE:
            raise ValueError(f"Block must be {KEYSTREAM_BLOCK_SIZE} bytes, not {len(data)}")

        return self.apply_keystream(data, self.next_block())


    def generate(self, length: int) -> Bytes:
        """
        Generates `length` bytes of keystream. Whole blocks are consumed; the unused
        tail of the last block is discarded. Raises `CounterExhausted` without
        advancing the counter if fewer blocks remain than `length` needs.

        Parameters:
            length (int): Desired length of keystream in bytes.

        Returns:
            Bytes: Keystream.
        """
        num_chunks = -(-length // KEYSTREAM_BLOCK_SIZE)

        if num_chunks > self.remaining_blocks:
            raise CounterExhausted(f"{num_chunks} blocks requested but only {self.remaining_blocks} remain for this nonce")

        keystream = Bytes(b''.join(self.next_block() for _ in range(num_chunks)))
        return keystream[:length]

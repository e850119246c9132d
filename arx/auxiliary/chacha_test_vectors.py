from arx.stream_ciphers.chacha import ChaCha, VALID_ROUNDS, KEYSTREAM_BLOCK_SIZE
from arx.utilities.runtime import RUNTIME
from arx.utilities.bytes import Bytes
import argparse
import logging
import sys

log = logging.getLogger(__name__)

KEY_LENGTHS = (128, 256)


class VectorCase(object):
    def __init__(self, name: str, description: str, key: bytes, iv: bytes):
        self.name        = name
        self.description = description
        self.key         = Bytes.wrap(key)
        self.iv          = Bytes.wrap(iv)


    def __repr__(self):
        return f"<VectorCase: name={self.name}, description={self.description!r}>"


    def __str__(self):
        return self.__repr__()



class KeystreamVector(object):
    """
    Keystream produced for one (key length, rounds) configuration of a test case.
    """

    def __init__(self, key_bits: int, rounds: int, key: bytes, iv: bytes, state: list, blocks: list):
        self.key_bits = key_bits
        self.rounds   = rounds
        self.key      = key
        self.iv       = iv
        self.state    = state
        self.blocks   = blocks


    def __repr__(self):
        return f"<KeystreamVector: key_bits={self.key_bits}, rounds={self.rounds}, block0={self.blocks[0].hex()}>"


    def __str__(self):
        return self.__repr__()



TEST_CASES = [
    VectorCase('TC1', "All zero key and IV.", bytes(32), bytes(8)),
    VectorCase('TC2', "Single bit in key set. All zero IV.", b'\x01' + bytes(31), bytes(8)),
    VectorCase('TC3', "Single bit in IV set. All zero key.", bytes(32), b'\x01' + bytes(7)),
    VectorCase('TC4', "All bits in key and IV are set.", b'\xff' * 32, b'\xff' * 8),
    VectorCase('TC5', "Every even bit set in key and IV.", b'\x55' * 32, b'\x55' * 8),
    VectorCase('TC6', "Every odd bit set in key and IV.", b'\xaa' * 32, b'\xaa' * 8),
    VectorCase(
        'TC7', "Sequence patterns in key and IV.",
        bytes.fromhex('00112233445566778899aabbccddeeffffeeddccbbaa99887766554433221100'),
        bytes.fromhex('0f1e2d3c4b5a6978')
    ),
    VectorCase(
        'TC8', "key: 'All your base are belong to us!, IV: 'IETF2013'",
        bytes.fromhex('c46ec1b18ce8a878725a37e780dfb7351f68ed2e194c79fbc6aebee1a667975d'),
        bytes.fromhex('1ada31d5cf688221')
    )
]


def get_test_case(name: str) -> VectorCase:
    for case in TEST_CASES:
        if case.name == name.upper():
            return case

    raise KeyError(f"Unknown test case {name!r}")



def generate_test_vectors(key: bytes, iv: bytes, num_blocks: int=2) -> list:
    """
    Generates keystream for every key length and round count. A 128-bit
    configuration uses the first 16 bytes of `key`.

    Parameters:
        key      (bytes): 32-byte key.
        iv       (bytes): 8-byte IV.
        num_blocks (int): Number of consecutive blocks per configuration.

    Returns:
        list: `KeystreamVector` records, 128-bit configurations first.
    """
    key     = Bytes.wrap(key)
    data    = Bytes(KEYSTREAM_BLOCK_SIZE)
    vectors = []

    configs = [(key_bits, rounds) for key_bits in KEY_LENGTHS for rounds in VALID_ROUNDS]
    for key_bits, rounds in RUNTIME.report_progress(configs, desc="Configurations", unit='config'):
        cipher = ChaCha(key[:key_bits // 8], iv, rounds=rounds)
        state  = cipher.state_words()
        blocks = [cipher.transform_block(data) for _ in range(num_blocks)]

        log.debug(f"Generated {num_blocks} blocks for {key_bits}-bit key, {rounds} rounds")
        vectors.append(KeystreamVector(key_bits, rounds, cipher.key, cipher.nonce, state, blocks))

    return vectors



def format_state(state: list) -> str:
    lines = []
    for i in range(0, 16, 2):
        lines.append(f"state[{i:02d} - {i+1:02d}] = 0x{state[i]:08x} 0x{state[i+1]:08x}")

    return '\n'.join(lines) + '\n'



def format_block(block: bytes) -> str:
    lines = []
    for i in range(0, len(block), 8):
        lines.append(''.join(f"0x{b:02x} " for b in block[i:i+8]))

    return '\n'.join(lines) + '\n'



def format_key_iv(key: bytes, iv: bytes) -> str:
    key_lines = []
    for i in range(0, len(key), 8):
        key_lines.append(''.join(f"0x{b:02x} " for b in key[i:i+8]))

    key_str = "Key:    " + "\n        ".join(key_lines)
    iv_str  = "IV:     " + ''.join(f"0x{b:02x} " for b in iv)
    return f"{key_str}\n{iv_str}\n"



def format_test_vector(vector: KeystreamVector) -> str:
    """
    Renders a `KeystreamVector` as key/IV, rounds, initial state, and keystream blocks.

    Parameters:
        vector (KeystreamVector): Vector to render.

    Returns:
        str: Rendered vector.
    """
    parts = [
        format_key_iv(vector.key, vector.iv),
        f"Rounds: {vector.rounds}\n\n",
        "Internal state after init:\n",
        format_state(vector.state),
        "\n"
    ]

    for idx, block in enumerate(vector.blocks):
        parts.append(f"Keystream block {idx}:\n")
        parts.append(format_block(block))

    parts.append("\n")
    return ''.join(parts)



def format_test_case(case: VectorCase) -> str:
    title = f"{case.name}: {case.description}"
    parts = [title, '\n', '-' * len(title), '\n']
    parts.extend(format_test_vector(vector) for vector in generate_test_vectors(case.key, case.iv))
    return ''.join(parts)



def main(argv: list=None) -> int:
    parser = argparse.ArgumentParser(description="Test vectors for the ChaCha stream cipher")
    parser.add_argument('--case', action='append', help="Only print the named test case (e.g. TC1). May be repeated.")
    parser.add_argument('--progress', action='store_true', help="Show a progress bar while generating.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    RUNTIME.show_progress = args.progress

    try:
        cases = [get_test_case(name) for name in args.case] if args.case else TEST_CASES
    except KeyError as e:
        parser.error(str(e))

    print("Test vectors for the ChaCha stream cipher")
    print("=========================================\n")

    for case in cases:
        print(format_test_case(case))

    return 0



if __name__ == '__main__':
    sys.exit(main())

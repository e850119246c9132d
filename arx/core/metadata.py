from enum import Enum


class SizeType(Enum):
    NA        = 0
    ARBITRARY = 1
    SINGLE    = 2
    RANGE     = 3


class FrequencyType(Enum):
    UNUSUAL  = 0
    NORMAL   = 1
    PROLIFIC = 2


class EphemeralType(Enum):
    IV    = 0
    NONCE = 1
    KEY   = 2


class SizeSpec(object):
    """
    Admissible sizes, in bits, of a primitive's input.
    """

    def __init__(self, size_type: SizeType, sizes: object=None):
        self.size_type = size_type

        if size_type == SizeType.SINGLE and type(sizes) is int:
            sizes = [sizes]

        self.sizes = sizes


    def __repr__(self):
        return f"<SizeSpec: size_type={self.size_type}, sizes={self.sizes}>"


    def __str__(self):
        return self.__repr__()


    def __contains__(self, bits: int) -> bool:
        if self.size_type == SizeType.ARBITRARY:
            return True

        elif self.size_type == SizeType.NA:
            return False

        return bits in self.sizes


    @property
    def byte_sizes(self) -> list:
        return [size // 8 for size in self.sizes]



class EphemeralSpec(object):
    def __init__(self, ephemeral_type: EphemeralType, size: SizeSpec):
        self.ephemeral_type = ephemeral_type
        self.size = size


    def __repr__(self):
        return f"<EphemeralSpec: ephemeral_type={self.ephemeral_type}, size={self.size}>"


    def __str__(self):
        return self.__repr__()

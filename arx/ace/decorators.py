PRIMITIVE_REGISTRY = {}


def register_primitive():
    """
    Class decorator that records the primitive in `PRIMITIVE_REGISTRY` under its class name.
    """
    def _reg(cls):
        PRIMITIVE_REGISTRY[cls.__name__] = cls
        return cls

    return _reg

class ChaChaException(Exception):
    pass

class WrongKeyLength(ChaChaException, ValueError):
    pass

class WrongNonceLength(ChaChaException, ValueError):
    pass

class InvalidRounds(ChaChaException, ValueError):
    pass

class CounterExhausted(ChaChaException, OverflowError):
    pass

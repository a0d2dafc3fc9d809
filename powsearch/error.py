class PowError(Exception):
    def __init__(self, code: int, msg: str, *args):
        super().__init__(code, msg, *args)

    @property
    def code(self) -> int:
        return self.args[0]

    @property
    def msg(self) -> str:
        return self.args[1]


class ConfigurationError(PowError):
    def __init__(self, msg: str, *args):
        super().__init__(1, msg, *args)


class EncodingError(PowError):
    def __init__(self, msg: str, *args):
        super().__init__(2, msg, *args)


class SearchExhausted(PowError):
    def __init__(self, msg: str, *args):
        super().__init__(3, msg, *args)

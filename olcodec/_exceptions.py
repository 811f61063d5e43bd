class CodeLengthClampedWarning(Warning): ...


class InvalidCodeError(ValueError):
    def __init__(self, message: str, code: object):
        super().__init__(message)
        self.code = code


class InvalidCodeLengthError(ValueError): ...


class BufferTooSmallError(ValueError):
    def __init__(self, message: str, required_length: int, max_length: int):
        super().__init__(message)
        self.required_length = required_length
        self.max_length = max_length

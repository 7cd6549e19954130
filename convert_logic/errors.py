from __future__ import annotations


class ConvertError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CodecFailure(ConvertError):
    pass


class UnsupportedEncodingError(CodecFailure):
    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unsupported encoding: {encoding!r}")
        self.encoding = encoding


class CodecTableError(CodecFailure):
    pass


class TranslationFailure(ConvertError):
    pass


class TransportFailure(TranslationFailure):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseShapeFailure(TranslationFailure):
    pass

import microcan
from microcan import exceptions


def test_public_api_is_exported():
    for name in microcan.__all__:
        assert hasattr(microcan, name), name


def test_errors_share_a_base():
    for error in (
        exceptions.EmptyStackError,
        exceptions.InvalidColorFormatError,
        exceptions.UnsupportedShapeTypeError,
        exceptions.InvalidArgumentError,
    ):
        assert issubclass(error, exceptions.MicrocanError)


def test_errors_keep_builtin_bases():
    assert issubclass(exceptions.EmptyStackError, IndexError)
    assert issubclass(exceptions.InvalidColorFormatError, ValueError)
    assert issubclass(exceptions.UnsupportedShapeTypeError, TypeError)
    assert issubclass(exceptions.InvalidArgumentError, ValueError)

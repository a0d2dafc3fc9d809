from typing_extensions import Literal


def to_hex(values: bytes) -> str:
    """Most significant byte first, each byte preceded by a space."""
    return ''.join(' %02x' % values[pos] for pos in reversed(range(len(values))))


def to_binary(values: bytes) -> str:
    """
    Most significant byte first, eight bits per byte with the high bit first.
    Bytes are separated by a space and a line break starts every group of
    eight bytes, counted from byte 0.
    """
    output = []
    for pos in reversed(range(len(values))):
        if pos % 8 == 7:
            output.append('\n')
        output.append(' ' + format(values[pos], '08b'))
    return ''.join(output)


def render(values: bytes, style: Literal['hex', 'binary'] = 'hex') -> str:
    if style == 'hex':
        return to_hex(values)
    elif style == 'binary':
        return to_binary(values)
    raise ValueError('unknown style `%s`' % style)

"""
SMPP Message Text Codec

This module converts short message text to and from bytes according to the
SMPP data_coding field.
"""

from ..exceptions import SMPPEncodingException
from .constants import DataCoding
from .gsm import PASSTHROUGH, GsmCodec

_PYTHON_CODECS = {
    DataCoding.IA5_ASCII: 'ascii',
    DataCoding.LATIN_1: 'latin-1',
    DataCoding.CYRILLIC: 'iso-8859-5',
    DataCoding.LATIN_HEBREW: 'iso-8859-8',
    DataCoding.UCS2: 'utf-16-be',
}


def encode_message(message: str, data_coding: int, errors: str = PASSTHROUGH) -> bytes:
    """
    Encode a message using the specified data coding scheme.

    Args:
        message: Message text to encode
        data_coding: SMPP data coding value
        errors: GSM 03.38 error mode, used for the default alphabet only

    Returns:
        Encoded message bytes

    Raises:
        SMPPEncodingException: If the text cannot be represented
    """
    if data_coding == DataCoding.DEFAULT:
        return GsmCodec.encode(message, errors=errors)

    codec = _PYTHON_CODECS.get(data_coding, 'utf-8')
    try:
        return message.encode(codec)
    except UnicodeEncodeError as e:
        raise SMPPEncodingException(
            f'Message encoding error: {e}',
            character=message[e.start],
            position=e.start,
            original_error=e,
        ) from e


def decode_message(message_bytes: bytes, data_coding: int) -> str:
    """
    Decode a message using the specified data coding scheme.

    The default alphabet is read as septets and escapes only; the UCS-2
    entries of the GSM table never match inbound default-coded text.
    Octet and unknown codings are decoded as UTF-8 with replacement
    characters, since their payload is not text by contract.

    Raises:
        SMPPEncodingException: If decoding fails
    """
    if data_coding == DataCoding.DEFAULT:
        return GsmCodec.decode(message_bytes, ucs2_entries=False)

    codec = _PYTHON_CODECS.get(data_coding)
    if codec is None:
        return message_bytes.decode('utf-8', errors='replace')

    try:
        return message_bytes.decode(codec)
    except UnicodeDecodeError as e:
        raise SMPPEncodingException(
            f'Message decoding error: {e}', position=e.start, original_error=e
        ) from e

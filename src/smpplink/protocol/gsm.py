"""
GSM 03.38 Codec

Maps UTF-8 text onto GSM 03.38 default alphabet code points and packs 8-bit
octets into 7-bit septet streams. Based on the ETSI mapping at
http://www.unicode.org/Public/MAPPINGS/ETSI/GSM0338.TXT

Besides the default alphabet and its escape extension table, the mapping
carries a set of Cyrillic, Polish and emoji characters encoded as UCS-2
code units for gateways that accept that profile. The table is an interop
contract with those gateways and must stay byte-for-byte identical.

Characters without a mapping pass through unchanged by default; see
``GsmCodec.encode`` for the stricter modes.
"""

from typing import Dict, Optional

from ..exceptions import SMPPEncodingException

ESCAPE = 0x1B

# Error handling modes accepted by GsmCodec.encode
PASSTHROUGH = 'passthrough'
REPLACE = 'replace'
STRICT = 'strict'
ENCODE_ERROR_MODES = (PASSTHROUGH, REPLACE, STRICT)

# Characters of the default alphabet that need the escape prefix
EXTENSION_CHARACTERS = frozenset('^{}\\[~]|€')

GSM0338_MAP: Dict[str, bytes] = {
    '@': b'\x00',
    '£': b'\x01',
    '$': b'\x02',
    '¥': b'\x03',
    'è': b'\x04',
    'é': b'\x05',
    'ù': b'\x06',
    'ì': b'\x07',
    'ò': b'\x08',
    'Ç': b'\x09',
    'Ø': b'\x0B',
    'ø': b'\x0C',
    'Å': b'\x0E',
    'å': b'\x0F',
    'Δ': b'\x10',
    '_': b'\x11',
    'Φ': b'\x12',
    'Γ': b'\x13',
    'Λ': b'\x14',
    'Ω': b'\x15',
    'Π': b'\x16',
    'Ψ': b'\x17',
    'Σ': b'\x18',
    'Θ': b'\x19',
    'Ξ': b'\x1A',
    'Æ': b'\x1C',
    'æ': b'\x1D',
    'ß': b'\x1E',
    'É': b'\x1F',
    # Cyrillic as UCS-2 code units
    'А': b'\x04\x10',
    'Б': b'\x04\x11',
    'В': b'\x04\x12',
    'Г': b'\x04\x13',
    'Д': b'\x04\x14',
    'Е': b'\x04\x15',
    'Ё': b'\x04\x01',
    'Ж': b'\x04\x16',
    'З': b'\x04\x17',
    'И': b'\x04\x18',
    'Й': b'\x04\x19',
    'К': b'\x04\x1A',
    'Л': b'\x04\x1B',
    'М': b'\x04\x1C',
    'Н': b'\x04\x1D',
    'О': b'\x04\x1E',
    'П': b'\x04\x1F',
    'Р': b'\x04\x20',
    'С': b'\x04\x21',
    'Т': b'\x04\x22',
    'У': b'\x04\x23',
    'Ф': b'\x04\x24',
    'Х': b'\x04\x25',
    'Ц': b'\x04\x26',
    'Ч': b'\x04\x27',
    'Ш': b'\x04\x28',
    'Щ': b'\x04\x29',
    'Ь': b'\x04\x2A',
    'Ы': b'\x04\x2B',
    'Ъ': b'\x04\x2C',
    'Э': b'\x04\x2D',
    'Ю': b'\x04\x2E',
    'Я': b'\x04\x2F',
    'а': b'\x04\x30',
    'б': b'\x04\x31',
    'в': b'\x04\x32',
    'г': b'\x04\x33',
    'д': b'\x04\x34',
    'е': b'\x04\x35',
    'ё': b'\x04\x51',
    'ж': b'\x04\x36',
    'з': b'\x04\x37',
    'и': b'\x04\x38',
    'й': b'\x04\x39',
    'к': b'\x04\x3A',
    'л': b'\x04\x3B',
    'м': b'\x04\x3C',
    'н': b'\x04\x3D',
    'о': b'\x04\x3E',
    'п': b'\x04\x3F',
    'р': b'\x04\x40',
    'с': b'\x04\x41',
    'т': b'\x04\x42',
    'у': b'\x04\x43',
    'ф': b'\x04\x44',
    'х': b'\x04\x45',
    'ц': b'\x04\x46',
    'ч': b'\x04\x47',
    'ш': b'\x04\x48',
    'щ': b'\x04\x49',
    'ь': b'\x04\x4A',
    'ы': b'\x04\x4B',
    'ъ': b'\x04\x4C',
    'э': b'\x04\x4D',
    'ю': b'\x04\x4E',
    'я': b'\x04\x4F',
    # 0x20-0x3F are identical to ASCII
    '¡': b'\x40',
    'Ä': b'\x5B',
    'Ö': b'\x5C',
    'Ñ': b'\x5D',
    'Ü': b'\x5E',
    '§': b'\x5F',
    '¿': b'\x60',
    'ä': b'\x7B',
    'ö': b'\x7C',
    'ñ': b'\x7D',
    'ü': b'\x7E',
    'à': b'\x7F',
    # Extension table, escaped
    '^': b'\x1B\x14',
    '{': b'\x1B\x28',
    '}': b'\x1B\x29',
    '\\': b'\x1B\x2F',
    '[': b'\x1B\x3C',
    '~': b'\x1B\x3D',
    ']': b'\x1B\x3E',
    '|': b'\x1B\x40',
    '€': b'\x1B\x65',
    # Polish characters as UCS-2 code units
    'Ą': b'\x01\x04',
    'ą': b'\x01\x05',
    'Ć': b'\x01\x06',
    'ć': b'\x01\x07',
    'Ę': b'\x01\x18',
    'ę': b'\x01\x19',
    'Ł': b'\x01\x41',
    'ł': b'\x01\x42',
    'Ń': b'\x01\x43',
    'ń': b'\x01\x44',
    'Ó': b'\x00\xD3',
    'ó': b'\x00\xF3',
    'Ś': b'\x01\x5A',
    'ś': b'\x01\x5B',
    'Ż': b'\x01\x7B',
    'ż': b'\x01\x7C',
    'Ź': b'\x01\x79',
    'ź': b'\x01\x7A',
    # Symbols as UCS-2 code units
    '\U0001F641': b'\x26\x39',  # slightly frowning face
    '\U0001F642': b'\x26\x3A',  # slightly smiling face
    '\u270C\uFE0F': b'\x27\x0C',  # victory hand
    '\u270B': b'\x27\x0B',  # raised hand
    '\u270A': b'\x27\x0A',  # raised fist
}

GSM0338_REVERSE_MAP: Dict[bytes, str] = {v: k for k, v in GSM0338_MAP.items()}

# Default alphabet and escape extension only, without the UCS-2 entries
GSM0338_DEFAULT_REVERSE_MAP: Dict[bytes, str] = {
    v: k for k, v in GSM0338_MAP.items() if len(v) == 1 or v[0] == ESCAPE
}

_MAX_KEY_LENGTH = max(len(k) for k in GSM0338_MAP)
_MAX_CODE_LENGTH = max(len(v) for v in GSM0338_MAP.values())


class GsmCodec:
    """
    Stateless GSM 03.38 encoder/decoder and septet packer.

    Example Usage:

        packed = GsmCodec.pack_7bit(GsmCodec.encode('Hello {world}'))
    """

    @staticmethod
    def encode(text: str, errors: str = PASSTHROUGH) -> bytes:
        """
        Encode text into GSM 03.38 code points.

        Args:
            text: Text to encode
            errors: What to do with non-ASCII characters that have no
                mapping: 'passthrough' emits their UTF-8 bytes unchanged,
                'replace' substitutes '?' and 'strict' raises. Unmapped
                ASCII characters always pass through.

        Returns:
            Encoded bytes

        Raises:
            SMPPEncodingException: In strict mode, for an unmapped character
        """
        if errors not in ENCODE_ERROR_MODES:
            raise ValueError(f'Unknown error mode: {errors!r}')

        encoded = bytearray()
        position = 0
        length = len(text)

        while position < length:
            # Longest match first, some entries span two code points
            for width in range(min(_MAX_KEY_LENGTH, length - position), 0, -1):
                code = GSM0338_MAP.get(text[position : position + width])
                if code is not None:
                    encoded += code
                    position += width
                    break
            else:
                char = text[position]
                if char < '\x80':
                    encoded += char.encode('ascii')
                elif errors == REPLACE:
                    encoded += b'?'
                elif errors == STRICT:
                    raise SMPPEncodingException(
                        f'Character {char!r} has no GSM 03.38 mapping',
                        character=char,
                        position=position,
                    )
                else:
                    encoded += char.encode('utf-8', 'replace')
                position += 1

        return bytes(encoded)

    @staticmethod
    def decode(data: bytes, ucs2_entries: bool = True) -> str:
        """
        Decode GSM 03.38 code points back into text.

        With the UCS-2 entries enabled this is the inverse of ``encode`` for
        every table character: at every position the longest known code
        sequence wins, and unknown bytes are taken as UTF-8.

        Args:
            data: Encoded bytes
            ucs2_entries: Whether the two byte UCS-2 entries may match. Pass
                False for data known to hold default alphabet septets only,
                where a pair such as "è " would otherwise read as "Р".
        """
        reverse_map = GSM0338_REVERSE_MAP if ucs2_entries else GSM0338_DEFAULT_REVERSE_MAP
        data = bytes(data)
        decoded = []
        pending = bytearray()
        position = 0
        length = len(data)

        while position < length:
            for width in range(min(_MAX_CODE_LENGTH, length - position), 0, -1):
                char = reverse_map.get(data[position : position + width])
                if char is not None:
                    if pending:
                        decoded.append(pending.decode('utf-8', 'replace'))
                        pending.clear()
                    decoded.append(char)
                    position += width
                    break
            else:
                pending.append(data[position])
                position += 1

        if pending:
            decoded.append(pending.decode('utf-8', 'replace'))

        return ''.join(decoded)

    @staticmethod
    def count_encoded_length(text: str) -> int:
        """
        Count the GSM 03.38 characters an encoding of ``text`` would hold.

        Extension characters count twice since they carry an escape prefix.
        Cheaper than encoding when only the length is needed.
        """
        return len(text) + sum(1 for char in text if char in EXTENSION_CHARACTERS)

    @staticmethod
    def is_gsm_compatible(text: str) -> bool:
        """True if ``text`` encodes to 7-bit default alphabet values only."""
        for char in text:
            code = GSM0338_MAP.get(char)
            if code is None:
                if char >= '\x80':
                    return False
            elif len(code) > 1 and code[0] != ESCAPE:
                return False
        return True

    @staticmethod
    def pack_7bit(octets: bytes) -> bytes:
        """
        Pack 8-bit octets into a 7-bit GSM septet stream.

        Septet i occupies bits [7i, 7i+7) of the output, least significant
        bit first. The output is ceil(7 * len(octets) / 8) bytes long.
        """
        packed = bytearray()
        current = 0
        offset = 0

        for octet in octets:
            # cap off the eighth bit
            septet = octet & 0x7F
            current |= (septet << offset) & 0xFF
            offset += 7

            if offset > 7:
                # the current byte is full, carry the overflow bits
                packed.append(current)
                current = septet >> (15 - offset)
                offset -= 8

        if offset > 0:
            packed.append(current)

        return bytes(packed)

    @staticmethod
    def unpack_7bit(packed: bytes, septet_count: Optional[int] = None) -> bytes:
        """
        Unpack a 7-bit GSM septet stream into one octet per septet.

        Args:
            packed: Packed septet stream
            septet_count: Number of septets to extract. When omitted it is
                derived from the data length, and a trailing zero septet that
                only fills the last byte is dropped.

        Raises:
            SMPPEncodingException: If ``septet_count`` exceeds the data
        """
        infer = septet_count is None
        if infer:
            septet_count = len(packed) * 8 // 7
        elif septet_count * 7 > len(packed) * 8:
            raise SMPPEncodingException(
                f'Packed data holds fewer than {septet_count} septets'
            )

        septets = bytearray()
        bits = 0
        bit_count = 0

        for byte in packed:
            bits |= byte << bit_count
            bit_count += 8
            while bit_count >= 7 and len(septets) < septet_count:
                septets.append(bits & 0x7F)
                bits >>= 7
                bit_count -= 7

        # 7 fill bits at the end of a multiple of 7 bytes look like '@'
        if infer and len(packed) % 7 == 0 and septets and septets[-1] == 0:
            septets.pop()

        return bytes(septets)

"""Constants shared by the 8-bit checksum modules."""

BYTE_MASK = 0xFF
TABLE_SIZE = 256

# CRC-8 generator polynomials (MSB-first, implicit x^8 term)
CRC8_POLY_SMBUS = 0x07
CRC8_POLY_SENSIRION = 0x31  # x^8 + x^5 + x^4 + 1, used with init 0xFF
# SAE J1850 and AUTOSAR also seed with 0xFF and XOR the result with 0xFF
CRC8_POLY_SAE_J1850 = 0x1D
CRC8_POLY_AUTOSAR = 0x2F
CRC8_POLY_DVB_S2 = 0xD5

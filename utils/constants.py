"""BlurHash format constants."""

# Base83 digits, in the order every BlurHash implementation uses.
BASE83_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9
DEFAULT_COMPONENTS_X = 4
DEFAULT_COMPONENTS_Y = 3

BYTES_PER_PIXEL = 4

# Field widths in base83 digits
SIZE_FLAG_DIGITS = 1
MAX_VALUE_DIGITS = 1
DC_DIGITS = 4
AC_DIGITS = 2

# AC maximum is quantized in steps of 1/166, capped at 82
AC_MAX_SCALE = 166.0
AC_MAX_QUANT = 82

# Per-channel AC quantization: 19 levels centered on 9
AC_LEVELS = 19
AC_QUANT_MAX = 18

# Pixels linearized at once while projecting onto the cosine basis
BAND_PIXELS = 1 << 16

import logging

# our public exports, relatively minimal
from bitscan.bitarray import BitArray as BitArray, next_set_bit as next_set_bit
from bitscan.cursor import CursorState as CursorState, ScanCursor as ScanCursor
from bitscan.exc import (
    AllocationFailureError as AllocationFailureError,
    BitArrayDestroyedError as BitArrayDestroyedError,
    BitArrayError as BitArrayError,
    IndexOutOfRangeError as IndexOutOfRangeError,
)
from bitscan.utils import TRACE
from bitscan.words import WORD_BITS as WORD_BITS

logging.addLevelName(TRACE, "TRACE")

from .decoding import decode, load, read_file
from .encoding import dump, encode, write_file
from .header import Header, read_header

__all__ = [
    "decode",
    "dump",
    "encode",
    "Header",
    "load",
    "read_file",
    "read_header",
    "write_file",
]

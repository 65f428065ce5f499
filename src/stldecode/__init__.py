"""A library for decoding STL triangle meshes from their text and binary encodings."""

__all__ = [
    "SUPPORTED_ENCODINGS",
    "Facet",
    "STLEncodingError",
    "STLIncompleteError",
    "STLNumberError",
    "STLParseError",
    "STLStructureError",
    "STLTokenError",
    "Solid",
    "Vector3D",
    "decode",
    "decode_binary",
    "decode_text",
    "get_decoder",
]

from stldecode.decoders import SUPPORTED_ENCODINGS, get_decoder
from stldecode.exceptions import (
    STLEncodingError,
    STLIncompleteError,
    STLNumberError,
    STLParseError,
    STLStructureError,
    STLTokenError,
)
from stldecode.loader import decode, decode_binary, decode_text
from stldecode.mesh import Facet, Solid, Vector3D

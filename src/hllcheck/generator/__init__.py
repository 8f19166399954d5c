"""Synthetic stream generation and the parameter catalog."""

from hllcheck.generator.params import PARAMS, Parameter, select_params
from hllcheck.generator.stream import StreamGenerator, encode_value

__all__ = [
    "PARAMS",
    "Parameter",
    "StreamGenerator",
    "encode_value",
    "select_params",
]

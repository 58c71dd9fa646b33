"""Host adapter - transactional instance runner and external message codec.

Contents:
    * :mod:`.instance` - :class:`ContractInstance`
    * :mod:`.codec` - JSON decoding/encoding of messages and results
"""

from __future__ import annotations

from .codec import (
    MessageDecodeError,
    decode_execute_msg,
    decode_instantiate_msg,
    decode_query_msg,
    encode_query_result,
    encode_response,
)
from .instance import ContractInstance

__all__ = [
    "ContractInstance",
    "MessageDecodeError",
    "decode_execute_msg",
    "decode_instantiate_msg",
    "decode_query_msg",
    "encode_query_result",
    "encode_response",
]

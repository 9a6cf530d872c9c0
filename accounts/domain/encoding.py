"""
Address encoder interface (Port) and its default adapter.

The Email value object keeps a derived representation of its address next to
the address itself. The domain only needs the result to be stable for a given
address; how it is computed is up to the adapter.
"""

import base64
from typing import Protocol


class AddressEncoder(Protocol):
    """Produces a stable derived string from a normalized address."""

    def encode(self, address: str) -> str: ...


class Base64AddressEncoder:
    """Encodes the UTF-8 bytes of the address with standard base64."""

    def encode(self, address: str) -> str:
        return base64.b64encode(address.encode("utf-8")).decode("ascii")
